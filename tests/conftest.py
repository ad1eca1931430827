"""Test configuration and fixtures for the books service."""

from tests.fixtures import *  # noqa: F401,F403
