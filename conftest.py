"""Workspace-level pytest configuration and fixtures."""

import pytest

from propbind.services import ComponentRegistry


@pytest.fixture
def registry():
    """Provide a fresh ComponentRegistry that is closed after the test.

    Each test gets its own bootstrap scope, so registrations never leak
    between tests.
    """
    registry = ComponentRegistry()

    yield registry

    registry.close()
