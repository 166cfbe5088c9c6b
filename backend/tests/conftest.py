"""Root conftest: shared test configuration and store fixtures."""

import logging
import os

import pytest

# Settings() needs a key; never use a real one in tests
os.environ.setdefault("API_KEY", "test-api-key")

from condo_api.core.entity_store import EntityStore  # noqa: E402


@pytest.fixture
def store() -> EntityStore:
    """Fresh store holding the startup seed data."""
    return EntityStore.seeded()


@pytest.fixture
def empty_store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
