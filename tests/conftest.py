"""Root conftest — shared test configuration and fixtures."""

import os

import pytest

from docstore.core.store import Store
from tests.fakes import RecordingTeardown

# Keep a developer's shell settings from leaking into tests
os.environ.setdefault("DOCSTORE_LOG_FORMAT", "text")
os.environ.setdefault("DOCSTORE_DEFAULT_DOC_STRATEGY", "local")


@pytest.fixture
def teardown() -> RecordingTeardown:
    return RecordingTeardown()


@pytest.fixture
def store(teardown: RecordingTeardown) -> Store:
    return Store(teardown=teardown)
