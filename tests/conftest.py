from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.workspace_builder import RecordingFileSystem, WorkspaceBuilder


@pytest.fixture
def workspace_builder(tmp_path: Path) -> WorkspaceBuilder:
    """Provide a reusable builder for project roots under the pytest tmp_path."""
    return WorkspaceBuilder(tmp_path)


@pytest.fixture
def recording_fs() -> RecordingFileSystem:
    """Local filesystem wrapper that records every call made through it."""
    return RecordingFileSystem()


@pytest.fixture(autouse=True)
def _reset_adrman_logger():
    """Undo configure_logging() calls so caplog keeps seeing adrman records."""
    yield
    logger = logging.getLogger("adrman")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
