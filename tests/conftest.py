from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.doc_tree import DocTree


@pytest.fixture
def doc_tree(tmp_path: Path) -> DocTree:
    """Provide a document tree rooted at the pytest tmp_path."""
    return DocTree(tmp_path)


@pytest.fixture(autouse=True)
def _propagate_doctoc_logs() -> Iterator[None]:
    # configure_logging() detaches the doctoc logger from the root logger,
    # which would hide records from caplog in later tests.
    logger = logging.getLogger("doctoc")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
