from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from sidedoc.languages import LanguageProfile, LanguageRegistry, default_registry
from tests._fixtures.source_tree import SourceTree


@pytest.fixture
def source_tree(tmp_path: Path) -> SourceTree:
    """Provide a source tree rooted at the pytest tmp_path."""
    return SourceTree(tmp_path)


@pytest.fixture(scope="session")
def registry() -> LanguageRegistry:
    return default_registry()


@pytest.fixture(scope="session")
def go(registry: LanguageRegistry) -> LanguageProfile:
    return registry.resolve("main.go")


@pytest.fixture(scope="session")
def python(registry: LanguageRegistry) -> LanguageProfile:
    return registry.resolve("main.py")


@pytest.fixture(autouse=True)
def _reset_sidedoc_logger() -> Iterator[None]:
    """Undo handler changes made by `configure_logging` during CLI tests."""
    yield
    logger = logging.getLogger("sidedoc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
