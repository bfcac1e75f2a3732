"""Side-by-side literate documentation for commented source files."""

from .errors import (
    FileReadError,
    HighlightError,
    HighlighterIOError,
    HighlighterSpawnError,
    SentinelMismatch,
    SidedocError,
    UnsupportedLanguage,
)
from .languages import LanguageProfile, LanguageRegistry, default_registry
from .models import DocumentModel, Fragment, RenderedFragment, RunResult
from .orchestrator import Orchestrator
from .splitter import split

__version__ = "0.1.0"

__all__ = [
    "DocumentModel",
    "FileReadError",
    "Fragment",
    "HighlightError",
    "HighlighterIOError",
    "HighlighterSpawnError",
    "LanguageProfile",
    "LanguageRegistry",
    "Orchestrator",
    "RenderedFragment",
    "RunResult",
    "SentinelMismatch",
    "SidedocError",
    "UnsupportedLanguage",
    "default_registry",
    "split",
]
