"""Exception taxonomy for the documentation pipeline.

Every error is scoped to a single source file. The orchestrator records it
against that file and carries on with the others unless fail-fast is set.
"""

from __future__ import annotations

from typing import Sequence


class SidedocError(RuntimeError):
    """Base class for all sidedoc failures."""


class UnsupportedLanguage(SidedocError):
    """Raised when a file extension has no registered language profile."""

    def __init__(self, path: str, supported: Sequence[str]) -> None:
        self.path = path
        self.supported = list(supported)
        listing = ", ".join(self.supported) or "(none)"
        super().__init__(f"{path}: unsupported language; supported extensions: {listing}")


class FileReadError(SidedocError):
    """Raised when a source file cannot be read or decoded."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: unable to read source: {cause}")


class HighlightError(SidedocError):
    """Base class for failures in the highlighting round trip."""


class HighlighterSpawnError(HighlightError):
    """The highlighter could not be started (missing executable, unknown lexer)."""


class HighlighterIOError(HighlightError):
    """Communication with the highlighter failed or it exited unsuccessfully."""


class SentinelMismatch(HighlightError):
    """Highlighted output could not be realigned with fragment boundaries."""

    def __init__(self, expected: int, found: int, language: str) -> None:
        self.expected = expected
        self.found = found
        self.language = language
        super().__init__(
            f"expected {expected} fragment divider(s) in {language} highlighter output, found {found}"
        )


__all__ = [
    "FileReadError",
    "HighlightError",
    "HighlighterIOError",
    "HighlighterSpawnError",
    "SentinelMismatch",
    "SidedocError",
    "UnsupportedLanguage",
]
