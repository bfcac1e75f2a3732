"""Core data models shared across sidedoc components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence


@dataclass(frozen=True)
class Fragment:
    """A block of documentation followed by the code it describes."""

    docs_text: str
    code_text: str
    docs_html: Optional[str] = None
    code_html: Optional[str] = None


@dataclass(frozen=True)
class RenderedFragment:
    """Template-ready fragment; `index` is 1-based and drives anchors."""

    docs_html: str
    code_html: str
    index: int


@dataclass(frozen=True)
class DocumentModel:
    """Everything the page template needs for one source file."""

    source: str
    title: str
    fragments: Sequence[RenderedFragment]
    sources: Sequence[str]
    multiple: bool


@dataclass
class RunResult:
    """Outcome of documenting a batch of source files."""

    outputs: Dict[str, Path] = field(default_factory=dict)
    failures: Dict[str, Exception] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures

    def failed_sources(self) -> List[str]:
        return sorted(self.failures)
