"""Batch every code fragment of a file through one highlighter call."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from ..errors import HighlighterIOError, SentinelMismatch
from ..languages import LanguageProfile
from ..logging import get_logger
from ..models import Fragment
from .base import HIGHLIGHT_END, HIGHLIGHT_START, Highlighter


class HighlightCoordinator:
    """Joins fragment code with divider lines, highlights once, and splits the result.

    Exactly one divider separates each pair of neighbouring fragments; any
    other count raises `SentinelMismatch` rather than shifting code into the
    wrong fragment.
    """

    def __init__(self, highlighter: Highlighter) -> None:
        self.highlighter = highlighter
        self.logger = get_logger("highlight")

    def highlight(self, profile: LanguageProfile, fragments: Sequence[Fragment]) -> List[Fragment]:
        if not fragments:
            return []

        payload = profile.divider_text.join(fragment.code_text for fragment in fragments)
        raw = self.highlighter.highlight(profile, payload.encode("utf-8"))
        try:
            output = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HighlighterIOError(f"{profile.name} highlighter returned invalid UTF-8: {exc}") from exc
        output = output.replace(HIGHLIGHT_START, "").replace(HIGHLIGHT_END, "")

        pieces = self._split_output(profile, output, len(fragments))
        self.logger.debug("Highlighted %d fragment(s) as %s", len(pieces), profile.name)
        return [
            replace(fragment, code_html=HIGHLIGHT_START + piece + HIGHLIGHT_END)
            for fragment, piece in zip(fragments, pieces)
        ]

    @staticmethod
    def _split_output(profile: LanguageProfile, output: str, count: int) -> List[str]:
        expected = count - 1
        pieces: List[str] = []
        remaining = output
        for position in range(count):
            match = profile.divider_html.search(remaining)
            if position == count - 1:
                if match is not None:
                    found = expected + 1 + len(profile.divider_html.findall(remaining[match.end():]))
                    raise SentinelMismatch(expected, found, profile.name)
                pieces.append(remaining)
                break
            if match is None:
                raise SentinelMismatch(expected, position, profile.name)
            pieces.append(remaining[: match.start()])
            remaining = remaining[match.end():]
        return pieces


__all__ = ["HighlightCoordinator"]
