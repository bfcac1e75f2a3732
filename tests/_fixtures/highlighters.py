"""Highlighter doubles for exercising the coordinator without Pygments."""

from __future__ import annotations

from sidedoc.config import HighlighterConfig
from sidedoc.errors import HighlighterIOError
from sidedoc.highlight import HIGHLIGHT_END, HIGHLIGHT_START, Highlighter
from sidedoc.languages import LanguageProfile


class EchoHighlighter(Highlighter):
    """Returns its input unchanged inside the container markup."""

    def __init__(self) -> None:
        self.payloads: list[bytes] = []

    def highlight(self, profile: LanguageProfile, payload: bytes) -> bytes:
        self.payloads.append(payload)
        return HIGHLIGHT_START.encode() + payload + HIGHLIGHT_END.encode()


class DividerDroppingHighlighter(Highlighter):
    """Loses every divider line, as a misbehaving highlighter might."""

    def highlight(self, profile: LanguageProfile, payload: bytes) -> bytes:
        text = payload.decode("utf-8").replace(profile.divider_text, "\n")
        return (HIGHLIGHT_START + text + HIGHLIGHT_END).encode("utf-8")


class DividerDoublingHighlighter(Highlighter):
    """Emits every divider twice."""

    def highlight(self, profile: LanguageProfile, payload: bytes) -> bytes:
        text = payload.decode("utf-8").replace(profile.divider_text, profile.divider_text * 2)
        return (HIGHLIGHT_START + text + HIGHLIGHT_END).encode("utf-8")


def build_echo_highlighter(config: HighlighterConfig) -> EchoHighlighter:
    """Factory form of a plugin entry point."""
    return EchoHighlighter()


class FailingHighlighter(EchoHighlighter):
    """Fails for payloads containing a trigger word."""

    def __init__(self, trigger: str = "boom") -> None:
        super().__init__()
        self.trigger = trigger.encode("utf-8")

    def highlight(self, profile: LanguageProfile, payload: bytes) -> bytes:
        if self.trigger in payload:
            raise HighlighterIOError("highlighter crashed")
        return super().highlight(profile, payload)


__all__ = [
    "DividerDoublingHighlighter",
    "DividerDroppingHighlighter",
    "EchoHighlighter",
    "FailingHighlighter",
    "build_echo_highlighter",
]
