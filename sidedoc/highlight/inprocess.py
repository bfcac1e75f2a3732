"""In-process highlighting with the Pygments library."""

from __future__ import annotations

import pygments
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from ..errors import HighlighterSpawnError
from ..languages import LanguageProfile
from .base import Highlighter


class PygmentsHighlighter(Highlighter):
    """Produces the same markup as `pygmentize -f html` without a subprocess."""

    def highlight(self, profile: LanguageProfile, payload: bytes) -> bytes:
        try:
            lexer = get_lexer_by_name(profile.name)
        except ClassNotFound as exc:
            raise HighlighterSpawnError(f"Pygments has no lexer named '{profile.name}'") from exc
        return pygments.highlight(payload.decode("utf-8"), lexer, HtmlFormatter(encoding="utf-8"))


__all__ = ["PygmentsHighlighter"]
