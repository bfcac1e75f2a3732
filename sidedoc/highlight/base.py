"""Base class for highlighting backends."""

from abc import ABC, abstractmethod

from ..languages import LanguageProfile

# Container markup every backend wraps its output in.
HIGHLIGHT_START = '<div class="highlight"><pre>'
HIGHLIGHT_END = "</pre></div>"


class Highlighter(ABC):
    """Contract for backends that turn raw code into highlighted HTML."""

    @abstractmethod
    def highlight(self, profile: LanguageProfile, payload: bytes) -> bytes:
        """Return UTF-8 HTML for `payload`, wrapped in the container markup.

        Divider lines in the payload must survive as whole lines that
        `profile.divider_html` recognises.
        """
