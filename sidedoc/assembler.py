"""Turn highlighted fragments into a template-ready document."""

from __future__ import annotations

from pathlib import PurePath
from typing import List, Sequence

import markdown

from .config import DEFAULT_MARKDOWN_EXTENSIONS
from .models import DocumentModel, Fragment, RenderedFragment


class DocumentAssembler:
    """Renders documentation with Markdown and numbers the fragments."""

    def __init__(self, extensions: Sequence[str] | None = None) -> None:
        self.extensions = list(DEFAULT_MARKDOWN_EXTENSIONS if extensions is None else extensions)

    def render_docs(self, text: str) -> str:
        """Render one fragment's documentation on its own."""
        return markdown.markdown(text, extensions=self.extensions)

    def assemble(
        self,
        source: str,
        fragments: Sequence[Fragment],
        sources: Sequence[str],
    ) -> DocumentModel:
        rendered: List[RenderedFragment] = []
        for index, fragment in enumerate(fragments, start=1):
            if fragment.code_html is None:
                raise ValueError(f"{source}: fragment {index} has not been highlighted")
            rendered.append(
                RenderedFragment(
                    docs_html=self.render_docs(fragment.docs_text),
                    code_html=fragment.code_html,
                    index=index,
                )
            )
        return DocumentModel(
            source=source,
            title=PurePath(source).name,
            fragments=tuple(rendered),
            sources=tuple(sources),
            multiple=len(sources) > 1,
        )


__all__ = ["DocumentAssembler"]
