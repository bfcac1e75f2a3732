"""Split annotated source into documentation/code fragments."""

from __future__ import annotations

from typing import List

from .languages import LanguageProfile
from .models import Fragment


def split_lines(text: str) -> List[str]:
    """Split on newlines; a trailing newline ends the last line rather than starting a new one."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def split(profile: LanguageProfile, raw: bytes | str, *, encoding: str = "utf-8") -> List[Fragment]:
    """Split source into ordered fragments.

    Comment lines accumulate into the documentation of the current fragment.
    The first comment line after a run of code closes the fragment, so the
    code of every fragment is a contiguous block. The trailing fragment is
    always emitted, which guarantees at least one fragment per file.

    Raises `UnicodeDecodeError` when `raw` is bytes that do not decode.
    """
    text = raw.decode(encoding) if isinstance(raw, bytes) else raw
    fragments: List[Fragment] = []
    docs: List[str] = []
    code: List[str] = []
    has_code = False

    for line in split_lines(text):
        if profile.is_comment(line):
            if has_code:
                fragments.append(Fragment(docs_text="".join(docs), code_text="".join(code)))
                docs, code = [], []
                has_code = False
            docs.append(profile.strip_comment(line) + "\n")
        else:
            has_code = True
            code.append(line + "\n")

    fragments.append(Fragment(docs_text="".join(docs), code_text="".join(code)))
    return fragments


__all__ = ["split", "split_lines"]
