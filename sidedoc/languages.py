"""Language profiles keyed by file extension."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from pathlib import PurePath
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Tuple

from .errors import UnsupportedLanguage

DIVIDER_TOKEN = "SIDEDOC_DIVIDER"


@dataclass(frozen=True)
class LanguageProfile:
    """Comment syntax and highlighter settings for one language."""

    name: str
    symbol: str
    comment_matcher: re.Pattern[str]
    divider_text: str
    divider_html: re.Pattern[str]

    @classmethod
    def compile(cls, name: str, symbol: str) -> "LanguageProfile":
        """Derive the comment matcher and divider patterns for a language."""
        if not name or not symbol:
            raise ValueError("language profiles need both a highlighter name and a comment symbol")
        comment_matcher = re.compile(r"^\s*" + re.escape(symbol) + r"\s?")
        divider = symbol + DIVIDER_TOKEN
        # Highlighters escape markup characters and may wrap the line in one
        # span of any token class; the divider must occupy a whole line.
        divider_html = re.compile(
            r"\n*^(?:<span></span>)?(?:<span class=\"[^\"]*\">)?"
            + re.escape(html.escape(divider, quote=False))
            + r"(?:</span>)?$\n*",
            re.MULTILINE,
        )
        return cls(
            name=name,
            symbol=symbol,
            comment_matcher=comment_matcher,
            divider_text=f"\n{divider}\n",
            divider_html=divider_html,
        )

    def is_comment(self, line: str) -> bool:
        return self.comment_matcher.match(line) is not None

    def strip_comment(self, line: str) -> str:
        return self.comment_matcher.sub("", line, count=1)


# extension -> (highlighter name, single-line comment symbol)
BUILTIN_LANGUAGES: Tuple[Tuple[str, str, str], ...] = (
    (".go", "go", "//"),
    (".py", "python", "#"),
    (".rb", "ruby", "#"),
    (".js", "javascript", "//"),
    (".mjs", "javascript", "//"),
    (".ts", "typescript", "//"),
    (".c", "c", "//"),
    (".h", "c", "//"),
    (".cc", "cpp", "//"),
    (".cpp", "cpp", "//"),
    (".hpp", "cpp", "//"),
    (".cs", "csharp", "//"),
    (".java", "java", "//"),
    (".kt", "kotlin", "//"),
    (".scala", "scala", "//"),
    (".swift", "swift", "//"),
    (".rs", "rust", "//"),
    (".php", "php", "//"),
    (".coffee", "coffeescript", "#"),
    (".sh", "bash", "#"),
    (".pl", "perl", "#"),
    (".r", "r", "#"),
    (".R", "r", "#"),
    (".yml", "yaml", "#"),
    (".yaml", "yaml", "#"),
    (".toml", "toml", "#"),
    (".lua", "lua", "--"),
    (".sql", "sql", "--"),
    (".hs", "haskell", "--"),
    (".erl", "erlang", "%"),
    (".tex", "tex", "%"),
    (".clj", "clojure", ";;"),
    (".lisp", "common-lisp", ";;"),
    (".scm", "scheme", ";;"),
)


class LanguageRegistry:
    """Read-only mapping from file extension to `LanguageProfile`."""

    def __init__(self, profiles: Mapping[str, LanguageProfile]) -> None:
        self._profiles: Mapping[str, LanguageProfile] = MappingProxyType(dict(profiles))

    @classmethod
    def from_table(cls, table: Iterable[Tuple[str, str, str]]) -> "LanguageRegistry":
        return cls(
            {extension: LanguageProfile.compile(name, symbol) for extension, name, symbol in table}
        )

    @property
    def extensions(self) -> list[str]:
        return sorted(self._profiles)

    def resolve(self, path: str) -> LanguageProfile:
        """Return the profile for `path` or raise `UnsupportedLanguage`."""
        extension = PurePath(path).suffix
        profile = self._profiles.get(extension)
        if profile is None:
            raise UnsupportedLanguage(str(path), self.extensions)
        return profile

    def with_overrides(self, overrides: Mapping[str, Mapping[str, Any]]) -> "LanguageRegistry":
        """Return a new registry with extra or replaced languages."""
        if not overrides:
            return self
        merged: Dict[str, LanguageProfile] = dict(self._profiles)
        for extension, entry in overrides.items():
            key = extension if extension.startswith(".") else f".{extension}"
            merged[key] = LanguageProfile.compile(str(entry["name"]), str(entry["symbol"]))
        return LanguageRegistry(merged)

    def __contains__(self, extension: object) -> bool:
        return extension in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)


def default_registry() -> LanguageRegistry:
    """Build the registry of built-in languages."""
    return LanguageRegistry.from_table(BUILTIN_LANGUAGES)


__all__ = [
    "BUILTIN_LANGUAGES",
    "DIVIDER_TOKEN",
    "LanguageProfile",
    "LanguageRegistry",
    "default_registry",
]
