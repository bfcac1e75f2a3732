"""Highlighting backends and backend discovery."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict, Iterable, List

from ..config import ConfigError, HighlighterConfig
from .base import HIGHLIGHT_END, HIGHLIGHT_START, Highlighter
from .coordinator import HighlightCoordinator
from .inprocess import PygmentsHighlighter
from .pygmentize import HighlightRequest, PygmentizeHighlighter

_ENTRY_POINT_GROUP = "sidedoc.highlighters"

_BUILTIN_FACTORIES: Dict[str, Callable[[HighlighterConfig], Highlighter]] = {
    "pygmentize": lambda config: PygmentizeHighlighter(config.executable, timeout=config.timeout),
    "pygments": lambda config: PygmentsHighlighter(),
}


def available_backends() -> List[str]:
    """Return built-in and plugin backend names, sorted."""
    names = set(_BUILTIN_FACTORIES)
    names.update(entry.name for entry in _iter_entry_points())
    return sorted(names)


def build_highlighter(config: HighlighterConfig) -> Highlighter:
    """Instantiate the backend named by `config.backend`."""
    name = config.backend.lower()
    factory = _BUILTIN_FACTORIES.get(name)
    if factory is not None:
        return factory(config)

    for entry in _iter_entry_points():
        if entry.name.lower() != name:
            continue
        try:
            loaded = entry.load()
        except Exception as exc:
            raise ConfigError(f"Failed to load highlighter entry point '{entry.name}': {exc}") from exc
        return _coerce_highlighter(loaded, config)

    known = ", ".join(available_backends())
    raise ConfigError(f"Unknown highlighter backend '{config.backend}' (available: {known})")


def _coerce_highlighter(obj: object, config: HighlighterConfig) -> Highlighter:
    if isinstance(obj, Highlighter):
        return obj
    if isinstance(obj, type) and issubclass(obj, Highlighter):
        return obj()
    if callable(obj):
        instance = obj(config)
        if isinstance(instance, Highlighter):
            return instance
    raise ConfigError("Highlighter entry point must be a Highlighter subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "HIGHLIGHT_END",
    "HIGHLIGHT_START",
    "HighlightCoordinator",
    "HighlightRequest",
    "Highlighter",
    "PygmentizeHighlighter",
    "PygmentsHighlighter",
    "available_backends",
    "build_highlighter",
]
