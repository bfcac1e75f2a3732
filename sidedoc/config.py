"""Configuration loading for sidedoc (.sidedoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import SidedocError

CONFIG_FILENAME = ".sidedoc.yml"

DEFAULT_OUTPUT_DIR = Path("docs")
DEFAULT_MARKDOWN_EXTENSIONS = ("fenced_code", "footnotes", "smarty", "tables")
DEFAULT_MAX_WORKERS = 8


class ConfigError(SidedocError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class HighlighterConfig:
    """Which highlighting backend to run and how."""

    backend: str = "pygmentize"
    executable: str = "pygmentize"
    timeout: Optional[float] = None


@dataclass
class MarkdownConfig:
    """Python-Markdown extensions applied to documentation text."""

    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS))


@dataclass
class SidedocConfig:
    """Represents the settings defined in .sidedoc.yml."""

    root: Path
    output_dir: Path = DEFAULT_OUTPUT_DIR
    encoding: str = "utf-8"
    max_workers: int = DEFAULT_MAX_WORKERS
    fail_fast: bool = False
    templates_dir: Optional[Path] = None
    highlighter: HighlighterConfig = field(default_factory=HighlighterConfig)
    markdown: MarkdownConfig = field(default_factory=MarkdownConfig)
    languages: Dict[str, Dict[str, str]] = field(default_factory=dict)


def load_config(config_path: Path) -> SidedocConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SidedocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = SidedocConfig(root=root)

    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config.output_dir = root / output_dir
    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        config.templates_dir = root / templates_dir
    encoding = _as_str(data.get("encoding"))
    if encoding:
        config.encoding = encoding

    max_workers = _as_int(data.get("max_workers"))
    if max_workers is not None:
        if max_workers < 1:
            raise ConfigError("max_workers must be a positive integer")
        config.max_workers = max_workers
    fail_fast = _as_bool(data.get("fail_fast"))
    if fail_fast is not None:
        config.fail_fast = fail_fast

    highlighter_data = _as_dict(data.get("highlighter"))
    if highlighter_data:
        timeout = _as_float(highlighter_data.get("timeout"))
        if timeout is not None and timeout <= 0:
            raise ConfigError("highlighter.timeout must be a positive number of seconds")
        config.highlighter = HighlighterConfig(
            backend=_as_str(highlighter_data.get("backend")) or HighlighterConfig.backend,
            executable=_as_str(highlighter_data.get("executable")) or HighlighterConfig.executable,
            timeout=timeout,
        )

    markdown_data = _as_dict(data.get("markdown"))
    if markdown_data and "extensions" in markdown_data:
        config.markdown = MarkdownConfig(extensions=_as_str_list(markdown_data.get("extensions")))

    config.languages = _parse_languages(data.get("languages"))
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_languages(value: Any) -> Dict[str, Dict[str, str]]:
    languages: Dict[str, Dict[str, str]] = {}
    for extension, entry in _as_dict(value).items():
        entry = _as_dict(entry)
        name = _as_str(entry.get("name"))
        symbol = _as_str(entry.get("symbol"))
        if not name or not symbol:
            raise ConfigError(f"language '{extension}' needs both 'name' and 'symbol'")
        languages[str(extension)] = {"name": name, "symbol": symbol}
    return languages


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "HighlighterConfig",
    "MarkdownConfig",
    "SidedocConfig",
    "load_config",
]
