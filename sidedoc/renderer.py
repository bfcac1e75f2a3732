"""Render document models into HTML pages with Jinja2."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path, PurePath
from typing import List

from jinja2 import Environment, FileSystemLoader

from .models import DocumentModel

PAGE_TEMPLATE = "page.html.j2"
STYLESHEET_NAME = "sidedoc.css"

_PACKAGE_DIR = Path(__file__).parent
_TEMPLATES_DIR = _PACKAGE_DIR / "templates"
_STYLESHEET = _PACKAGE_DIR / "resources" / STYLESHEET_NAME


def basename(source: str) -> str:
    return PurePath(source).name


def page_name(source: str) -> str:
    """Return the page file name for a source: `lib/parse.go` -> `parse.html`."""
    return f"{PurePath(source).stem}.html"


def destination(source: str, output_dir: Path) -> Path:
    """Compute the output location of the page generated for `source`."""
    return Path(output_dir) / page_name(source)


class PageRenderer:
    """Fills the page template and writes pages into the output directory."""

    def __init__(self, output_dir: Path, *, templates_dir: Path | None = None) -> None:
        self.output_dir = Path(output_dir)
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def render(self, document: DocumentModel) -> str:
        template = self._env.get_template(PAGE_TEMPLATE)
        return template.render(document=document, stylesheet=STYLESHEET_NAME)

    def write(self, document: DocumentModel) -> Path:
        """Render and write the page; a failed write leaves no page behind."""
        html = self.render(document)
        target = destination(document.source, self.output_dir)
        handle, temp_name = tempfile.mkstemp(
            dir=str(self.output_dir), prefix=f".{target.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(handle, "w", encoding="utf-8", newline="") as stream:
                stream.write(html)
            os.replace(temp_name, target)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
        return target

    def prepare_output(self) -> Path:
        """Create the output directory and copy the stylesheet into it."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        target = self.output_dir / STYLESHEET_NAME
        shutil.copyfile(_STYLESHEET, target)
        return target

    def _create_env(self, templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(_TEMPLATES_DIR))
        env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.globals["base"] = basename
        env.globals["destination"] = page_name
        return env


__all__ = ["PageRenderer", "basename", "destination", "page_name"]
