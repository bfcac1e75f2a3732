"""Coordinate documentation runs across source files."""

from __future__ import annotations

from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Dict, Iterable, Sequence

from .assembler import DocumentAssembler
from .config import SidedocConfig
from .errors import FileReadError, UnsupportedLanguage
from .highlight import HighlightCoordinator, Highlighter, build_highlighter
from .languages import LanguageRegistry, default_registry
from .logging import get_logger, log_exception
from .models import DocumentModel, RunResult
from .renderer import PageRenderer
from .splitter import split


class Orchestrator:
    """Runs the split, highlight, assemble and render pipeline for each file."""

    def __init__(
        self,
        config: SidedocConfig | None = None,
        *,
        registry: LanguageRegistry | None = None,
        highlighter: Highlighter | None = None,
        assembler: DocumentAssembler | None = None,
        renderer: PageRenderer | None = None,
    ) -> None:
        self.config = config or SidedocConfig(root=Path.cwd())
        self.registry = registry or default_registry().with_overrides(self.config.languages)
        self.coordinator = HighlightCoordinator(
            highlighter or build_highlighter(self.config.highlighter)
        )
        self.assembler = assembler or DocumentAssembler(self.config.markdown.extensions)
        self.renderer = renderer or PageRenderer(
            self.config.output_dir, templates_dir=self.config.templates_dir
        )
        self.logger = get_logger("orchestrator")

    def run(self, paths: Iterable[str]) -> RunResult:
        """Document every path in parallel and wait for all of them."""
        sources = sorted(str(path) for path in paths)
        result = RunResult()
        if not sources:
            self.logger.debug("No sources given; nothing to do")
            return result

        supported = []
        for source in sources:
            try:
                self.registry.resolve(source)
            except UnsupportedLanguage as exc:
                log_exception(self.logger, f"Failed to document {source}", exc)
                if self.config.fail_fast:
                    raise
                result.failures[source] = exc
                continue
            supported.append(source)
        # Nothing is written unless at least one source has a known language.
        if not supported:
            return result

        self.renderer.prepare_output()
        workers = max(1, min(len(supported), self.config.max_workers))
        self.logger.debug("Documenting %d file(s) with %d worker(s)", len(supported), workers)

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="sidedoc") as executor:
            futures: Dict[Future[Path], str] = {
                executor.submit(self.process, source, sources): source for source in supported
            }
            if self.config.fail_fast:
                self._raise_first_failure(futures)
            for future, source in futures.items():
                exc = future.exception()
                if exc is None:
                    result.outputs[source] = future.result()
                    continue
                log_exception(self.logger, f"Failed to document {source}", exc)
                result.failures[source] = exc
        return result

    def process(self, source: str, sources: Sequence[str]) -> Path:
        """Generate the page for one source file and return its path."""
        document = self.build_document(source, sources)
        target = self.renderer.write(document)
        self.logger.info("%s -> %s", source, target)
        return target

    def build_document(self, source: str, sources: Sequence[str]) -> DocumentModel:
        profile = self.registry.resolve(source)
        raw = self._read(source)
        try:
            fragments = split(profile, raw, encoding=self.config.encoding)
        except UnicodeDecodeError as exc:
            raise FileReadError(source, exc) from exc
        self.logger.debug("Split %s into %d fragment(s)", source, len(fragments))
        highlighted = self.coordinator.highlight(profile, fragments)
        return self.assembler.assemble(source, highlighted, sources)

    @staticmethod
    def _read(source: str) -> bytes:
        try:
            return Path(source).read_bytes()
        except OSError as exc:
            raise FileReadError(source, exc) from exc

    def _raise_first_failure(self, futures: Dict[Future[Path], str]) -> None:
        done, pending = wait(futures, return_when=FIRST_EXCEPTION)
        for future in pending:
            future.cancel()
        for future in done:
            exc = future.exception()
            if exc is not None:
                log_exception(self.logger, f"Failed to document {futures[future]}", exc)
                raise exc


__all__ = ["Orchestrator"]
