"""Highlighting through the external `pygmentize` executable."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ..errors import HighlighterIOError, HighlighterSpawnError
from ..languages import LanguageProfile
from ..logging import get_logger
from .base import Highlighter


@dataclass
class HighlightRequest:
    """A single invocation of the highlighter process."""

    args: Sequence[str]
    payload: bytes
    timeout: Optional[float]


class PygmentizeHighlighter(Highlighter):
    """Pipes each file's batched code through one `pygmentize` process."""

    def __init__(
        self,
        executable: str = "pygmentize",
        *,
        timeout: Optional[float] = None,
        runner: Callable[[HighlightRequest], bytes] | None = None,
    ) -> None:
        self.executable = executable
        self.timeout = timeout
        self._runner = runner or self._process_runner
        self.logger = get_logger("highlight.pygmentize")

    def command(self, profile: LanguageProfile) -> List[str]:
        return [self.executable, "-l", profile.name, "-f", "html", "-O", "encoding=utf-8"]

    def highlight(self, profile: LanguageProfile, payload: bytes) -> bytes:
        request = HighlightRequest(
            args=self.command(profile),
            payload=payload,
            timeout=self.timeout,
        )
        self.logger.debug("Running %s (%d bytes)", " ".join(request.args), len(payload))
        return self._runner(request)

    @staticmethod
    def _process_runner(request: HighlightRequest) -> bytes:
        try:
            # Popen starts the process before any input is written;
            # communicate() feeds stdin and drains stdout concurrently.
            process = subprocess.Popen(
                list(request.args),
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            raise HighlighterSpawnError(
                f"Unable to start '{request.args[0]}': {exc}. Install Pygments or configure another backend."
            ) from exc

        try:
            stdout, stderr = process.communicate(request.payload, timeout=request.timeout)
        except subprocess.TimeoutExpired as exc:
            process.kill()
            process.communicate()
            raise HighlighterIOError(
                f"'{request.args[0]}' did not finish within {request.timeout} seconds"
            ) from exc
        except OSError as exc:
            process.kill()
            process.wait()
            raise HighlighterIOError(f"Pipe to '{request.args[0]}' failed: {exc}") from exc

        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            raise HighlighterIOError(
                f"'{request.args[0]}' exited with code {process.returncode}: {detail}"
            )
        return stdout


__all__ = ["HighlightRequest", "PygmentizeHighlighter"]
