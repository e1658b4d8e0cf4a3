"""Regeneration of the command catalog.

Runs the ``makedocs`` tool shipped with BlitzMax, which rewrites
``commands.txt`` from module sources.  Output lines are streamed to an
optional callback.  Whatever the outcome, the given index is invalidated so
the next lookup reloads the catalog from disk.
"""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from blitzdoc.config.paths import makedocs_path
from blitzdoc.core.catalog.index import CommandIndex

logger = logging.getLogger(__name__)

class RebuildError(RuntimeError):
    """Raised when ``makedocs`` cannot be started or exits with an error."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode

@dataclass
class RebuildResult:
    """Outcome of a successful catalog regeneration."""

    returncode: int
    duration_seconds: float
    lines: int

def _stop_process(process: subprocess.Popen[str]) -> None:
    """Terminate *process*, killing it if it does not exit promptly."""
    process.terminate()
    try:
        process.wait(timeout=5)
    except subprocess.TimeoutExpired:
        process.kill()
        process.wait()

def rebuild_catalog(
    blitzmax_root: Path,
    index: CommandIndex | None = None,
    on_output: Callable[[str], None] | None = None,
) -> RebuildResult:
    """Regenerate ``commands.txt`` by running ``<root>/bin/makedocs``.

    Args:
        blitzmax_root: Root of the BlitzMax installation.
        index: Index to invalidate once the tool has finished.
        on_output: Called with each non-trivial output line (stdout and
            stderr merged).

    Returns:
        A :class:`RebuildResult` describing the run.

    Raises:
        RebuildError: If the tool cannot be started or exits non-zero.
    """
    executable = makedocs_path(blitzmax_root)
    start = time.perf_counter()
    line_count = 0

    try:
        try:
            process = subprocess.Popen(
                [str(executable)],
                cwd=blitzmax_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as exc:
            raise RebuildError(f"Failed to start {executable}: {exc}") from exc

        with process:
            try:
                assert process.stdout is not None
                for raw_line in process.stdout:
                    line = raw_line.strip()
                    if len(line) <= 1:
                        continue
                    line_count += 1
                    if on_output is not None:
                        on_output(line)
                returncode = process.wait()
            except KeyboardInterrupt:
                logger.info("Documentation rebuild cancelled")
                _stop_process(process)
                raise
            except BaseException:
                _stop_process(process)
                raise

        duration = time.perf_counter() - start
        logger.info("Rebuild documentation time: %.2fs", duration)

        if returncode != 0:
            raise RebuildError(
                f"makedocs exited with code {returncode}", returncode=returncode
            )

        return RebuildResult(
            returncode=returncode,
            duration_seconds=duration,
            lines=line_count,
        )
    finally:
        if index is not None:
            index.invalidate()
