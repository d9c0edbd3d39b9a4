"""Run external commands, returning stdout or a ProcessError."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from ghstats.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that did not exit cleanly.

    ``returncode`` is -1 when the process never ran or was killed on timeout.
    """

    command: tuple[str, ...]
    returncode: int
    stderr: str

    @property
    def message(self) -> str:
        return self.stderr.strip() or f"exit {self.returncode}"


def run(cmd: list[str], cwd: Path, *, timeout: float | None = None) -> Result[str, ProcessError]:
    """Run cmd in cwd and return its decoded stdout."""
    command = tuple(cmd)
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return Err(ProcessError(command, -1, f"timed out after {timeout}s"))
    except OSError as e:
        return Err(ProcessError(command, -1, str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command, proc.returncode, proc.stderr))
    return Ok(proc.stdout)
