"""Result type for explicit error handling.

Every pipeline stage returns ``Ok(value)`` or ``Err(error)`` instead of
raising for expected failures (no remote, network down, bad JSON...).
Callers branch with ``match`` or ``isinstance``:

    match fetch_report(http, coordinate):
        case Ok(report):
            render_report(report, sys.stdout, ColorMode.AUTO)
        case Err(error):
            print_error(error, console)
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Ok", "Err", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result; error is usually a frozen error dataclass."""

    error: E


type Result[T, E] = Ok[T] | Err[E]
