"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ghstats.core.errors import (
    AppError,
    ConfigError,
    DecodeError,
    ErrorCode,
    ExecutionError,
    NetworkError,
    NoRemoteFoundError,
    OutputError,
)

if TYPE_CHECKING:
    from ghstats.git.remotes import RemoteAdvisory
    from ghstats.output.console import ConsoleProtocol

__all__ = ["print_error", "print_advisories", "error_exit_code"]


def print_error(error: AppError, console: ConsoleProtocol) -> None:
    """Print a fatal error to the diagnostic console."""
    match error:
        case ConfigError(message=message):
            console.error(message)
        case ExecutionError(command=command, message=message, returncode=rc):
            console.error(f"{command} failed (exit {rc}): {message}")
        case NoRemoteFoundError(host=host):
            console.error(f"no {host} remote found in this repository")
        case NetworkError():
            console.error(f"request failed: {error}")
        case DecodeError(url=url, message=message):
            console.error(f"unexpected response from {url}: {message}")
        case OutputError(message=message):
            console.error(message)


def print_advisories(advisories: tuple[RemoteAdvisory, ...], console: ConsoleProtocol) -> None:
    for advisory in advisories:
        console.warning(str(advisory))


def error_exit_code(error: AppError) -> int:
    """Get exit code for an error."""
    match error:
        case ConfigError() | NoRemoteFoundError():
            return int(ErrorCode.USER_ERROR)
        case ExecutionError():
            return int(ErrorCode.ENV_ERROR)
        case NetworkError() | DecodeError():
            return int(ErrorCode.NETWORK_ERROR)
        case OutputError():
            return int(ErrorCode.IO_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.USER_ERROR)
