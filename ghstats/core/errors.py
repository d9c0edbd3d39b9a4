"""Error types and exit codes.

Expected failures are plain frozen dataclasses carried inside ``Err`` values.
``ErrorCode`` maps them to process exit codes, which should remain stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

__all__ = [
    "ErrorCode",
    "ConfigError",
    "ExecutionError",
    "NoRemoteFoundError",
    "NetworkError",
    "DecodeError",
    "OutputError",
    "ResolveError",
    "FetchError",
    "AppError",
]


class ErrorCode(IntEnum):
    """Exit codes for the CLI.

    - 0: Success
    - 1: User error (no GitHub remote, bad config)
    - 2: Environment error (git missing, not a repository)
    - 4: Network error (API unreachable, bad response)
    - 5: I/O error (output could not be written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4
    IO_ERROR = 5


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Config file could not be read or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ExecutionError:
    """The remote-listing command could not run or exited non-zero.

    Attributes:
        command: Command line that was executed
        message: Error details (stderr, OS error, timeout)
        returncode: Process exit code (-1 if the process never ran)
    """

    command: str
    message: str
    returncode: int = -1


@dataclass(frozen=True, slots=True)
class NoRemoteFoundError:
    """No remote line matched the host marker and URL grammar."""

    host: str


@dataclass(frozen=True, slots=True)
class NetworkError:
    """Release request failed at the transport or HTTP level.

    Attributes:
        url: Requested URL
        status: HTTP status code (0 for transport failures)
        message: Human-readable reason
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@dataclass(frozen=True, slots=True)
class DecodeError:
    """Release response was not well-formed."""

    url: str
    message: str


@dataclass(frozen=True, slots=True)
class OutputError:
    """Rendered report could not be written."""

    message: str


type ResolveError = ExecutionError | NoRemoteFoundError
type FetchError = NetworkError | DecodeError
type AppError = ConfigError | ResolveError | FetchError | OutputError
