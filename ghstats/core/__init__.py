"""Core types: results, errors, configuration."""

from .config import ColorMode, Config, load_config, load_config_or_default
from .errors import (
    AppError,
    ConfigError,
    DecodeError,
    ErrorCode,
    ExecutionError,
    FetchError,
    NetworkError,
    NoRemoteFoundError,
    OutputError,
    ResolveError,
)
from .result import Err, Ok, Result

__all__ = [
    # Result
    "Ok",
    "Err",
    "Result",
    # Errors
    "AppError",
    "ConfigError",
    "DecodeError",
    "ErrorCode",
    "ExecutionError",
    "FetchError",
    "NetworkError",
    "NoRemoteFoundError",
    "OutputError",
    "ResolveError",
    # Config
    "ColorMode",
    "Config",
    "load_config",
    "load_config_or_default",
]
