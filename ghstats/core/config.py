"""Typed configuration loading and access.

The config file is optional TOML:

    [github]
    api_url = "https://api.github.com"
    timeout = 30
    host = "github"

    [remotes]
    preferred = "origin"
    timeout = 30

    [output]
    color = "auto"
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .errors import ConfigError
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_table

__all__ = [
    "ColorMode",
    "Config",
    "GithubConfig",
    "RemotesConfig",
    "OutputConfig",
    "default_config_path",
    "load_config",
    "load_config_or_default",
    "DEFAULT_API_URL",
    "DEFAULT_HOST",
    "DEFAULT_PREFERRED_REMOTE",
    "DEFAULT_TIMEOUT_SECONDS",
]

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_HOST = "github"
DEFAULT_PREFERRED_REMOTE = "origin"
DEFAULT_TIMEOUT_SECONDS = 30.0

CONFIG_ENV_VAR = "GHSTATS_CONFIG"
TOKEN_ENV_VAR = "GITHUB_TOKEN"


class ColorMode(str, Enum):
    """When to emit terminal colors."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class GithubConfig:
    """GitHub API settings."""

    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    host: str = DEFAULT_HOST
    token: str | None = None


@dataclass(frozen=True, slots=True)
class RemotesConfig:
    """Remote resolution settings."""

    preferred: str = DEFAULT_PREFERRED_REMOTE
    timeout: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class OutputConfig:
    color: ColorMode = ColorMode.AUTO


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    github: GithubConfig = field(default_factory=GithubConfig)
    remotes: RemotesConfig = field(default_factory=RemotesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object], env: Mapping[str, str] | None = None) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If output.color is not a known mode.
        """
        env = os.environ if env is None else env
        github: StrDict = get_table(data, "github") or {}
        remotes: StrDict = get_table(data, "remotes") or {}
        output: StrDict = get_table(data, "output") or {}

        color = get_str(output, "color")
        return cls(
            github=GithubConfig(
                api_url=(get_str(github, "api_url") or DEFAULT_API_URL).rstrip("/"),
                timeout=float(get_int(github, "timeout") or DEFAULT_TIMEOUT_SECONDS),
                host=get_str(github, "host") or DEFAULT_HOST,
                token=env.get(TOKEN_ENV_VAR) or None,
            ),
            remotes=RemotesConfig(
                preferred=get_str(remotes, "preferred") or DEFAULT_PREFERRED_REMOTE,
                timeout=float(get_int(remotes, "timeout") or DEFAULT_TIMEOUT_SECONDS),
            ),
            output=OutputConfig(color=ColorMode(color) if color else ColorMode.AUTO),
        )


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Location of the config file when --config is not given."""
    env = os.environ if env is None else env
    explicit = env.get(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()
    xdg = env.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / "ghstats" / "config.toml"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path, env: Mapping[str, str] | None = None) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to config.toml
        env: Environment to read GITHUB_TOKEN from (defaults to os.environ)

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value, env))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Result[Config, ConfigError]:
    """Load config, falling back to defaults when no file is present.

    An explicitly given path must exist; the default location may be absent.
    """
    if path is not None:
        return load_config(path, env)

    default = default_config_path(env)
    if not default.exists():
        return Ok(Config.from_dict({}, env))
    return load_config(default, env)
