"""Tests for ghstats.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from ghstats.core.config import (
    ColorMode,
    Config,
    GithubConfig,
    RemotesConfig,
    default_config_path,
    load_config,
    load_config_or_default,
)
from ghstats.core.errors import ConfigError
from ghstats.core.result import Err, Ok


class TestDefaults:
    def test_github_defaults(self) -> None:
        config = GithubConfig()
        assert config.api_url == "https://api.github.com"
        assert config.host == "github"
        assert config.timeout == 30.0
        assert config.token is None

    def test_remotes_defaults(self) -> None:
        assert RemotesConfig().preferred == "origin"

    def test_color_default_is_auto(self) -> None:
        assert Config().output.color is ColorMode.AUTO

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.github = GithubConfig()  # type: ignore[misc]


class TestFromDict:
    """Test Config.from_dict parsing."""

    def test_empty_dict_gives_defaults(self) -> None:
        config = Config.from_dict({}, env={})
        assert config == Config()

    def test_full_table(self) -> None:
        data: dict[str, object] = {
            "github": {"api_url": "https://ghe.example.com/api/v3/", "timeout": 5, "host": "ghe"},
            "remotes": {"preferred": "upstream", "timeout": 3},
            "output": {"color": "never"},
        }
        config = Config.from_dict(data, env={})
        assert config.github.api_url == "https://ghe.example.com/api/v3"
        assert config.github.timeout == 5.0
        assert config.github.host == "ghe"
        assert config.remotes.preferred == "upstream"
        assert config.remotes.timeout == 3.0
        assert config.output.color is ColorMode.NEVER

    def test_token_from_env(self) -> None:
        config = Config.from_dict({}, env={"GITHUB_TOKEN": "secret"})
        assert config.github.token == "secret"

    def test_wrong_types_fall_back(self) -> None:
        data: dict[str, object] = {"github": {"timeout": "soon", "host": 3}}
        config = Config.from_dict(data, env={})
        assert config.github.timeout == 30.0
        assert config.github.host == "github"

    def test_unknown_color_raises(self) -> None:
        with pytest.raises(ValueError):
            Config.from_dict({"output": {"color": "sometimes"}}, env={})


class TestLoadConfig:
    def test_load_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[remotes]\npreferred = "upstream"\n', encoding="utf-8")

        result = load_config(path, env={})

        assert isinstance(result, Ok)
        assert result.value.remotes.preferred == "upstream"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "nope.toml", env={})

        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[github\n", encoding="utf-8")

        result = load_config(path, env={})

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_invalid_color(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[output]\ncolor = "rainbow"\n', encoding="utf-8")

        result = load_config(path, env={})

        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message


class TestDefaultLocation:
    def test_env_var_wins(self, tmp_path: Path) -> None:
        target = tmp_path / "custom.toml"
        assert default_config_path({"GHSTATS_CONFIG": str(target)}) == target

    def test_xdg_config_home(self, tmp_path: Path) -> None:
        path = default_config_path({"XDG_CONFIG_HOME": str(tmp_path)})
        assert path == tmp_path / "ghstats" / "config.toml"

    def test_missing_default_gives_defaults(self, tmp_path: Path) -> None:
        result = load_config_or_default(None, env={"XDG_CONFIG_HOME": str(tmp_path)})
        assert result == Ok(Config())

    def test_missing_explicit_path_is_error(self, tmp_path: Path) -> None:
        result = load_config_or_default(tmp_path / "missing.toml", env={})
        assert isinstance(result, Err)

    def test_default_file_is_read(self, tmp_path: Path) -> None:
        path = tmp_path / "ghstats" / "config.toml"
        path.parent.mkdir()
        path.write_text('[output]\ncolor = "always"\n', encoding="utf-8")

        result = load_config_or_default(None, env={"XDG_CONFIG_HOME": str(tmp_path)})

        assert isinstance(result, Ok)
        assert result.value.output.color is ColorMode.ALWAYS
