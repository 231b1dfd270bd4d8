"""Unit tests for config settings and loaders."""

import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from kp_query.config.settings import (
    API_MAX_LIMIT,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    QuerySettings,
)
from kp_query.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

_KP_VARS = (
    "KP_DEFAULT_RATING_SOURCE",
    "KP_DEFAULT_LIMIT",
    "KP_MAX_LIMIT",
    "KP_LOG_LEVEL",
    "KP_LOG_JSON",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # load_dotenv writes straight into os.environ; keep it on a throwaway copy.
    environ = {k: v for k, v in os.environ.items() if k not in _KP_VARS}
    monkeypatch.setattr(os, "environ", environ)


# ---------------------------------------------------------------------------
# Generic settings class used by the coercion tests
# ---------------------------------------------------------------------------


@dataclass
class ClientSettings:
    env_prefix: ClassVar[str] = "CLIENT"

    token: str = "demo"
    timeout: float = 5.0
    verbose: bool = False
    fields: list[str] = field(default_factory=list)


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLIENT_TOKEN", "ABC-123")
        assert EnvSettingsLoader().load(ClientSettings).token == "ABC-123"

    def test_loads_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLIENT_TIMEOUT", "2.5")
        assert EnvSettingsLoader().load(ClientSettings).timeout == 2.5

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("CLIENT_VERBOSE", truthy)
            assert EnvSettingsLoader().load(ClientSettings).verbose is True
        for falsy in ("false", "0", "no", "off"):
            monkeypatch.setenv("CLIENT_VERBOSE", falsy)
            assert EnvSettingsLoader().load(ClientSettings).verbose is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLIENT_FIELDS", "id, name ,year")
        assert EnvSettingsLoader().load(ClientSettings).fields == ["id", "name", "year"]

    def test_defaults_preserved_when_env_absent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("CLIENT_TOKEN", "CLIENT_TIMEOUT", "CLIENT_VERBOSE", "CLIENT_FIELDS"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(ClientSettings)
        assert settings == ClientSettings()

    def test_missing_required_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        @dataclass
        class StrictSettings:
            env_prefix: ClassVar[str] = "STRICT"
            api_key: str = dataclasses.field()

        monkeypatch.delenv("STRICT_API_KEY", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(StrictSettings)
        assert exc_info.value.setting_name == "api_key"
        assert exc_info.value.env_var == "STRICT_API_KEY"

    def test_uncoercible_value_raises_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLIENT_TIMEOUT", "soon")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(ClientSettings)
        assert exc_info.value.setting_name == "timeout"
        assert exc_info.value.env_var == "CLIENT_TIMEOUT"
        assert exc_info.value.value == "soon"
        assert isinstance(exc_info.value.cause, ValueError)

    def test_rejects_non_dataclass(self) -> None:
        class NotSettings:
            pass

        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(NotSettings)


# ---------------------------------------------------------------------------
# QuerySettings
# ---------------------------------------------------------------------------


class TestQuerySettings:
    def test_defaults(self) -> None:
        settings = QuerySettings()
        assert settings.default_rating_source == "kp"
        assert settings.default_limit == 10
        assert settings.max_limit == API_MAX_LIMIT == 250
        assert settings.log_level == "INFO"
        assert settings.log_json is True

    def test_loaded_from_kp_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KP_DEFAULT_RATING_SOURCE", "imdb")
        monkeypatch.setenv("KP_DEFAULT_LIMIT", "50")
        monkeypatch.setenv("KP_LOG_JSON", "false")
        settings = EnvSettingsLoader().load(QuerySettings)
        assert settings.default_rating_source == "imdb"
        assert settings.default_limit == 50
        assert settings.log_json is False

    @pytest.mark.parametrize("limit", [0, -1, 251])
    def test_default_limit_out_of_range(self, limit: int) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            QuerySettings(default_limit=limit)
        assert exc_info.value.setting_name == "default_limit"
        assert exc_info.value.env_var == "KP_DEFAULT_LIMIT"
        assert exc_info.value.detail == {
            "value": limit,
            "reason": "must be between 1 and 250",
            "setting": "default_limit",
            "env_var": "KP_DEFAULT_LIMIT",
        }

    def test_default_limit_bounded_by_max_limit(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            QuerySettings(default_limit=60, max_limit=50)

    def test_max_limit_above_api_cap(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            QuerySettings(max_limit=1000)
        assert exc_info.value.setting_name == "max_limit"

    def test_unknown_rating_source(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            QuerySettings(default_rating_source="metacritic")
        assert exc_info.value.setting_name == "default_rating_source"

    def test_invalid_env_value_surfaces_as_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KP_DEFAULT_LIMIT", "500")
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader().load(QuerySettings)
        assert exc_info.value.env_var == "KP_DEFAULT_LIMIT"

    def test_env_var_name(self) -> None:
        assert QuerySettings.env_var("log_json") == "KP_LOG_JSON"


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("KP_DEFAULT_LIMIT=25\nKP_LOG_LEVEL=DEBUG\n")
        settings = DotenvSettingsLoader(str(env_file)).load(QuerySettings)
        assert settings.default_limit == 25
        assert settings.log_level == "DEBUG"

    def test_process_env_wins_without_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("KP_DEFAULT_LIMIT=25\n")
        monkeypatch.setenv("KP_DEFAULT_LIMIT", "40")
        settings = DotenvSettingsLoader(str(env_file)).load(QuerySettings)
        assert settings.default_limit == 40

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        settings = DotenvSettingsLoader(str(tmp_path / "absent.env")).load(QuerySettings)
        assert settings.default_limit == 10
