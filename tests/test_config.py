import pytest

from core.config import CONFIG_PATH_ENV, DEFAULT_API_URL, Settings, get_config, load_settings
from core.errors import ConfigurationError
from utils.get_endpoint import get_endpoint


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)


def test_missing_api_key_is_fatal():
    with pytest.raises(ConfigurationError, match="GRIDLY_API_KEY"):
        load_settings(env={})


def test_blank_api_key_is_fatal():
    with pytest.raises(ConfigurationError):
        load_settings(env={"GRIDLY_API_KEY": "   "})


def test_defaults(tmp_path):
    empty = tmp_path / "config.yaml"
    empty.write_text("")
    settings = load_settings(config_path=empty, env={"GRIDLY_API_KEY": "k"})
    assert settings.api_key == "k"
    assert settings.api_base_url == DEFAULT_API_URL
    assert settings.request_timeout is None
    assert settings.api_paths["grid"] == "/grids/{grid_id}"


def test_yaml_and_env_overrides(tmp_path):
    cfg = tmp_path / "gridly.yaml"
    cfg.write_text(
        "gridly_api_url: https://yaml.example/v1/\n"
        "request_timeout: 5\n"
        "logs_dir: /tmp/gridly-logs\n"
        "api_paths:\n"
        "  grid: /v2grids/{grid_id}\n"
    )
    settings = load_settings(config_path=cfg, env={"GRIDLY_API_KEY": "k"})
    assert settings.api_base_url == "https://yaml.example/v1"
    assert settings.request_timeout == 5.0
    assert settings.logs_dir == "/tmp/gridly-logs"
    assert settings.api_paths["grid"] == "/v2grids/{grid_id}"
    assert settings.api_paths["view"] == "/views/{view_id}"

    settings = load_settings(config_path=cfg, env={"GRIDLY_API_KEY": "k", "GRIDLY_API_URL": "https://env.example/v1"})
    assert settings.api_base_url == "https://env.example/v1"


def test_config_path_from_env(tmp_path):
    cfg = tmp_path / "other.yaml"
    cfg.write_text("request_timeout: 12\n")
    settings = load_settings(env={"GRIDLY_API_KEY": "k", CONFIG_PATH_ENV: str(cfg)})
    assert settings.request_timeout == 12.0


def test_explicit_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        get_config(tmp_path / "nope.yaml")


def test_bad_timeout(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("request_timeout: soon\n")
    with pytest.raises(ConfigurationError, match="request_timeout"):
        load_settings(config_path=cfg, env={"GRIDLY_API_KEY": "k"})


def test_non_mapping_yaml(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("- a\n- b\n")
    with pytest.raises(ConfigurationError, match="mapping"):
        get_config(cfg)


def test_settings_repr_hides_key():
    assert "secret" not in repr(Settings(api_key="secret"))


def test_settings_are_immutable():
    settings = Settings(api_key="k")
    with pytest.raises(Exception):
        settings.api_key = "other"
    with pytest.raises(TypeError):
        settings.api_paths["grid"] = "/x"


class TestGetEndpoint:
    def test_builds_absolute_url(self):
        settings = Settings(api_key="k", api_base_url="https://api.example/v1")
        assert get_endpoint(settings, "column", view_id="v1", column_id="c1") == "https://api.example/v1/views/v1/columns/c1"

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="frobnicate"):
            get_endpoint(Settings(api_key="k"), "frobnicate")

    def test_missing_path_parameter(self):
        with pytest.raises(ConfigurationError, match="view_id"):
            get_endpoint(Settings(api_key="k"), "view")

    def test_path_parameters_are_quoted(self):
        url = get_endpoint(Settings(api_key="k", api_base_url="https://h/v1"), "grid", grid_id="a b/c")
        assert url == "https://h/v1/grids/a%20b%2Fc"
