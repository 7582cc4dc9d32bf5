import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

import yaml
from dotenv import load_dotenv

from core.errors import ConfigurationError

API_KEY_ENV = "GRIDLY_API_KEY"
API_URL_ENV = "GRIDLY_API_URL"
CONFIG_PATH_ENV = "GRIDLY_MCP_CONFIG"

DEFAULT_API_URL = "https://api.gridly.com/v1"
# None: wait for the remote as long as it takes
DEFAULT_TIMEOUT = None

# Endpoint key -> path template. Placeholders are filled by utils.get_endpoint.
DEFAULT_API_PATHS = {
    "projects": "/projects",
    "project": "/projects/{project_id}",
    "databases": "/databases",
    "database": "/databases/{database_id}",
    "grids": "/grids",
    "grid": "/grids/{grid_id}",
    "views": "/views",
    "view": "/views/{view_id}",
    "columns": "/views/{view_id}/columns",
    "column": "/views/{view_id}/columns/{column_id}",
    "dependencies": "/views/{view_id}/dependencies",
    "dependency": "/views/{view_id}/dependencies/{dependency_id}",
    "records": "/views/{view_id}/records",
    "record_history": "/views/{view_id}/records/{record_id}/history",
}


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup and passed around explicitly."""

    api_key: str
    api_base_url: str = DEFAULT_API_URL
    request_timeout: Optional[float] = DEFAULT_TIMEOUT
    api_paths: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(DEFAULT_API_PATHS)))
    logs_dir: Optional[str] = None

    def __repr__(self) -> str:
        return f"Settings(api_base_url={self.api_base_url!r}, request_timeout={self.request_timeout!r})"


class ConfigLoader:
    """Read the optional YAML config file.

    The default location is config.yaml at the repository root; GRIDLY_MCP_CONFIG
    points elsewhere. A missing default file is fine, a missing explicit one is not.
    """

    def __init__(self, config_path: Optional[str | Path] = None):
        explicit = config_path or os.environ.get(CONFIG_PATH_ENV)
        if explicit:
            self.config_path = Path(explicit).expanduser().resolve()
            self.required = True
        else:
            self.config_path = (Path(__file__).resolve().parent.parent / "config.yaml").resolve()
            self.required = False

    def get_config(self) -> dict[str, Any]:
        if not self.config_path.is_file():
            if self.required:
                raise ConfigurationError(f"Config file not found: {self.config_path}")
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{self.config_path} must contain a mapping at top level")
        return data


def get_config(config_path: Optional[str | Path] = None) -> dict[str, Any]:
    """Helper returning the parsed YAML config as a dictionary."""
    return ConfigLoader(config_path).get_config()


def load_settings(config_path: Optional[str | Path] = None, env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from config.yaml and the environment.

    Loads a .env file first unless an explicit `env` mapping is given.
    Raises ConfigurationError when GRIDLY_API_KEY is missing.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    api_key = (env.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV} environment variable is required")

    cfg = get_config(config_path or env.get(CONFIG_PATH_ENV))

    base_url = env.get(API_URL_ENV) or cfg.get("gridly_api_url") or DEFAULT_API_URL
    base_url = str(base_url).rstrip("/")

    timeout = cfg.get("request_timeout", DEFAULT_TIMEOUT)
    if timeout is not None:
        try:
            timeout = float(timeout)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"request_timeout must be a number, got {timeout!r}") from e

    paths = dict(DEFAULT_API_PATHS)
    overrides = cfg.get("api_paths") or {}
    if not isinstance(overrides, dict):
        raise ConfigurationError("api_paths must be a mapping of endpoint key to path")
    paths.update({str(k): str(v) for k, v in overrides.items()})

    return Settings(
        api_key=api_key,
        api_base_url=base_url,
        request_timeout=timeout,
        api_paths=MappingProxyType(paths),
        logs_dir=cfg.get("logs_dir"),
    )
