from urllib.parse import quote

from core.config import Settings
from core.errors import ConfigurationError


def get_endpoint(settings: Settings, key: str, **path_params) -> str:
    """Resolve an endpoint key from `api_paths` into an absolute URL.

    Path parameters are percent-encoded so an opaque id can never change the path.
    """
    path = settings.api_paths.get(key)
    if not path:
        raise ConfigurationError(f"Missing API path for key '{key}' under 'api_paths'")

    encoded = {name: quote(str(value), safe="") for name, value in path_params.items()}
    try:
        path = path.format(**encoded)
    except KeyError as e:
        raise ConfigurationError(f"API path '{key}' needs parameter {e}") from e

    return f"{settings.api_base_url.rstrip('/')}{path}"
