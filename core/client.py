"""Thin async HTTP client for the Gridly REST API.

Every call issues exactly one request with a fresh httpx.AsyncClient. Nothing is
cached between calls.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import httpx

from core.config import Settings
from core.errors import RemoteApiError
from utils.get_endpoint import get_endpoint

logger = logging.getLogger(__name__)


def encode_query_value(value: Any) -> str:
    """Scalars go out as plain tokens, structured values as compact JSON."""
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


class GridlyClient:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        # tests inject an httpx.MockTransport here
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"ApiKey {self.settings.api_key}",
        }

    async def _send(
        self,
        method: str,
        endpoint: str,
        path_params: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        body: Any = None,
    ) -> httpx.Response:
        url = get_endpoint(self.settings, endpoint, **(path_params or {}))
        query = {k: encode_query_value(v) for k, v in (params or {}).items() if v is not None}
        content = json.dumps(body) if body is not None else None

        async with httpx.AsyncClient(transport=self._transport, timeout=self.settings.request_timeout) as client:
            logger.debug(f"{method} {url} params={list(query)}")
            # httpx only sends a body with DELETE through request()
            return await client.request(method, url, params=query or None, content=content, headers=self.headers)

    async def request_json(
        self,
        method: str,
        endpoint: str,
        path_params: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        """Send a request and return the parsed JSON body.

        Raises RemoteApiError on a non-success status. Transport and JSON decoding
        errors propagate unchanged.
        """
        resp = await self._send(method, endpoint, path_params, params, body)
        if resp.is_error:
            logger.error(f"{method} {resp.request.url} returned HTTP {resp.status_code}")
            raise RemoteApiError(resp.status_code, resp.text, method, str(resp.request.url))
        return resp.json()

    async def delete(
        self,
        endpoint: str,
        path_params: Optional[Dict[str, Any]] = None,
        body: Any = None,
    ) -> bool:
        """Send a DELETE and report success as a boolean.

        Only 204 No Content counts as success; any other status is a soft failure.
        """
        resp = await self._send("DELETE", endpoint, path_params, body=body)
        if resp.status_code == httpx.codes.NO_CONTENT:
            return True
        logger.warning(f"DELETE {resp.request.url} returned HTTP {resp.status_code}, expected 204")
        return False
