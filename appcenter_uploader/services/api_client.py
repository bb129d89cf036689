"""HTTP adapter for App Center API operations."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ..exceptions import AppCenterAPIError
from ..models import UploadConfig

logger = logging.getLogger(__name__)


class HTTPAPIClient:
    """
    HTTP client adapter for API calls.

    Implements IAPIClient protocol.
    """

    def __init__(self, config: UploadConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self._config.api_url,
            timeout=self._config.timeout,
            headers={
                "X-API-Token": self._config.api_token,
                "Accept": "application/json",
            },
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args):
        if self._client:
            await self._client.aclose()
            self._client = None

    async def post(self, endpoint: str, json: Dict) -> Any:
        if not self._client:
            raise RuntimeError("HTTPAPIClient not initialized. Use 'async with' context.")

        logger.debug("POST %s", endpoint)
        response = await self._client.post(endpoint, json=json)

        if response.status_code >= 400:
            try:
                error_detail = response.json()
            except ValueError:
                error_detail = response.text
            raise AppCenterAPIError(response.status_code, "POST", endpoint, error_detail)

        try:
            return response.json()
        except ValueError as exc:
            raise AppCenterAPIError(
                response.status_code, "POST", endpoint, f"invalid JSON body: {exc}"
            ) from exc
