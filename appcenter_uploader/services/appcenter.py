"""
App Center service - Single Responsibility: begin uploads on the API.

Maps typed requests to REST calls and decodes the responses.
"""
from typing import Any, Callable, Dict, TypeVar
from urllib.parse import quote

from ..exceptions import AppCenterAPIError
from ..models import (
    ReleaseUploadBeginRequest,
    ReleaseUploadBeginResponse,
    SymbolUploadBeginRequest,
    SymbolUploadBeginResponse,
)
from ..protocols import IAPIClient

T = TypeVar("T")


class AppCenterService:
    """
    Remote upload service backed by the App Center REST API.

    Implements IAppCenterService protocol.
    """

    def __init__(self, api_client: IAPIClient):
        """
        Initialize service.

        Args:
            api_client: HTTP client for API calls
        """
        self._api = api_client

    @staticmethod
    def _app_path(owner_name: str, app_name: str) -> str:
        return f"v0.1/apps/{quote(owner_name, safe='')}/{quote(app_name, safe='')}"

    @staticmethod
    def _decode(endpoint: str, body: Any, parse: Callable[[Dict[str, Any]], T]) -> T:
        if not isinstance(body, dict):
            raise AppCenterAPIError(None, "POST", endpoint, f"unexpected body: {body!r}")
        try:
            return parse(body)
        except KeyError as exc:
            raise AppCenterAPIError(None, "POST", endpoint, f"missing field {exc}") from exc

    async def begin_release_upload(
        self,
        owner_name: str,
        app_name: str,
        request: ReleaseUploadBeginRequest,
    ) -> ReleaseUploadBeginResponse:
        endpoint = f"{self._app_path(owner_name, app_name)}/uploads/releases"
        body = await self._api.post(endpoint, json=request.to_json())
        return self._decode(endpoint, body, ReleaseUploadBeginResponse.from_json)

    async def begin_symbol_upload(
        self,
        owner_name: str,
        app_name: str,
        request: SymbolUploadBeginRequest,
    ) -> SymbolUploadBeginResponse:
        endpoint = f"{self._app_path(owner_name, app_name)}/symbol_uploads"
        body = await self._api.post(endpoint, json=request.to_json())
        return self._decode(endpoint, body, SymbolUploadBeginResponse.from_json)


class AppCenterServiceFactory:
    """Creates AppCenterService instances sharing one API client."""

    def __init__(self, api_client: IAPIClient):
        self._api = api_client

    def create_service(self) -> AppCenterService:
        return AppCenterService(self._api)
