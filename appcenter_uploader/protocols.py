"""
Protocols (Interfaces) for Dependency Inversion.

Small interfaces for the collaborators the tasks call into.
"""
from typing import Any, Dict, Protocol, runtime_checkable

from .models import (
    ReleaseUploadBeginRequest,
    ReleaseUploadBeginResponse,
    SymbolUploadBeginRequest,
    SymbolUploadBeginResponse,
)


@runtime_checkable
class ILogSink(Protocol):
    """Write-only destination for progress lines."""

    def write(self, line: str) -> None:
        ...


@runtime_checkable
class IAPIClient(Protocol):
    """Interface for API operations."""

    async def post(self, endpoint: str, json: Dict) -> Any:
        """POST request to API, returning the decoded body."""
        ...


@runtime_checkable
class IAppCenterService(Protocol):
    """Remote operations that hand out upload resources."""

    async def begin_release_upload(
        self,
        owner_name: str,
        app_name: str,
        request: ReleaseUploadBeginRequest,
    ) -> ReleaseUploadBeginResponse:
        """Begin a release upload and return its upload slot."""
        ...

    async def begin_symbol_upload(
        self,
        owner_name: str,
        app_name: str,
        request: SymbolUploadBeginRequest,
    ) -> SymbolUploadBeginResponse:
        """Begin a debug symbol upload and return its upload slot."""
        ...


@runtime_checkable
class IAppCenterServiceFactory(Protocol):
    """Hands out service instances to tasks."""

    def create_service(self) -> IAppCenterService:
        ...
