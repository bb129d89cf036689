"""Task creating the upload resources for an app release and its debug symbols."""
from __future__ import annotations

import logging

from ..exceptions import InternalTaskError
from ..logger import AppCenterLogger
from ..models import ReleaseUploadBeginRequest, UploadRequest
from ..protocols import IAppCenterServiceFactory, ILogSink
from .base import AppCenterTask

logger = logging.getLogger(__name__)


class CreateUploadResourceTask(AppCenterTask[UploadRequest, UploadRequest], AppCenterLogger):
    """
    Ask App Center for upload slots.

    Always begins a release upload; when the request carries a symbol
    upload request, begins a symbol upload after the release stage
    succeeds. Each stage returns a new snapshot. Any failure is raised as
    ``AppCenterError``; no partial snapshot is returned.
    """

    def __init__(self, sink: ILogSink, factory: IAppCenterServiceFactory):
        self._sink = sink
        self._factory = factory

    async def execute(self, request: UploadRequest) -> UploadRequest:
        request = await self._create_upload_resource_for_app(request)
        if request.has_symbols:
            request = await self._create_upload_resource_for_debug_symbols(request)
        return request

    async def _create_upload_resource_for_app(self, request: UploadRequest) -> UploadRequest:
        self.log("Creating an upload resource for app.")

        begin_request = ReleaseUploadBeginRequest(request.build_version, None)
        try:
            response = await self._factory.create_service().begin_release_upload(
                request.owner_name, request.app_name, begin_request
            )
        except Exception as exc:
            error = self.log_failure("Create upload resource for app unsuccessful", exc)
            raise error from exc

        self.log("Create upload resource for app successful.")
        return (
            request.new_builder()
            .set_upload_id(response.id)
            .set_upload_domain(response.upload_domain)
            .set_token(response.url_encoded_token)
            .set_package_asset_id(response.package_asset_id)
            .build()
        )

    async def _create_upload_resource_for_debug_symbols(self, request: UploadRequest) -> UploadRequest:
        symbol_upload_request = request.symbol_upload_request
        if symbol_upload_request is None:
            raise InternalTaskError("symbol_upload_request cannot be None")

        self.log("Creating an upload resource for debug symbols.")

        try:
            response = await self._factory.create_service().begin_symbol_upload(
                request.owner_name, request.app_name, symbol_upload_request
            )
        except Exception as exc:
            error = self.log_failure("Create upload resource for debug symbols unsuccessful", exc)
            raise error from exc

        self.log("Create upload resource for debug symbols successful.")
        logger.debug("Symbol upload %s expires at %s", response.symbol_upload_id, response.expiration_date)
        return (
            request.new_builder()
            .set_symbol_upload_url(response.upload_url)
            .set_symbol_upload_id(response.symbol_upload_id)
            .build()
        )
