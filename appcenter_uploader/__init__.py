"""
appcenter_uploader - App Center upload resource pipeline.

Usage:
    from appcenter_uploader import (
        AppCenterServiceFactory, CreateUploadResourceTask, HTTPAPIClient,
        LoggingSink, UploadConfig, UploadRequest,
    )

    config = UploadConfig(api_token="...")
    request = UploadRequest.builder("owner", "app", "1.2.0").build()

    async with HTTPAPIClient(config) as api:
        task = CreateUploadResourceTask(LoggingSink(), AppCenterServiceFactory(api))
        request = await task.execute(request)
        print(request.upload_id, request.upload_domain)
"""
__version__ = "0.1.0"

from .exceptions import AppCenterAPIError, AppCenterError, InternalTaskError
from .logger import AppCenterLogger, LoggingSink
from .models import (
    ReleaseUploadBeginRequest,
    ReleaseUploadBeginResponse,
    SymbolType,
    SymbolUploadBeginRequest,
    SymbolUploadBeginResponse,
    UploadConfig,
    UploadRequest,
    UploadRequestBuilder,
)
from .services import AppCenterService, AppCenterServiceFactory, HTTPAPIClient
from .tasks import AppCenterTask, CreateUploadResourceTask, TaskChain

__all__ = [
    # Tasks
    "AppCenterTask",
    "TaskChain",
    "CreateUploadResourceTask",
    # Models
    "UploadRequest",
    "UploadRequestBuilder",
    "UploadConfig",
    "SymbolType",
    "SymbolUploadBeginRequest",
    "SymbolUploadBeginResponse",
    "ReleaseUploadBeginRequest",
    "ReleaseUploadBeginResponse",
    # Errors
    "AppCenterError",
    "AppCenterAPIError",
    "InternalTaskError",
    # Logging
    "AppCenterLogger",
    "LoggingSink",
    # Services
    "HTTPAPIClient",
    "AppCenterService",
    "AppCenterServiceFactory",
]
