"""Services for appcenter_uploader."""
from .api_client import HTTPAPIClient
from .appcenter import AppCenterService, AppCenterServiceFactory

__all__ = [
    "HTTPAPIClient",
    "AppCenterService",
    "AppCenterServiceFactory",
]
