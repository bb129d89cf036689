"""App Center upload tasks."""
from .base import AppCenterTask, TaskChain
from .create_upload_resource import CreateUploadResourceTask

__all__ = ["AppCenterTask", "TaskChain", "CreateUploadResourceTask"]
