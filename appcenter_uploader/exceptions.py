"""Exceptions raised by appcenter_uploader."""
from typing import Any, Optional


def describe_exception(exc: BaseException) -> str:
    message = str(exc).strip()
    if message:
        return message
    return f"{type(exc).__name__}: {repr(exc)}"


class AppCenterError(RuntimeError):
    """
    Unified failure of an App Center task.

    Carries the stage context and the original cause. Raise it with
    ``raise err from err.cause`` so tracebacks keep the chain.
    """

    def __init__(self, context: str, cause: Optional[BaseException] = None):
        self.context = context
        self.cause = cause
        if cause is None:
            super().__init__(context)
        else:
            super().__init__(f"{context}: {describe_exception(cause)}")


class InternalTaskError(AppCenterError):
    """A task was driven outside its contract (programmer error)."""


class AppCenterAPIError(RuntimeError):
    """The App Center API rejected a request or returned an unusable body."""

    def __init__(self, status_code: Optional[int], method: str, endpoint: str, detail: Any = None):
        self.status_code = status_code
        self.method = method
        self.endpoint = endpoint
        self.detail = detail
        if status_code is None:
            message = f"API error on {method} {endpoint}: {detail}"
        else:
            message = f"API error {status_code} on {method} {endpoint}: {detail}"
        super().__init__(message)
