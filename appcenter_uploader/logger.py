"""Progress reporting shared by App Center tasks."""
import logging
from typing import Optional

from .exceptions import AppCenterError, describe_exception
from .protocols import ILogSink

logger = logging.getLogger(__name__)


class LoggingSink:
    """
    Sink forwarding lines to a stdlib logger.

    Implements ILogSink protocol.
    """

    def __init__(self, target: Optional[logging.Logger] = None, level: int = logging.INFO):
        self._target = target or logging.getLogger("appcenter_uploader.progress")
        self._level = level

    def write(self, line: str) -> None:
        self._target.log(self._level, line)


class AppCenterLogger:
    """
    Mixin giving tasks ``log`` and ``log_failure``.

    Subclasses set ``self._sink``. Writes are best-effort: a failing sink
    never fails the workflow.
    """

    _sink: ILogSink

    def log(self, message: str) -> None:
        logger.debug("%s: %s", type(self).__name__, message)
        try:
            self._sink.write(message)
        except Exception as exc:
            logger.warning("Log sink %r failed: %s", self._sink, exc)

    def log_failure(self, context: str, cause: BaseException) -> AppCenterError:
        """Build the unified error for ``cause``, report it once and return it."""
        error = AppCenterError(context, cause)
        self.log(f"{context}: {describe_exception(cause)}")
        return error
