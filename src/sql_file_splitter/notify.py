"""Notification sink used by the splitter to report progress and failures."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Receiver for status, debug, warning and error messages."""

    def status(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str, exc: BaseException | None = None) -> None: ...


class LoggingNotifier:
    """Notifier that forwards every message to a standard library logger."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def status(self, message: str) -> None:
        self._log.info(message)

    def debug(self, message: str) -> None:
        self._log.debug(message)

    def warning(self, message: str) -> None:
        self._log.warning(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        if exc is None:
            self._log.error(message)
        else:
            self._log.error("%s: %s", message, exc, exc_info=exc)
