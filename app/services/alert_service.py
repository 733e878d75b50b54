import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class AlertSink(Protocol):
    """Presents a message to the user and returns once it is acknowledged."""

    async def alert(self, message: str, title: str, ok_label: str) -> None: ...


class LoggingAlertSink:
    """Alert sink for headless use: logs the alert and acknowledges at once."""

    def __init__(self, log: logging.Logger | None = None):
        self._logger = log or logger

    async def alert(self, message: str, title: str, ok_label: str) -> None:
        self._logger.warning("[%s] %s", title, message)
