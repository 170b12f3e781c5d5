"""User-facing notifications with deduplication."""

import logging
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Notification:
    """A message shown to the user."""

    severity: Severity
    message: str


Sink = Callable[[Notification], None]


class Notifier:
    """
    Deliver notifications to a sink, each distinct message at most once.

    Every message is logged at DEBUG level, shown or not. Delivery runs on a
    single worker thread so the caller never waits on the sink; ``flush()``
    blocks until everything submitted so far has been delivered.
    """

    def __init__(self, sink: Sink, executor: Optional[Executor] = None):
        self._sink = sink
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="graphql-notify"
        )
        self._shown: set[str] = set()
        self._lock = threading.Lock()

    def notify(self, severity: Severity, message: str) -> bool:
        """
        Submit a message for delivery.

        Returns:
            True if the message was new and handed to the sink
        """
        logger.debug(message)
        with self._lock:
            if message in self._shown:
                return False
            self._shown.add(message)
        self._executor.submit(self._deliver, Notification(severity, message))
        return True

    def warning(self, message: str) -> bool:
        return self.notify(Severity.WARNING, message)

    def error(self, message: str) -> bool:
        return self.notify(Severity.ERROR, message)

    def clear(self) -> None:
        """Forget shown messages so they can surface again."""
        with self._lock:
            self._shown.clear()

    def flush(self) -> None:
        """Wait for pending deliveries."""
        self._executor.submit(lambda: None).result()

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def _deliver(self, notification: Notification) -> None:
        try:
            self._sink(notification)
        except Exception:
            logger.exception("notification sink failed for %r", notification.message)
