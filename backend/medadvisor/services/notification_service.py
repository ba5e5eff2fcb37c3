"""
Notification Dispatcher: fire-and-forget messages on a bounded worker pool.

Constructed explicitly (once, in the app lifespan) and passed to whoever
needs it. There is no global accessor.

Delivery goes through a `sink` callable. The default sink only logs the
message; swap in a real email/SMS gateway by passing another callable.

Usage:
    dispatcher = NotificationDispatcher(max_workers=5)
    dispatcher.send_email("oncall@clinic.example", "Escalation", "chest pain reported")
    dispatcher.shutdown()
"""
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Channel(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class Notification(BaseModel):
    channel: Channel
    recipient: str
    message: str
    subject: Optional[str] = None
    data: Optional[str] = None


Sink = Callable[[Notification], None]


def log_sink(notification: Notification) -> None:
    """Default delivery: write the notification to the log."""
    logger.info(
        f"[Notify] {notification.channel.value} -> {notification.recipient}: "
        f"{notification.subject + ' | ' if notification.subject else ''}{notification.message}"
    )


class NotificationDispatcher:
    """Owns a fixed-size thread pool. Callers never wait on delivery."""

    def __init__(self, max_workers: int = 5, sink: Sink = log_sink):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="notify")
        self._sink = sink
        self._lock = threading.Lock()
        self._closed = False
        self.delivered = 0
        self.failed = 0

    def _deliver(self, notification: Notification) -> bool:
        try:
            self._sink(notification)
        except Exception as e:
            # Delivery failures stay inside the worker; the caller already moved on
            logger.error(
                f"[Notify] Delivery failed for {notification.channel.value} -> "
                f"{notification.recipient}: {type(e).__name__}: {e}"
            )
            with self._lock:
                self.failed += 1
            return False
        with self._lock:
            self.delivered += 1
        return True

    def dispatch(self, notification: Notification) -> Optional[Future]:
        """Queue a notification. Returns None (and logs) after shutdown."""
        with self._lock:
            if self._closed:
                logger.warning(f"[Notify] Dispatcher closed, dropping {notification.channel.value} notification")
                return None
            return self._executor.submit(self._deliver, notification)

    def send_email(self, recipient: str, subject: str, message: str) -> Optional[Future]:
        return self.dispatch(Notification(channel=Channel.EMAIL, recipient=recipient, subject=subject, message=message))

    def send_sms(self, phone_number: str, message: str) -> Optional[Future]:
        return self.dispatch(Notification(channel=Channel.SMS, recipient=phone_number, message=message))

    def send_push(self, device_token: str, title: str, message: str, data: Optional[str] = None) -> Optional[Future]:
        return self.dispatch(
            Notification(channel=Channel.PUSH, recipient=device_token, subject=title, message=message, data=data)
        )

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work. With wait=True, queued messages are delivered first."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=wait)
        logger.info(f"[Notify] Dispatcher stopped (delivered={self.delivered}, failed={self.failed})")
