"""Notification dispatcher: fire-and-forget delivery, failure isolation, shutdown."""
import threading

import pytest

from medadvisor.services.notification_service import Channel, Notification, NotificationDispatcher


class RecordingSink:
    def __init__(self):
        self.received = []
        self._lock = threading.Lock()

    def __call__(self, notification: Notification):
        with self._lock:
            self.received.append(notification)


def test_messages_delivered_through_sink():
    sink = RecordingSink()
    dispatcher = NotificationDispatcher(max_workers=2, sink=sink)

    futures = [
        dispatcher.send_email("oncall@clinic.example", "Escalation", "chest pain"),
        dispatcher.send_sms("+15550100", "Your order shipped"),
        dispatcher.send_push("device-1", "Reminder", "Take your medicine", data="M001"),
    ]
    assert all(f.result(timeout=5) is True for f in futures)
    dispatcher.shutdown()

    channels = sorted(n.channel.value for n in sink.received)
    assert channels == [Channel.EMAIL.value, Channel.PUSH.value, Channel.SMS.value]
    assert dispatcher.delivered == 3
    assert dispatcher.failed == 0


def test_failing_sink_does_not_reach_caller():
    def broken_sink(notification):
        raise ConnectionError("gateway down")

    dispatcher = NotificationDispatcher(max_workers=1, sink=broken_sink)
    future = dispatcher.send_sms("+15550100", "hello")
    assert future.result(timeout=5) is False
    dispatcher.shutdown()
    assert dispatcher.failed == 1


def test_shutdown_drains_queue_and_rejects_new_work():
    sink = RecordingSink()
    dispatcher = NotificationDispatcher(max_workers=1, sink=sink)
    for i in range(10):
        dispatcher.send_sms("+15550100", f"message {i}")
    dispatcher.shutdown(wait=True)

    assert len(sink.received) == 10
    assert dispatcher.send_sms("+15550100", "too late") is None
    # second shutdown is a no-op
    dispatcher.shutdown()


def test_independent_dispatchers_do_not_share_state():
    first = NotificationDispatcher(max_workers=1, sink=RecordingSink())
    second = NotificationDispatcher(max_workers=1, sink=RecordingSink())
    first.send_sms("+1", "x").result(timeout=5)
    first.shutdown()
    second.shutdown()
    assert first.delivered == 1
    assert second.delivered == 0


def test_pool_size_must_be_positive():
    with pytest.raises(ValueError):
        NotificationDispatcher(max_workers=0)
