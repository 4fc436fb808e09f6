"""Fake Notifier for testing."""

from claude_config.gateway.notifier.abc import Notification, Notifier


class FakeNotifier(Notifier):
    """In-memory notifier that records every notification sent.

    Pass send_error to simulate a failing notifier program.
    """

    def __init__(self, *, send_error: Exception | None = None) -> None:
        self._send_error = send_error
        self._sent: list[Notification] = []

    @property
    def sent(self) -> list[Notification]:
        return list(self._sent)

    def send(self, notification: Notification) -> None:
        if self._send_error is not None:
            raise self._send_error
        self._sent.append(notification)
