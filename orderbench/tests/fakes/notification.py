"""Fake NotificationPort implementation for testing."""

from orderbench.core.ports import NotificationPort


class FakeNotificationPort(NotificationPort):
    """In-memory notification adapter for testing.

    Captures all notifications sent through this port for test assertions.
    """

    def __init__(self, call_log: list[str] | None = None):
        """Initialize with empty notification history.

        Args:
            call_log: Optional list shared with other fakes; "send" is
                appended on every call so tests can check call ordering.
        """
        self.sent_messages: list[str] = []
        self.send_call_count = 0
        self.call_log = call_log if call_log is not None else []
        self.should_fail: bool = False
        self.fail_message: str = "Notification failed"

    def send(self, message: str) -> None:
        """Send a notification.

        Captures the message for test assertions.
        """
        self.send_call_count += 1
        self.call_log.append("send")

        if self.should_fail:
            raise RuntimeError(self.fail_message)

        self.sent_messages.append(message)

    def get_last_message(self) -> str | None:
        """Get the most recent message, if any."""
        if self.sent_messages:
            return self.sent_messages[-1]
        return None

    def set_should_fail(self, should_fail: bool, message: str = "Notification failed") -> None:
        """Configure the adapter to fail on the next operation."""
        self.should_fail = should_fail
        self.fail_message = message

    def reset(self) -> None:
        """Reset all collected notifications and state."""
        self.sent_messages.clear()
        self.send_call_count = 0
        self.should_fail = False
        self.fail_message = "Notification failed"
