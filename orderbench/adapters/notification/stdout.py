"""Stdout notification adapter.

Implements NotificationPort by printing messages to the terminal, standing
in for an email sender.
"""

import logging

from orderbench.core.ports import NotificationPort

logger = logging.getLogger(__name__)


class StdoutNotificationAdapter(NotificationPort):
    """Prints notifications to stdout."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout notification adapter.

        Args:
            verbose: If True, surround the message with a banner.
        """
        self.verbose = verbose

    def send(self, message: str) -> None:
        """Print a notification message."""
        if self.verbose:
            print(self._format_banner(message))
        else:
            print(f"Email sent with message: {message}")

    @staticmethod
    def _format_banner(message: str) -> str:
        lines = [
            "=" * 80,
            "NOTIFICATION",
            "=" * 80,
            f"Email sent with message: {message}",
            "=" * 80,
        ]
        return "\n".join(lines)
