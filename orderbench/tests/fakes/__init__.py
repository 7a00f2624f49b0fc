"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeOrderStorePort: Captured orders for assertion
- FakeNotificationPort: Captured notifications for assertion
- FakeSleep: Recorded delays instead of real waiting
"""

from .clock import FakeSleep
from .notification import FakeNotificationPort
from .store import FakeOrderStorePort

__all__ = [
    "FakeNotificationPort",
    "FakeOrderStorePort",
    "FakeSleep",
]
