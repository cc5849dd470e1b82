"""
Customer model.

Represents an account holder. A customer subscribes to the
accounts they own and receives a notification for every
balance change or reversal on them.
"""

from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

from bank_ledger.models.enums import Severity


class Subscriber(Protocol):
    """Anything that can receive account notifications."""

    def notify(self, message: str, severity: Severity) -> None:
        ...


@dataclass(frozen=True)
class Notification:
    message: str
    severity: Severity
    created_at: datetime


class Customer:
    """
    A named subscriber with a bounded notification inbox.

    Oldest notifications are dropped once the inbox is full.
    Hosts read the inbox to render messages however they like.
    """

    def __init__(self, name: str, email: str, inbox_size: int = 50):
        self.name = name
        self.email = email
        self._inbox: deque[Notification] = deque(maxlen=inbox_size)

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        self._inbox.append(Notification(
            message=message,
            severity=Severity(severity),
            created_at=datetime.now(timezone.utc),
        ))

    @property
    def notifications(self) -> list[Notification]:
        """Notifications in delivery order, oldest first."""
        return list(self._inbox)

    def clear_notifications(self) -> None:
        self._inbox.clear()

    def __repr__(self) -> str:
        return f"<Customer {self.name} <{self.email}>>"
