"""
Shared enumerations for ledger models.

Using str-based enums means values serialise as plain
strings in API responses and compare equal to them.
"""

import enum


class AccountCategory(str, enum.Enum):
    """Account classification; determines the interest policy."""
    SAVINGS = "savings"
    CHECKING = "checking"
    FIXED = "fixed"


class TransactionKind(str, enum.Enum):
    """Direction of a transaction record."""
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


class Severity(str, enum.Enum):
    """Severity attached to every subscriber notification."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class CommandKind(str, enum.Enum):
    """The reversible operations the ledger knows how to run."""
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    TRANSFER = "transfer"
