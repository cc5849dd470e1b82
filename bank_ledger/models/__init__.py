"""
Ledger models package.

Plain in-memory domain objects: accounts, their transaction
records, customers that subscribe to them, and the interest
policies keyed by account category.
"""

from bank_ledger.models.enums import (
    AccountCategory,
    TransactionKind,
    Severity,
    CommandKind,
)
from bank_ledger.models.interest import InterestPolicy, policy_for
from bank_ledger.models.transaction import TransactionRecord
from bank_ledger.models.customer import Customer, Notification, Subscriber
from bank_ledger.models.account import Account, AccountSnapshot

__all__ = [
    "AccountCategory",
    "TransactionKind",
    "Severity",
    "CommandKind",
    "InterestPolicy",
    "policy_for",
    "TransactionRecord",
    "Customer",
    "Notification",
    "Subscriber",
    "Account",
    "AccountSnapshot",
]
