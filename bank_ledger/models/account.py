"""
Customer account model.

An account owns its balance and an append-only log of
transaction records. The balance always equals the initial
balance plus the signed sum of the records in the log, and
it never goes below zero.

Balance changes go through deposit() and withdraw(). The
only other mutation is revert_transaction(), which commands
use to undo a record they created.
"""

import itertools
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable

from bank_ledger.errors import InsufficientFunds, InvalidAmount
from bank_ledger.models.customer import Subscriber
from bank_ledger.models.enums import AccountCategory, Severity, TransactionKind
from bank_ledger.models.interest import InterestPolicy, policy_for
from bank_ledger.models.money import format_money, to_amount
from bank_ledger.models.transaction import TransactionRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountSnapshot:
    """Read-only view of an account."""
    id: str
    category: str
    balance: Decimal
    rate: Decimal
    transaction_count: int
    created_at: datetime


class Account:

    def __init__(
        self,
        account_id: str,
        category,
        initial_balance=Decimal("0"),
        id_source: Callable[[], int] | None = None,
    ):
        initial_balance = to_amount(initial_balance)
        if initial_balance < 0:
            raise InvalidAmount("Initial balance cannot be negative")

        try:
            category = AccountCategory(category)
        except ValueError:
            # Unknown categories are kept as-is and earn no interest
            pass

        self.id = account_id
        self.category = category
        self.initial_balance = initial_balance
        self.created_at = datetime.now(timezone.utc)
        self._balance = initial_balance
        self._log: list[TransactionRecord] = []
        self._subscribers: list[Subscriber] = []
        self._policy: InterestPolicy = policy_for(category)
        self._next_id = id_source or itertools.count(1).__next__

    # --- Read access ---

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def transactions(self) -> tuple[TransactionRecord, ...]:
        """The retained log, oldest first."""
        return tuple(self._log)

    @property
    def category_name(self) -> str:
        if isinstance(self.category, AccountCategory):
            return self.category.value
        return str(self.category)

    def find_transaction(self, transaction_id: int) -> TransactionRecord | None:
        for record in self._log:
            if record.id == transaction_id:
                return record
        return None

    # --- Subscribers ---

    def subscribe(self, subscriber: Subscriber) -> None:
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        """
        Deliver a notification to every subscriber, in subscription order.

        A subscriber that raises is logged and skipped; the rest
        still receive the message and the account is unaffected.
        """
        for subscriber in list(self._subscribers):
            try:
                subscriber.notify(message, severity)
            except Exception:
                logger.exception(
                    "Subscriber %r failed on %s notification for %s",
                    subscriber, Severity(severity).value, self.id,
                )

    def announce(self, record: TransactionRecord) -> None:
        """Send the success notification for a record in this account's log."""
        verb = (
            "Deposit" if record.kind == TransactionKind.DEPOSIT else "Withdrawal"
        )
        self.notify(
            f"{verb} of {format_money(record.amount)} successful. "
            f"New balance: {format_money(record.balance)}",
            Severity.SUCCESS,
        )

    # --- Balance mutations ---

    def deposit(
        self, amount, description: str = "", notify: bool = True
    ) -> TransactionRecord:
        """
        Credit the account. Subscribers are told afterwards unless
        notify is False, in which case the caller announces it.
        """
        amount = to_amount(amount)
        if amount <= 0:
            raise InvalidAmount("Deposit amount must be positive")

        self._balance += amount
        record = self._append(TransactionKind.DEPOSIT, amount, description)

        if notify:
            self.announce(record)
        return record

    def withdraw(
        self, amount, description: str = "", notify: bool = True
    ) -> TransactionRecord:
        amount = to_amount(amount)
        if amount <= 0:
            raise InvalidAmount("Withdrawal amount must be positive")
        if amount > self._balance:
            raise InsufficientFunds(
                f"Insufficient funds: available={self._balance}, "
                f"requested={amount}"
            )

        self._balance -= amount
        record = self._append(TransactionKind.WITHDRAW, amount, description)

        if notify:
            self.announce(record)
        return record

    def revert_transaction(self, transaction_id: int) -> TransactionRecord | None:
        """
        Remove a record from the log and reverse its balance effect.

        This bypasses deposit/withdraw validation: reversing a
        record that is in the log always succeeds. Returns the
        removed record, or None if the id is not in the log.
        No notification is sent; the caller decides what to say.
        """
        record = self.find_transaction(transaction_id)
        if record is None:
            return None
        self._log.remove(record)
        self._balance -= record.signed_amount
        return record

    def _append(
        self, kind: TransactionKind, amount: Decimal, description: str
    ) -> TransactionRecord:
        record = TransactionRecord(
            id=self._next_id(),
            kind=kind,
            amount=amount,
            balance=self._balance,
            description=description,
            timestamp=datetime.now(timezone.utc),
            account_id=self.id,
        )
        self._log.append(record)
        logger.debug("Appended %r", record)
        return record

    # --- Interest ---

    def interest_rate(self) -> Decimal:
        """Annual rate in percent."""
        return self._policy.rate

    def interest_due(self, years=1) -> Decimal:
        return self._policy.interest(self._balance, years)

    # --- Views ---

    def snapshot(self) -> AccountSnapshot:
        return AccountSnapshot(
            id=self.id,
            category=self.category_name,
            balance=self._balance,
            rate=self.interest_rate(),
            transaction_count=len(self._log),
            created_at=self.created_at,
        )

    def __repr__(self) -> str:
        return f"<Account {self.id} {self.category_name} ({self._balance})>"
