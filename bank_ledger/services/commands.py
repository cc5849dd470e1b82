"""
Reversible commands — deposits, withdrawals, and transfers.

Each command wraps one balance-changing operation and keeps
the id of every transaction record it produced. Undo uses
those ids to remove exactly the records it created:

1. execute() runs once; later calls are no-ops
2. undo() only acts if the command executed and every
   record it produced is still in its account's log
3. undo() never raises; unmet preconditions make it a no-op
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from bank_ledger.errors import InsufficientFunds, InvalidAmount
from bank_ledger.models.account import Account
from bank_ledger.models.enums import CommandKind, Severity
from bank_ledger.models.money import format_money, to_amount
from bank_ledger.models.transaction import TransactionRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransferResult:
    """The two records a transfer produces."""
    source: TransactionRecord
    destination: TransactionRecord


class Command(ABC):
    """Base class for reversible ledger operations."""

    kind: CommandKind

    def __init__(self, amount, description: str = ""):
        self.amount: Decimal = to_amount(amount)
        self.description = description
        self.executed = False

    @abstractmethod
    def execute(self):
        """Perform the operation and return its result."""

    @abstractmethod
    def undo(self) -> None:
        """Reverse the operation if it is still reversible."""

    @property
    @abstractmethod
    def transaction_ids(self) -> tuple[int, ...]:
        """Ids of the records this command produced."""


class _SingleAccountCommand(Command):
    """Shared undo logic for commands that touch one account."""

    verb: str

    def __init__(self, account: Account, amount, description: str = ""):
        super().__init__(amount, description)
        self.account = account
        self.transaction_id: int | None = None

    @property
    def transaction_ids(self) -> tuple[int, ...]:
        if self.transaction_id is None:
            return ()
        return (self.transaction_id,)

    def execute(self) -> TransactionRecord | None:
        if self.executed:
            return None
        record = self._apply()
        self.transaction_id = record.id
        self.executed = True
        return record

    @abstractmethod
    def _apply(self) -> TransactionRecord:
        ...

    def undo(self) -> None:
        if not self.executed or self.transaction_id is None:
            return

        record = self.account.revert_transaction(self.transaction_id)
        if record is None:
            logger.debug(
                "Undo skipped: record %s no longer in %s",
                self.transaction_id, self.account.id,
            )
            return

        self.executed = False
        logger.info(
            "Undid %s of %s on %s", self.kind.value, self.amount, self.account.id
        )
        self.account.notify(
            f"{self.verb} of {format_money(self.amount)} has been undone. "
            f"Balance: {format_money(self.account.balance)}",
            Severity.WARNING,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.amount} {self.account.id}>"


class DepositCommand(_SingleAccountCommand):
    kind = CommandKind.DEPOSIT
    verb = "Deposit"

    def _apply(self) -> TransactionRecord:
        return self.account.deposit(self.amount, self.description)


class WithdrawCommand(_SingleAccountCommand):
    kind = CommandKind.WITHDRAW
    verb = "Withdrawal"

    def _apply(self) -> TransactionRecord:
        return self.account.withdraw(self.amount, self.description)


class TransferCommand(Command):
    """
    Move money from one account to another, atomically.

    Both legs are validated before either account changes.
    If the deposit leg still fails, the withdrawal leg is
    reverted before the error propagates, so a failed
    transfer never leaves the source debited.
    """

    kind = CommandKind.TRANSFER

    def __init__(
        self,
        source: Account,
        destination: Account,
        amount,
        description: str = "",
    ):
        super().__init__(amount, description)
        self.source = source
        self.destination = destination
        self.source_transaction_id: int | None = None
        self.destination_transaction_id: int | None = None

    @property
    def transaction_ids(self) -> tuple[int, ...]:
        return tuple(
            tid for tid in (
                self.source_transaction_id, self.destination_transaction_id
            )
            if tid is not None
        )

    def execute(self) -> TransferResult | None:
        if self.executed:
            return None

        if self.amount <= 0:
            raise InvalidAmount("Transfer amount must be positive")
        if self.amount > self.source.balance:
            raise InsufficientFunds(
                f"Insufficient funds: available={self.source.balance}, "
                f"requested={self.amount}"
            )

        # Subscribers hear about either leg only once both are applied
        withdrawal = self.source.withdraw(
            self.amount,
            f"Transfer to {self.destination.id}: {self.description}",
            notify=False,
        )
        try:
            deposit = self.destination.deposit(
                self.amount,
                f"Transfer from {self.source.id}: {self.description}",
                notify=False,
            )
        except Exception:
            self.source.revert_transaction(withdrawal.id)
            logger.warning(
                "Transfer %s -> %s rolled back after deposit failure",
                self.source.id, self.destination.id,
            )
            raise

        self.source_transaction_id = withdrawal.id
        self.destination_transaction_id = deposit.id
        self.executed = True

        self.source.announce(withdrawal)
        self.destination.announce(deposit)
        return TransferResult(source=withdrawal, destination=deposit)

    def undo(self) -> None:
        if not self.executed:
            return

        # Both legs must still be present; never reverse just one side
        if (
            self.source.find_transaction(self.source_transaction_id) is None
            or self.destination.find_transaction(
                self.destination_transaction_id
            ) is None
        ):
            logger.debug(
                "Undo skipped: transfer %s -> %s is no longer intact",
                self.source.id, self.destination.id,
            )
            return

        self.source.revert_transaction(self.source_transaction_id)
        self.destination.revert_transaction(self.destination_transaction_id)
        self.executed = False

        logger.info(
            "Undid transfer of %s from %s to %s",
            self.amount, self.source.id, self.destination.id,
        )
        self.source.notify(
            f"Transfer of {format_money(self.amount)} to "
            f"{self.destination.id} has been undone",
            Severity.WARNING,
        )

    def __repr__(self) -> str:
        return (
            f"<TransferCommand {self.amount} "
            f"{self.source.id} -> {self.destination.id}>"
        )
