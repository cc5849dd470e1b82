"""
Transaction record model.

One record is appended to an account's log for every
successful deposit or withdrawal. Records are immutable;
the only way a record leaves a log is through the undo of
the command that created it.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_ledger.models.enums import TransactionKind


@dataclass(frozen=True)
class TransactionRecord:
    # Ledger-wide monotonic id; also the insertion order
    id: int
    kind: TransactionKind
    amount: Decimal
    balance: Decimal
    description: str
    timestamp: datetime
    account_id: str

    @property
    def signed_amount(self) -> Decimal:
        """Amount as it affected the balance: deposits +, withdrawals -."""
        if self.kind == TransactionKind.DEPOSIT:
            return self.amount
        return -self.amount

    def __repr__(self) -> str:
        return (
            f"<TransactionRecord #{self.id} {self.kind.value} "
            f"{self.amount} on {self.account_id}>"
        )
