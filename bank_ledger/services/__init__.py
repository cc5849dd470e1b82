"""Business logic services."""

from bank_ledger.services.commands import (
    Command,
    DepositCommand,
    WithdrawCommand,
    TransferCommand,
    TransferResult,
)
from bank_ledger.services.transaction_manager import TransactionManager
from bank_ledger.services.ledger_service import LedgerService

__all__ = [
    "Command",
    "DepositCommand",
    "WithdrawCommand",
    "TransferCommand",
    "TransferResult",
    "TransactionManager",
    "LedgerService",
]
