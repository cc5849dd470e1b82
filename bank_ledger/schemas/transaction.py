"""
Pydantic schemas for transaction operations.

Amounts are not range-checked here; the ledger rejects
non-positive amounts with InvalidAmount so every host sees
the same error.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bank_ledger.models.enums import TransactionKind


class DepositRequest(BaseModel):
    account_id: str
    amount: Decimal
    description: str = Field(default="", max_length=255)


class WithdrawalRequest(BaseModel):
    account_id: str
    amount: Decimal
    description: str = Field(default="", max_length=255)


class TransferRequest(BaseModel):
    source_account_id: str
    destination_account_id: str
    amount: Decimal
    description: str = Field(default="", max_length=255)


class TransactionResponse(BaseModel):
    id: int
    kind: TransactionKind
    amount: Decimal
    balance: Decimal
    description: str
    timestamp: datetime
    account_id: str

    model_config = {"from_attributes": True}


class TransferResponse(BaseModel):
    source: TransactionResponse
    destination: TransactionResponse

    model_config = {"from_attributes": True}


class UndoResponse(BaseModel):
    undone: bool
    can_undo: bool
    message: str
