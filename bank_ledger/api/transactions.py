"""
Transaction API endpoints.

Every mutating endpoint runs through the ledger's undo
stack, so POST /transactions/undo reverses the most recent
deposit, withdrawal or transfer.
"""

from fastapi import APIRouter, Depends, Query

from bank_ledger.api.deps import get_ledger, to_http_error
from bank_ledger.errors import LedgerError
from bank_ledger.services.ledger_service import LedgerService
from bank_ledger.schemas.transaction import (
    DepositRequest,
    WithdrawalRequest,
    TransferRequest,
    TransactionResponse,
    TransferResponse,
    UndoResponse,
)

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post("/deposit", response_model=TransactionResponse, status_code=201)
def deposit(
    request: DepositRequest,
    ledger: LedgerService = Depends(get_ledger),
):
    """Deposit money into an account."""
    try:
        return ledger.deposit(
            request.account_id, request.amount, request.description
        )
    except LedgerError as e:
        raise to_http_error(e)


@router.post("/withdraw", response_model=TransactionResponse, status_code=201)
def withdraw(
    request: WithdrawalRequest,
    ledger: LedgerService = Depends(get_ledger),
):
    """Withdraw money from an account."""
    try:
        return ledger.withdraw(
            request.account_id, request.amount, request.description
        )
    except LedgerError as e:
        raise to_http_error(e)


@router.post("/transfer", response_model=TransferResponse, status_code=201)
def transfer(
    request: TransferRequest,
    ledger: LedgerService = Depends(get_ledger),
):
    """Transfer money between two accounts."""
    try:
        return ledger.transfer(
            request.source_account_id,
            request.destination_account_id,
            request.amount,
            request.description,
        )
    except LedgerError as e:
        raise to_http_error(e)


@router.post("/undo", response_model=UndoResponse)
def undo(ledger: LedgerService = Depends(get_ledger)):
    """Undo the most recent transaction, if there is one."""
    undone = ledger.undo()
    message = (
        "Last transaction has been undone successfully"
        if undone
        else "No transactions to undo"
    )
    return UndoResponse(
        undone=undone, can_undo=ledger.can_undo(), message=message
    )


@router.get("", response_model=list[TransactionResponse])
def list_transactions(
    limit: int | None = Query(default=None, ge=0),
    ledger: LedgerService = Depends(get_ledger),
):
    """All transactions across accounts, newest first."""
    return ledger.all_transactions(limit)


@router.get("/recent", response_model=list[TransactionResponse])
def recent_transactions(ledger: LedgerService = Depends(get_ledger)):
    """The most recent transactions, newest first."""
    return ledger.recent_transactions()
