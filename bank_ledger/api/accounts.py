"""
Account and customer API endpoints.
"""

from decimal import Decimal

from fastapi import APIRouter, Depends, Query

from bank_ledger.api.deps import get_ledger, to_http_error
from bank_ledger.errors import LedgerError
from bank_ledger.services.ledger_service import LedgerService
from bank_ledger.schemas.account import (
    CustomerCreate,
    CustomerResponse,
    NotificationResponse,
    AccountOpen,
    AccountResponse,
    InterestResponse,
)

router = APIRouter(tags=["Accounts"])


# --- Customer Endpoints ---

@router.post("/customers", response_model=CustomerResponse, status_code=201)
def create_customer(
    request: CustomerCreate,
    ledger: LedgerService = Depends(get_ledger),
):
    """Register a new customer."""
    try:
        return ledger.create_customer(request.name, request.email)
    except LedgerError as e:
        raise to_http_error(e)


@router.get(
    "/customers/{email}/notifications",
    response_model=list[NotificationResponse],
)
def get_notifications(
    email: str,
    ledger: LedgerService = Depends(get_ledger),
):
    """Notifications delivered to a customer, oldest first."""
    try:
        return ledger.get_customer(email).notifications
    except LedgerError as e:
        raise to_http_error(e)


# --- Account Endpoints ---

@router.post("/accounts", response_model=AccountResponse, status_code=201)
def open_account(
    request: AccountOpen,
    ledger: LedgerService = Depends(get_ledger),
):
    """
    Open a new account.

    The subscriber (default customer when omitted) is
    notified of every later balance change.
    """
    try:
        account = ledger.open_account(
            request.category,
            request.initial_balance,
            request.subscriber_id,
        )
        return account.snapshot()
    except LedgerError as e:
        raise to_http_error(e)


@router.get("/accounts", response_model=list[AccountResponse])
def list_accounts(ledger: LedgerService = Depends(get_ledger)):
    """Snapshots of every account, in opening order."""
    return ledger.list_accounts()


@router.get("/accounts/summary/balances", response_model=dict[str, Decimal])
def balances_by_category(ledger: LedgerService = Depends(get_ledger)):
    """Total balance per account category."""
    return ledger.balances_by_category()


@router.get("/accounts/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    ledger: LedgerService = Depends(get_ledger),
):
    """Get account details."""
    try:
        return ledger.get_account(account_id).snapshot()
    except LedgerError as e:
        raise to_http_error(e)


@router.get("/accounts/{account_id}/interest", response_model=InterestResponse)
def get_interest(
    account_id: str,
    years: Decimal = Query(default=Decimal("1"), ge=0),
    ledger: LedgerService = Depends(get_ledger),
):
    """Interest the account would earn at its current balance."""
    try:
        account = ledger.get_account(account_id)
        return InterestResponse(
            account_id=account.id,
            years=years,
            rate=account.interest_rate(),
            interest=ledger.interest_projection(account_id, years),
        )
    except LedgerError as e:
        raise to_http_error(e)
