"""
Shared API dependencies.

The ledger lives on app.state and is handed to endpoints
through get_ledger(), which tests override with a fresh
instance.
"""

from fastapi import HTTPException, Request

from bank_ledger.errors import AccountNotFound, CustomerNotFound, LedgerError
from bank_ledger.services.ledger_service import LedgerService


def get_ledger(request: Request) -> LedgerService:
    """Provide the application's ledger to an endpoint."""
    return request.app.state.ledger


def to_http_error(error: LedgerError) -> HTTPException:
    """Map a ledger failure to an HTTP error: unknown ids are 404, the rest 400."""
    if isinstance(error, (AccountNotFound, CustomerNotFound)):
        return HTTPException(status_code=404, detail=str(error))
    return HTTPException(status_code=400, detail=str(error))
