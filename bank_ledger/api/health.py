"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends

from bank_ledger.api.deps import get_ledger
from bank_ledger.services.ledger_service import LedgerService

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(ledger: LedgerService = Depends(get_ledger)):
    """
    Return application health status.

    Reports how many accounts the in-memory ledger holds
    and whether there is anything on the undo stack.
    """
    return {
        "status": "healthy",
        "service": "bank-ledger",
        "accounts": len(ledger.list_accounts()),
        "can_undo": ledger.can_undo(),
    }
