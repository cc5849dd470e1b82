"""
Bank Ledger — FastAPI Application.

This is the entry point for the application.
All routers are registered here, and the single ledger
instance is created and attached to app.state.
"""

import uvicorn
from fastapi import FastAPI

from bank_ledger.config import get_settings
from bank_ledger.logging_config import setup_logging
from bank_ledger.services.ledger_service import LedgerService
from bank_ledger.api.health import router as health_router
from bank_ledger.api.accounts import router as accounts_router
from bank_ledger.api.transactions import router as transactions_router

settings = get_settings()
setup_logging()


def create_ledger() -> LedgerService:
    """Build the process ledger, with demo accounts if configured."""
    ledger = LedgerService(settings)
    if settings.SEED_DEMO_ACCOUNTS:
        ledger.seed_demo_accounts()
    return ledger


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="In-memory bank ledger with undoable transactions",
)
app.state.ledger = create_ledger()

# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(transactions_router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
