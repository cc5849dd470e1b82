"""
Shared test fixtures.

Every test gets its own ledger, so no accounts, customers
or undo history leak between tests.
"""

import pytest
from fastapi.testclient import TestClient

from bank_ledger.api.deps import get_ledger
from bank_ledger.config import Settings
from bank_ledger.main import app
from bank_ledger.services.ledger_service import LedgerService


@pytest.fixture
def settings():
    """Settings with demo seeding disabled."""
    test_settings = Settings()
    test_settings.SEED_DEMO_ACCOUNTS = False
    test_settings.ACCOUNT_NUMBER_PREFIX = "ACC"
    test_settings.ACCOUNT_NUMBER_START = 1000
    test_settings.DEFAULT_CUSTOMER_NAME = "John Doe"
    test_settings.DEFAULT_CUSTOMER_EMAIL = "john@example.com"
    test_settings.NOTIFICATION_INBOX_SIZE = 50
    test_settings.RECENT_TRANSACTIONS_LIMIT = 10
    return test_settings


@pytest.fixture
def ledger(settings):
    """A fresh, empty ledger with only the default customer."""
    return LedgerService(settings)


@pytest.fixture
def client(ledger):
    """
    Provide a test client bound to the test ledger.

    We override the get_ledger dependency so the FastAPI app
    uses our fresh ledger instead of the process one.
    """
    app.dependency_overrides[get_ledger] = lambda: ledger
    yield TestClient(app)
    app.dependency_overrides.clear()
