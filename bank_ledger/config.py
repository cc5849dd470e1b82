"""
Application configuration.

All configuration is loaded from environment variables.
Defaults are suitable for a local, single-process ledger.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Bank Ledger"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Account numbering: ACC1000, ACC1001, ...
    ACCOUNT_NUMBER_PREFIX: str = os.getenv("ACCOUNT_NUMBER_PREFIX", "ACC")
    ACCOUNT_NUMBER_START: int = int(os.getenv("ACCOUNT_NUMBER_START", "1000"))

    # The customer every new ledger starts with
    DEFAULT_CUSTOMER_NAME: str = os.getenv("DEFAULT_CUSTOMER_NAME", "John Doe")
    DEFAULT_CUSTOMER_EMAIL: str = os.getenv(
        "DEFAULT_CUSTOMER_EMAIL", "john@example.com"
    )

    # Query and notification limits
    RECENT_TRANSACTIONS_LIMIT: int = int(
        os.getenv("RECENT_TRANSACTIONS_LIMIT", "10")
    )
    NOTIFICATION_INBOX_SIZE: int = int(
        os.getenv("NOTIFICATION_INBOX_SIZE", "50")
    )

    # Open the savings/checking/fixed demo accounts at startup
    SEED_DEMO_ACCOUNTS: bool = (
        os.getenv("SEED_DEMO_ACCOUNTS", "true").lower() == "true"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Using lru_cache means the Settings object is created once
    and reused for all subsequent calls.
    """
    return Settings()
