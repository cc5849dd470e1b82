"""
Pydantic schemas for customer and account operations.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bank_ledger.models.enums import AccountCategory, Severity


# --- Customer Schemas ---

class CustomerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=5, max_length=255)


class CustomerResponse(BaseModel):
    name: str
    email: str

    model_config = {"from_attributes": True}


class NotificationResponse(BaseModel):
    message: str
    severity: Severity
    created_at: datetime

    model_config = {"from_attributes": True}


# --- Account Schemas ---

class AccountOpen(BaseModel):
    """Request to open a new account."""
    category: AccountCategory
    initial_balance: Decimal = Decimal("0")
    # Email of the customer to notify; the default customer when omitted
    subscriber_id: str | None = None


class AccountResponse(BaseModel):
    id: str
    category: str
    balance: Decimal
    rate: Decimal
    transaction_count: int
    created_at: datetime

    model_config = {"from_attributes": True}


class InterestResponse(BaseModel):
    account_id: str
    years: Decimal
    rate: Decimal
    interest: Decimal
