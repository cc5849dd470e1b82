"""
Interest policies per account category.

A policy is a fixed annual percentage rate. Interest is
simple interest computed on demand; it is never posted to
the account as a transaction.
"""

from dataclasses import dataclass
from decimal import Decimal

from bank_ledger.models.enums import AccountCategory


@dataclass(frozen=True)
class InterestPolicy:
    """Annual simple-interest rate, expressed in percent."""

    rate: Decimal

    def interest(self, balance: Decimal, years=1) -> Decimal:
        return balance * (self.rate / Decimal(100)) * Decimal(str(years))


SAVINGS_POLICY = InterestPolicy(rate=Decimal("2.5"))
CHECKING_POLICY = InterestPolicy(rate=Decimal("0"))
FIXED_DEPOSIT_POLICY = InterestPolicy(rate=Decimal("4.5"))

INTEREST_POLICIES: dict[AccountCategory, InterestPolicy] = {
    AccountCategory.SAVINGS: SAVINGS_POLICY,
    AccountCategory.CHECKING: CHECKING_POLICY,
    AccountCategory.FIXED: FIXED_DEPOSIT_POLICY,
}


def policy_for(category) -> InterestPolicy:
    """Return the policy for a category; unknown categories earn nothing."""
    try:
        return INTEREST_POLICIES[AccountCategory(category)]
    except ValueError:
        return CHECKING_POLICY
