"""
Tests for interest policies.
"""

from decimal import Decimal

from bank_ledger.models.account import Account
from bank_ledger.models.enums import AccountCategory
from bank_ledger.models.interest import (
    CHECKING_POLICY,
    FIXED_DEPOSIT_POLICY,
    SAVINGS_POLICY,
    policy_for,
)


class TestPolicyRates:

    def test_savings_rate(self):
        assert SAVINGS_POLICY.rate == Decimal("2.5")

    def test_fixed_deposit_rate(self):
        assert FIXED_DEPOSIT_POLICY.rate == Decimal("4.5")

    def test_checking_earns_nothing(self):
        assert CHECKING_POLICY.rate == Decimal("0")


class TestPolicyLookup:

    def test_lookup_by_enum_and_string(self):
        assert policy_for(AccountCategory.SAVINGS) is SAVINGS_POLICY
        assert policy_for("fixed") is FIXED_DEPOSIT_POLICY
        assert policy_for("checking") is CHECKING_POLICY

    def test_unknown_category_falls_back_to_checking(self):
        assert policy_for("brokerage") is CHECKING_POLICY


class TestInterestCalculation:

    def test_savings_one_year(self):
        account = Account("ACC-S", "savings", Decimal("1000"))
        assert account.interest_due(1) == Decimal("25.00")

    def test_checking_one_year(self):
        account = Account("ACC-C", "checking", Decimal("1000"))
        assert account.interest_due(1) == Decimal("0")

    def test_fixed_two_years(self):
        account = Account("ACC-F", "fixed", Decimal("1000"))
        assert account.interest_due(2) == Decimal("90.00")

    def test_default_period_is_one_year(self):
        account = Account("ACC-S", "savings", Decimal("200"))
        assert account.interest_due() == Decimal("5")

    def test_fractional_years(self):
        assert SAVINGS_POLICY.interest(Decimal("1000"), 0.5) == Decimal("12.5")

    def test_interest_is_never_posted(self):
        account = Account("ACC-S", "savings", Decimal("1000"))
        account.interest_due(3)
        assert account.balance == Decimal("1000")
        assert account.transactions == ()
