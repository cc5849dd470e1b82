"""
Ledger error taxonomy.

Every business-rule violation raised by the ledger is a
LedgerError. The base class extends ValueError so callers
that only care about "bad request" can catch ValueError.
"""


class LedgerError(ValueError):
    """Base class for all ledger failures."""


class InvalidAmount(LedgerError):
    """Amount is not positive, or an initial balance is negative."""


class InsufficientFunds(LedgerError):
    """Withdrawal or transfer exceeds the source balance."""


class AccountNotFound(LedgerError):
    """No account is registered under the given identifier."""


class SameAccountTransfer(LedgerError):
    """Transfer source and destination are the same account."""


class CustomerNotFound(LedgerError):
    """No customer is registered under the given email."""


class DuplicateCustomer(LedgerError):
    """A customer with the given email already exists."""
