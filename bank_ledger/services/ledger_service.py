"""
Ledger service — the core of the banking system.

This service owns every account and customer and is the
only entry point for changing balances:
1. Every deposit, withdrawal and transfer runs as a command
2. Every executed command goes on the undo stack
3. Validation happens before any balance changes
4. Undo never fails; it degrades to a no-op

All public methods hold a single re-entrant lock, so the
service can be shared by a threaded host such as FastAPI's
sync endpoints.
"""

import itertools
import logging
import threading
from decimal import Decimal

from bank_ledger.config import Settings, get_settings
from bank_ledger.errors import (
    AccountNotFound,
    CustomerNotFound,
    DuplicateCustomer,
    InvalidAmount,
    LedgerError,
    SameAccountTransfer,
)
from bank_ledger.models.account import Account, AccountSnapshot
from bank_ledger.models.customer import Customer
from bank_ledger.models.enums import AccountCategory, Severity
from bank_ledger.models.money import format_money, to_amount
from bank_ledger.models.transaction import TransactionRecord
from bank_ledger.services.commands import (
    Command,
    DepositCommand,
    TransferCommand,
    TransferResult,
    WithdrawCommand,
)
from bank_ledger.services.transaction_manager import TransactionManager

logger = logging.getLogger(__name__)


# Opened by seed_demo_accounts(): (category, initial balance)
DEMO_ACCOUNTS = (
    (AccountCategory.SAVINGS, Decimal("5000")),
    (AccountCategory.CHECKING, Decimal("2500")),
    (AccountCategory.FIXED, Decimal("10000")),
)


class LedgerService:
    """
    Owns accounts, customers and the undo stack.

    Construct one per process (or per test) and hand it to
    whatever host exposes it; there is no module-level
    instance.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.transaction_manager = TransactionManager()

        self._accounts: dict[str, Account] = {}
        self._customers: dict[str, Customer] = {}
        self._account_numbers = itertools.count(
            self.settings.ACCOUNT_NUMBER_START
        )
        # Shared by every account so record ids are unique ledger-wide
        self._transaction_ids = itertools.count(1)
        self._lock = threading.RLock()

        self.create_customer(
            self.settings.DEFAULT_CUSTOMER_NAME,
            self.settings.DEFAULT_CUSTOMER_EMAIL,
        )

    # --- Customers ---

    def create_customer(self, name: str, email: str) -> Customer:
        """Register a customer that accounts can notify."""
        with self._lock:
            if email in self._customers:
                raise DuplicateCustomer(
                    f"Customer with email '{email}' already exists"
                )
            customer = Customer(
                name, email, inbox_size=self.settings.NOTIFICATION_INBOX_SIZE
            )
            self._customers[email] = customer
            logger.info("Registered customer %s", email)
            return customer

    def get_customer(self, email: str) -> Customer:
        with self._lock:
            customer = self._customers.get(email)
            if customer is None:
                raise CustomerNotFound(f"Customer {email} not found")
            return customer

    @property
    def default_customer(self) -> Customer:
        return self.get_customer(self.settings.DEFAULT_CUSTOMER_EMAIL)

    # --- Accounts ---

    def open_account(
        self,
        category,
        initial_balance=Decimal("0"),
        subscriber_id: str | None = None,
    ) -> Account:
        """
        Open a new account and register it.

        The customer named by subscriber_id (the default
        customer when omitted) is subscribed to the account
        if that customer exists; an unknown subscriber is
        not an error.
        """
        initial_balance = to_amount(initial_balance)
        if initial_balance < 0:
            raise InvalidAmount("Initial balance cannot be negative")

        with self._lock:
            account_id = (
                f"{self.settings.ACCOUNT_NUMBER_PREFIX}"
                f"{next(self._account_numbers)}"
            )
            account = Account(
                account_id,
                category,
                initial_balance,
                id_source=self._transaction_ids.__next__,
            )

            if subscriber_id is None:
                subscriber_id = self.settings.DEFAULT_CUSTOMER_EMAIL
            customer = self._customers.get(subscriber_id)
            if customer is not None:
                account.subscribe(customer)

            self._accounts[account_id] = account
            logger.info(
                "Opened %s account %s with %s",
                account.category_name, account_id, initial_balance,
            )

            account.notify(
                f"{account.category_name.capitalize()} account created "
                f"successfully with initial deposit of "
                f"{format_money(initial_balance)}",
                Severity.SUCCESS,
            )
            return account

    def get_account(self, account_id: str) -> Account:
        with self._lock:
            account = self._accounts.get(account_id)
            if account is None:
                raise AccountNotFound(f"Account {account_id} not found")
            return account

    def list_accounts(self) -> list[AccountSnapshot]:
        """Snapshots of every account, in opening order."""
        with self._lock:
            return [a.snapshot() for a in self._accounts.values()]

    def seed_demo_accounts(self) -> list[Account]:
        """Open the demo savings, checking and fixed accounts."""
        return [
            self.open_account(category, balance)
            for category, balance in DEMO_ACCOUNTS
        ]

    # --- Commands ---

    def deposit(
        self, account_id: str, amount, description: str = ""
    ) -> TransactionRecord:
        with self._lock:
            try:
                account = self.get_account(account_id)
                return self._run(DepositCommand(account, amount, description))
            except LedgerError as e:
                self._report_failure("Deposit", e, account_id)
                raise

    def withdraw(
        self, account_id: str, amount, description: str = ""
    ) -> TransactionRecord:
        with self._lock:
            try:
                account = self.get_account(account_id)
                return self._run(WithdrawCommand(account, amount, description))
            except LedgerError as e:
                self._report_failure("Withdrawal", e, account_id)
                raise

    def transfer(
        self, from_id: str, to_id: str, amount, description: str = ""
    ) -> TransferResult:
        with self._lock:
            try:
                source = self.get_account(from_id)
                destination = self.get_account(to_id)
                if from_id == to_id:
                    raise SameAccountTransfer(
                        "Cannot transfer to the same account"
                    )
                return self._run(
                    TransferCommand(source, destination, amount, description)
                )
            except LedgerError as e:
                self._report_failure("Transfer", e, from_id)
                raise

    def undo(self) -> bool:
        """
        Undo the most recent command. False if there is nothing to undo.

        The default customer is told the outcome either way.
        """
        with self._lock:
            undone = self.transaction_manager.undo_last()
            customer = self._customers.get(self.settings.DEFAULT_CUSTOMER_EMAIL)
            if undone:
                message, severity = (
                    "Last transaction has been undone successfully",
                    Severity.WARNING,
                )
            else:
                logger.info("Nothing to undo")
                message, severity = "No transactions to undo", Severity.ERROR
            if customer is not None:
                customer.notify(message, severity)
            return undone

    def can_undo(self) -> bool:
        with self._lock:
            return self.transaction_manager.can_undo()

    def command_history(self) -> tuple[Command, ...]:
        with self._lock:
            return self.transaction_manager.history()

    def _run(self, command: Command):
        try:
            result = self.transaction_manager.execute_command(command)
        except LedgerError as e:
            logger.warning("%s rejected: %s", command.kind.value, e)
            raise
        logger.info("%s of %s executed", command.kind.value, command.amount)
        return result

    def _report_failure(
        self, operation: str, error: LedgerError, account_id: str
    ) -> None:
        """
        Send an error notification for a rejected operation.

        It goes to the subscribers of the named account, or to
        the default customer when that account does not exist.
        """
        message = f"{operation} failed: {error}"
        account = self._accounts.get(account_id)
        if account is not None:
            account.notify(message, Severity.ERROR)
            return
        customer = self._customers.get(self.settings.DEFAULT_CUSTOMER_EMAIL)
        if customer is not None:
            customer.notify(message, Severity.ERROR)

    # --- Queries ---

    def all_transactions(self, limit: int | None = None) -> list[TransactionRecord]:
        """
        Every retained record across all accounts, newest first.

        Records with equal timestamps are ordered by id, which
        follows insertion order.
        """
        with self._lock:
            records = [
                record
                for account in self._accounts.values()
                for record in account.transactions
            ]
        records.sort(key=lambda r: (r.timestamp, r.id), reverse=True)
        if limit is not None:
            return records[:max(limit, 0)]
        return records

    def recent_transactions(self, limit: int | None = None) -> list[TransactionRecord]:
        if limit is None:
            limit = self.settings.RECENT_TRANSACTIONS_LIMIT
        return self.all_transactions(limit)

    def balances_by_category(self) -> dict[str, Decimal]:
        """Sum of balances per category; known categories always present."""
        with self._lock:
            totals = {category.value: Decimal("0") for category in AccountCategory}
            for account in self._accounts.values():
                name = account.category_name
                totals[name] = totals.get(name, Decimal("0")) + account.balance
            return totals

    def interest_projection(self, account_id: str, years=1) -> Decimal:
        """Interest an account would earn over `years` at its current balance."""
        with self._lock:
            return self.get_account(account_id).interest_due(years)
