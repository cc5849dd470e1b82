"""
Tests for the reversible commands.
"""

from decimal import Decimal

import pytest

from bank_ledger.errors import InsufficientFunds, InvalidAmount
from bank_ledger.models.account import Account
from bank_ledger.models.customer import Customer
from bank_ledger.models.enums import Severity
from bank_ledger.services.commands import (
    DepositCommand,
    TransferCommand,
    TransferResult,
    WithdrawCommand,
)


def make_account(account_id="ACC-A", balance="500"):
    return Account(account_id, "checking", Decimal(balance))


class ExplodingSubscriber:
    def notify(self, message, severity):
        raise RuntimeError("subscriber offline")


# --- Deposit / Withdraw ---

class TestDepositCommand:

    def test_execute_records_transaction_id(self):
        account = make_account()
        command = DepositCommand(account, Decimal("100"), "gift")

        record = command.execute()

        assert command.executed is True
        assert command.transaction_id == record.id
        assert command.transaction_ids == (record.id,)
        assert account.balance == Decimal("600")

    def test_execute_twice_is_noop(self):
        account = make_account()
        command = DepositCommand(account, Decimal("100"))
        command.execute()

        assert command.execute() is None
        assert account.balance == Decimal("600")
        assert len(account.transactions) == 1

    def test_undo_restores_balance_and_log(self):
        account = make_account()
        before = (account.balance, account.transactions)
        command = DepositCommand(account, Decimal("100"))
        command.execute()

        command.undo()

        assert (account.balance, account.transactions) == before
        assert command.executed is False

    def test_undo_twice_is_noop(self):
        account = make_account()
        command = DepositCommand(account, Decimal("100"))
        command.execute()
        command.undo()
        account.deposit(Decimal("1"))

        command.undo()
        assert account.balance == Decimal("501")

    def test_undo_before_execute_is_noop(self):
        account = make_account()
        DepositCommand(account, Decimal("100")).undo()
        assert account.balance == Decimal("500")

    def test_undo_after_record_removed_is_noop(self):
        account = make_account()
        command = DepositCommand(account, Decimal("100"))
        record = command.execute()
        account.revert_transaction(record.id)

        command.undo()
        assert account.balance == Decimal("500")

    def test_undo_sends_warning(self):
        account = make_account()
        customer = Customer("Jane", "jane@test.com")
        account.subscribe(customer)
        command = DepositCommand(account, Decimal("100"))
        command.execute()

        command.undo()

        last = customer.notifications[-1]
        assert last.severity == Severity.WARNING
        assert last.message == (
            "Deposit of $100.00 has been undone. Balance: $500.00"
        )

    def test_failed_execute_leaves_command_unexecuted(self):
        command = DepositCommand(make_account(), Decimal("0"))
        with pytest.raises(InvalidAmount):
            command.execute()
        assert command.executed is False
        assert command.transaction_ids == ()


class TestWithdrawCommand:

    def test_execute_and_undo(self):
        account = make_account()
        command = WithdrawCommand(account, Decimal("200"))

        command.execute()
        assert account.balance == Decimal("300")

        command.undo()
        assert account.balance == Decimal("500")
        assert account.transactions == ()

    def test_insufficient_funds_propagates(self):
        account = make_account()
        command = WithdrawCommand(account, Decimal("501"))
        with pytest.raises(InsufficientFunds):
            command.execute()
        assert account.balance == Decimal("500")

    def test_undo_message(self):
        account = make_account()
        customer = Customer("Jane", "jane@test.com")
        account.subscribe(customer)
        command = WithdrawCommand(account, Decimal("200"))
        command.execute()
        command.undo()

        assert customer.notifications[-1].message == (
            "Withdrawal of $200.00 has been undone. Balance: $500.00"
        )


# --- Transfer ---

class TestTransferCommand:

    def test_transfer_moves_money(self):
        source = make_account("ACC-A", "500")
        destination = make_account("ACC-B", "0")

        result = TransferCommand(source, destination, Decimal("100")).execute()

        assert isinstance(result, TransferResult)
        assert source.balance == Decimal("400")
        assert destination.balance == Decimal("100")

    def test_transfer_descriptions(self):
        source = make_account("ACC-A", "500")
        destination = make_account("ACC-B", "0")

        result = TransferCommand(
            source, destination, Decimal("100"), "rent"
        ).execute()

        assert result.source.description == "Transfer to ACC-B: rent"
        assert result.destination.description == "Transfer from ACC-A: rent"

    def test_undo_reverses_both_legs(self):
        source = make_account("ACC-A", "500")
        destination = make_account("ACC-B", "0")
        command = TransferCommand(source, destination, Decimal("100"))
        command.execute()

        command.undo()

        assert source.balance == Decimal("500")
        assert destination.balance == Decimal("0")
        assert source.transactions == ()
        assert destination.transactions == ()

    def test_insufficient_funds_touches_neither_side(self):
        source = make_account("ACC-A", "50")
        destination = make_account("ACC-B", "0")

        with pytest.raises(InsufficientFunds):
            TransferCommand(source, destination, Decimal("100")).execute()

        assert source.balance == Decimal("50")
        assert source.transactions == ()
        assert destination.transactions == ()

    @pytest.mark.parametrize("amount", ["0", "-5"])
    def test_invalid_amount_touches_neither_side(self, amount):
        source = make_account("ACC-A", "500")
        destination = make_account("ACC-B", "0")

        with pytest.raises(InvalidAmount):
            TransferCommand(source, destination, Decimal(amount)).execute()

        assert source.transactions == ()

    def test_failed_deposit_leg_rolls_back_withdrawal(self):
        source = make_account("ACC-A", "500")
        destination = make_account("ACC-B", "0")
        customer = Customer("Jane", "jane@test.com")
        source.subscribe(customer)

        def broken_deposit(amount, description="", notify=True):
            raise RuntimeError("destination unavailable")

        destination.deposit = broken_deposit
        command = TransferCommand(source, destination, Decimal("100"))

        with pytest.raises(RuntimeError):
            command.execute()

        assert source.balance == Decimal("500")
        assert source.transactions == ()
        assert command.executed is False
        # The rolled back withdrawal was never announced
        assert customer.notifications == []

    def test_raising_destination_subscriber_does_not_break_transfer(self):
        source = make_account("ACC-A", "500")
        destination = make_account("ACC-B", "0")
        destination.subscribe(ExplodingSubscriber())
        command = TransferCommand(source, destination, Decimal("100"))

        result = command.execute()

        assert command.executed is True
        assert source.balance == Decimal("400")
        assert destination.balance == Decimal("100")
        assert source.balance + destination.balance == Decimal("500")
        assert destination.find_transaction(result.destination.id) is not None

        command.undo()

        assert source.balance == Decimal("500")
        assert destination.balance == Decimal("0")

    def test_both_legs_announced_after_success(self):
        source = make_account("ACC-A", "500")
        destination = make_account("ACC-B", "0")
        jane = Customer("Jane", "jane@test.com")
        bob = Customer("Bob", "bob@test.com")
        source.subscribe(jane)
        destination.subscribe(bob)

        TransferCommand(source, destination, Decimal("100")).execute()

        [sent] = jane.notifications
        [received] = bob.notifications
        assert sent.message == (
            "Withdrawal of $100.00 successful. New balance: $400.00"
        )
        assert received.message == (
            "Deposit of $100.00 successful. New balance: $100.00"
        )

    def test_partial_undo_is_refused(self):
        source = make_account("ACC-A", "500")
        destination = make_account("ACC-B", "0")
        command = TransferCommand(source, destination, Decimal("100"))
        result = command.execute()

        destination.revert_transaction(result.destination.id)
        command.undo()

        # Source leg stays because the destination leg is gone
        assert source.balance == Decimal("400")
        assert source.find_transaction(result.source.id) is not None
        assert command.executed is True

    def test_undo_notifies_source(self):
        source = make_account("ACC-A", "500")
        destination = make_account("ACC-B", "0")
        customer = Customer("Jane", "jane@test.com")
        source.subscribe(customer)
        command = TransferCommand(source, destination, Decimal("100"))
        command.execute()

        command.undo()

        last = customer.notifications[-1]
        assert last.severity == Severity.WARNING
        assert last.message == "Transfer of $100.00 to ACC-B has been undone"
