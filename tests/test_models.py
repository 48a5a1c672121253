import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from amount import Amount, ZERO
from models import Account, ProcessingStats, Transaction, TransactionType


class TestTransaction:
    def test_create_deposit(self):
        transaction = Transaction(
            transaction_type=TransactionType.DEPOSIT,
            client_id=1,
            transaction_id=1,
            amount=Amount.parse("100.0"),
        )
        assert transaction.transaction_type == TransactionType.DEPOSIT
        assert transaction.client_id == 1
        assert transaction.transaction_id == 1
        assert transaction.amount == Amount(1000000)

    def test_create_dispute_no_amount(self):
        transaction = Transaction(
            transaction_type=TransactionType.DISPUTE,
            client_id=1,
            transaction_id=1,
        )
        assert transaction.amount is None

    def test_deposit_requires_amount(self):
        with pytest.raises(ValueError):
            Transaction(TransactionType.DEPOSIT, client_id=1, transaction_id=1)

    def test_resolve_rejects_amount(self):
        with pytest.raises(ValueError):
            Transaction(TransactionType.RESOLVE, client_id=1, transaction_id=1, amount=Amount(1))

    def test_carries_amount(self):
        assert TransactionType.WITHDRAWAL.carries_amount
        assert not TransactionType.CHARGEBACK.carries_amount


class TestAccount:
    def test_default_values(self):
        account = Account()
        assert account.available == ZERO
        assert account.held == ZERO
        assert account.frozen is False

    def test_total_property(self):
        account = Account(
            available=Amount.parse("100"),
            held=Amount.parse("50"),
        )
        assert account.total == Amount.parse("150")

    def test_hold_keeps_total(self):
        account = Account(available=Amount.parse("10"))
        account.hold(Amount.parse("4"))
        assert str(account.available) == "6.0000"
        assert str(account.held) == "4.0000"
        assert str(account.total) == "10.0000"

        account.release_hold(Amount.parse("4"))
        assert account.available == Amount.parse("10")
        assert account.held == ZERO


class TestProcessingStats:
    def test_counts(self):
        stats = ProcessingStats()
        stats.record_success()
        stats.record_success()
        stats.record_rejection()
        assert stats.processed == 2
        assert stats.rejected == 1
