import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from amount import Amount
from ledger import TransactionLedger


class TestTransactionLedger:
    def setup_method(self):
        self.ledger = TransactionLedger()
        self.amount = Amount.parse("12.5")

    def test_record_deposit(self):
        replaced = self.ledger.record_deposit(1, 10, self.amount)
        assert replaced is False
        assert self.ledger.is_pending(1, 10)
        assert self.ledger.pending_deposits() == {(1, 10): self.amount}

    def test_record_duplicate_overwrites(self):
        self.ledger.record_deposit(1, 10, self.amount)
        replaced = self.ledger.record_deposit(1, 10, Amount.parse("3"))
        assert replaced is True
        assert self.ledger.pending_deposits() == {(1, 10): Amount.parse("3")}

    def test_keys_are_per_client(self):
        self.ledger.record_deposit(1, 10, self.amount)
        assert self.ledger.open_dispute(2, 10) is None
        assert self.ledger.is_pending(1, 10)

    def test_open_dispute_moves_entry(self):
        self.ledger.record_deposit(1, 10, self.amount)
        assert self.ledger.open_dispute(1, 10) == self.amount
        assert not self.ledger.is_pending(1, 10)
        assert self.ledger.is_disputed(1, 10)

    def test_open_dispute_twice(self):
        self.ledger.record_deposit(1, 10, self.amount)
        self.ledger.open_dispute(1, 10)
        assert self.ledger.open_dispute(1, 10) is None

    def test_resolve_returns_to_pending(self):
        self.ledger.record_deposit(1, 10, self.amount)
        self.ledger.open_dispute(1, 10)
        assert self.ledger.resolve_dispute(1, 10) == self.amount
        assert self.ledger.is_pending(1, 10)
        assert self.ledger.disputed_deposits() == {}

    def test_resolve_without_dispute(self):
        self.ledger.record_deposit(1, 10, self.amount)
        assert self.ledger.resolve_dispute(1, 10) is None
        assert self.ledger.is_pending(1, 10)

    def test_charge_back_removes_everywhere(self):
        self.ledger.record_deposit(1, 10, self.amount)
        self.ledger.open_dispute(1, 10)
        assert self.ledger.charge_back(1, 10) == self.amount
        assert self.ledger.pending_deposits() == {}
        assert self.ledger.disputed_deposits() == {}
        assert self.ledger.charge_back(1, 10) is None

    def test_snapshots_are_copies(self):
        self.ledger.record_deposit(1, 10, self.amount)
        self.ledger.pending_deposits().clear()
        assert self.ledger.is_pending(1, 10)
