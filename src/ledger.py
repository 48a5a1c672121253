from typing import Dict, Optional, Tuple

from amount import Amount
from models import ClientId, TransactionId

LedgerKey = Tuple[ClientId, TransactionId]


class TransactionLedger:
    """
    Tracks the dispute lifecycle of deposits.

    A deposit lives in exactly one of two indices at a time: pending (eligible
    to be disputed) or disputed (awaiting resolve or chargeback). A chargeback
    drops it from both for good.
    """

    def __init__(self):
        self._pending: Dict[LedgerKey, Amount] = {}
        self._disputed: Dict[LedgerKey, Amount] = {}

    def record_deposit(self, client_id: ClientId, transaction_id: TransactionId, amount: Amount) -> bool:
        """Store a deposit as disputable. Returns True if an entry was overwritten."""
        key = (client_id, transaction_id)
        replaced = key in self._pending
        self._pending[key] = amount
        return replaced

    def open_dispute(self, client_id: ClientId, transaction_id: TransactionId) -> Optional[Amount]:
        """Move a pending deposit into the disputed index. Returns None if it is not pending."""
        key = (client_id, transaction_id)
        amount = self._pending.pop(key, None)
        if amount is not None:
            self._disputed[key] = amount
        return amount

    def resolve_dispute(self, client_id: ClientId, transaction_id: TransactionId) -> Optional[Amount]:
        """Move a disputed deposit back to pending so it can be disputed again."""
        key = (client_id, transaction_id)
        amount = self._disputed.pop(key, None)
        if amount is not None:
            self._pending[key] = amount
        return amount

    def charge_back(self, client_id: ClientId, transaction_id: TransactionId) -> Optional[Amount]:
        """Drop a disputed deposit permanently."""
        return self._disputed.pop((client_id, transaction_id), None)

    def is_pending(self, client_id: ClientId, transaction_id: TransactionId) -> bool:
        return (client_id, transaction_id) in self._pending

    def is_disputed(self, client_id: ClientId, transaction_id: TransactionId) -> bool:
        return (client_id, transaction_id) in self._disputed

    def pending_deposits(self) -> Dict[LedgerKey, Amount]:
        return dict(self._pending)

    def disputed_deposits(self) -> Dict[LedgerKey, Amount]:
        return dict(self._disputed)
