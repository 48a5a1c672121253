import logging
from typing import Iterable, List, Tuple

from csv_input import read_transactions
from models import Account, ClientId, ProcessingStats, Transaction
from processor import TransactionProcessor

logger = logging.getLogger(__name__)


class TransactionEngine:
    """
    Replays transactions in input order and returns final account states.
    Rejected transactions are logged and skipped; input parse errors propagate.
    """

    def __init__(self, reject_frozen: bool = False):
        self._processor = TransactionProcessor(reject_frozen=reject_frozen)
        self._stats = ProcessingStats()

    @property
    def stats(self) -> ProcessingStats:
        return self._stats

    def process_file(self, filepath: str) -> List[Tuple[ClientId, Account]]:
        """Process CSV file and return final account states."""
        return self.process_transactions(read_transactions(filepath))

    def process_transactions(self, transactions: Iterable[Transaction]) -> List[Tuple[ClientId, Account]]:
        for transaction in transactions:
            self._process_transaction(transaction)

        logger.info(f"Processed: {self._stats.processed}, Rejected: {self._stats.rejected}")
        return self._processor.finalize()

    def _process_transaction(self, transaction: Transaction) -> None:
        error = self._processor.apply(transaction)
        if error is None:
            self._stats.record_success()
            return

        self._stats.record_rejection()
        logger.warning(
            f"Error during processing of {transaction.transaction_type.value} "
            f"tx {transaction.transaction_id} for client {transaction.client_id}: {error.value}"
        )
