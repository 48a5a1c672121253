import logging
from typing import Dict, List, Optional, Tuple, Union

from amount import Amount
from ledger import TransactionLedger
from models import (
    Account,
    ChargebackError,
    ClientId,
    DepositError,
    DisputeError,
    ResolveError,
    Transaction,
    TransactionId,
    TransactionType,
    WithdrawError,
)

logger = logging.getLogger(__name__)

TransactionError = Union[DepositError, WithdrawError, DisputeError, ResolveError, ChargebackError]


class TransactionProcessor:
    """
    Applies transactions to accounts, one at a time, in the order received.

    Each operation returns None when applied, or an error member describing why
    it was refused. A refused transaction leaves balances and the ledger untouched.

    With reject_frozen=True, deposits and withdrawals against an account frozen
    by a chargeback are refused with ACCOUNT_FROZEN. By default frozen accounts
    keep accepting them.
    """

    def __init__(self, reject_frozen: bool = False):
        self._reject_frozen = reject_frozen
        self._accounts: Optional[Dict[ClientId, Account]] = {}
        self._ledger = TransactionLedger()

    @property
    def ledger(self) -> TransactionLedger:
        self._open_accounts()
        return self._ledger

    def get_account(self, client_id: ClientId) -> Optional[Account]:
        return self._open_accounts().get(client_id)

    def apply(self, transaction: Transaction) -> Optional[TransactionError]:
        client_id = transaction.client_id
        transaction_id = transaction.transaction_id

        match transaction.transaction_type:
            case TransactionType.DEPOSIT:
                return self.deposit(client_id, transaction_id, transaction.amount)
            case TransactionType.WITHDRAWAL:
                return self.withdraw(client_id, transaction_id, transaction.amount)
            case TransactionType.DISPUTE:
                return self.dispute(client_id, transaction_id)
            case TransactionType.RESOLVE:
                return self.resolve(client_id, transaction_id)
            case TransactionType.CHARGEBACK:
                return self.chargeback(client_id, transaction_id)

        raise ValueError(f"Unknown transaction type {transaction.transaction_type!r}")

    def deposit(self, client_id: ClientId, transaction_id: TransactionId, amount: Amount) -> Optional[DepositError]:
        """Credit to client's account."""
        self._open_accounts()
        if amount.is_negative():
            return DepositError.NEGATIVE_AMOUNT

        account = self._get_or_create_account(client_id)
        if self._reject_frozen and account.frozen:
            return DepositError.ACCOUNT_FROZEN

        account.credit(amount)
        if self._ledger.record_deposit(client_id, transaction_id, amount):
            logger.warning(f"Deposit tx {transaction_id} for client {client_id}: duplicate transaction id, replacing earlier deposit in dispute ledger")
        return None

    def withdraw(self, client_id: ClientId, transaction_id: TransactionId, amount: Amount) -> Optional[WithdrawError]:
        """Debit to client's account. Withdrawals are not tracked for disputes."""
        self._open_accounts()
        if amount.is_negative():
            return WithdrawError.NEGATIVE_AMOUNT

        account = self._get_or_create_account(client_id)
        if self._reject_frozen and account.frozen:
            return WithdrawError.ACCOUNT_FROZEN

        if account.available < amount:
            return WithdrawError.INSUFFICIENT_FUNDS

        account.debit(amount)
        return None

    def dispute(self, client_id: ClientId, transaction_id: TransactionId) -> Optional[DisputeError]:
        """Hold the funds of a deposit the client claims was erroneous."""
        accounts = self._open_accounts()
        amount = self._ledger.open_dispute(client_id, transaction_id)
        if amount is None:
            return DisputeError.TRANSACTION_NOT_FOUND

        # A pending deposit always has an account, created when it was deposited
        accounts[client_id].hold(amount)
        return None

    def resolve(self, client_id: ClientId, transaction_id: TransactionId) -> Optional[ResolveError]:
        """Release held funds back to available; the deposit can be disputed again."""
        accounts = self._open_accounts()
        amount = self._ledger.resolve_dispute(client_id, transaction_id)
        if amount is None:
            return ResolveError.DISPUTE_NOT_FOUND

        accounts[client_id].release_hold(amount)
        return None

    def chargeback(self, client_id: ClientId, transaction_id: TransactionId) -> Optional[ChargebackError]:
        """Final state of a dispute: held funds leave the account and it is frozen."""
        accounts = self._open_accounts()
        amount = self._ledger.charge_back(client_id, transaction_id)
        if amount is None:
            return ChargebackError.DISPUTE_NOT_FOUND

        account = accounts[client_id]
        account.remove_held(amount)
        account.frozen = True
        logger.info(f"Chargeback tx {transaction_id}: account for client {client_id} frozen")
        return None

    def finalize(self) -> List[Tuple[ClientId, Account]]:
        """
        Hand over final account state, in the order accounts were created.

        The processor cannot be used afterwards. The order is stable for a given
        input but is not part of the output format.
        """
        accounts = self._open_accounts()
        self._accounts = None
        return list(accounts.items())

    def _open_accounts(self) -> Dict[ClientId, Account]:
        if self._accounts is None:
            raise RuntimeError("TransactionProcessor has already been finalized")
        return self._accounts

    def _get_or_create_account(self, client_id: ClientId) -> Account:
        accounts = self._open_accounts()
        if client_id not in accounts:
            accounts[client_id] = Account()
        return accounts[client_id]
