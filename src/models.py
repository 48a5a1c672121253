from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from amount import Amount, ZERO

ClientId = int
TransactionId = int

MAX_CLIENT_ID = 2 ** 16 - 1
MAX_TRANSACTION_ID = 2 ** 32 - 1


class TransactionType(Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"

    @property
    def carries_amount(self) -> bool:
        return self in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL)


class DepositError(Enum):
    NEGATIVE_AMOUNT = "cannot deposit a negative amount"
    ACCOUNT_FROZEN = "account is frozen"


class WithdrawError(Enum):
    NEGATIVE_AMOUNT = "cannot withdraw a negative amount"
    INSUFFICIENT_FUNDS = "insufficient amount available for withdrawal"
    ACCOUNT_FROZEN = "account is frozen"


class DisputeError(Enum):
    TRANSACTION_NOT_FOUND = "referenced transaction not found for client"


class ResolveError(Enum):
    DISPUTE_NOT_FOUND = "no dispute found for referenced transaction"


class ChargebackError(Enum):
    DISPUTE_NOT_FOUND = "no dispute found for referenced transaction"


@dataclass(frozen=True)
class Transaction:
    """One input record. Only deposits and withdrawals carry an amount."""

    transaction_type: TransactionType
    client_id: ClientId
    transaction_id: TransactionId
    amount: Optional[Amount] = None

    def __post_init__(self):
        if self.transaction_type.carries_amount != (self.amount is not None):
            raise ValueError(f"{self.transaction_type.value} transaction has mismatched amount {self.amount}")

    def __repr__(self) -> str:
        return f"Transaction({self.transaction_type.value}, client={self.client_id}, tx={self.transaction_id}, amount={self.amount})"


@dataclass
class Account:
    available: Amount = field(default=ZERO)
    held: Amount = field(default=ZERO)
    frozen: bool = False

    @property
    def total(self) -> Amount:
        return self.available + self.held

    def credit(self, amount: Amount) -> None:
        self.available += amount

    def debit(self, amount: Amount) -> None:
        self.available -= amount

    def hold(self, amount: Amount) -> None:
        self.available -= amount
        self.held += amount

    def release_hold(self, amount: Amount) -> None:
        self.held -= amount
        self.available += amount

    def remove_held(self, amount: Amount) -> None:
        self.held -= amount


class ProcessingStats:
    """Counters for transactions applied and rejected during a run."""

    def __init__(self):
        self.processed = 0
        self.rejected = 0

    def record_success(self):
        self.processed += 1

    def record_rejection(self):
        self.rejected += 1
