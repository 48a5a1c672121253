import csv
import logging
from typing import Dict, Iterator, Optional, TextIO

from amount import Amount, AmountParseError
from models import MAX_CLIENT_ID, MAX_TRANSACTION_ID, Transaction, TransactionType

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("type", "client", "tx")


class TransactionParseError(Exception):
    """A record could not be read. Input is no longer trusted, so this is fatal."""

    def __init__(self, line_number: int, message: str):
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


class CsvTransactionReader:
    """
    Reads `type,client,tx,amount` records and yields Transactions in file order.
    Headers and fields are whitespace-trimmed; the amount column may be empty or
    left off entirely for dispute, resolve and chargeback rows.
    """

    def __init__(self, stream: TextIO):
        self._reader = csv.DictReader(stream, restkey="__extra__")

    def __iter__(self) -> Iterator[Transaction]:
        try:
            fieldnames = self._reader.fieldnames
        except (csv.Error, UnicodeDecodeError) as e:
            raise TransactionParseError(self._reader.line_num, f"unreadable header: {e}") from e
        if fieldnames is None:
            return
        self._reader.fieldnames = [name.strip() for name in fieldnames]
        missing = [column for column in REQUIRED_COLUMNS if column not in self._reader.fieldnames]
        if missing:
            raise TransactionParseError(self._reader.line_num, f"missing column(s) {', '.join(missing)}")

        while True:
            try:
                row = next(self._reader)
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as e:
                raise TransactionParseError(self._reader.line_num, f"unreadable record: {e}") from e
            yield self._parse_row(row, self._reader.line_num)

    def _parse_row(self, row: Dict[str, Optional[str]], line_number: int) -> Transaction:
        """Parse CSV row into Transaction."""
        if row.get("__extra__"):
            raise TransactionParseError(line_number, f"unexpected extra fields {row['__extra__']}")

        normalized = {k: (v or "").strip() for k, v in row.items() if k != "__extra__"}

        try:
            transaction_type = TransactionType(normalized["type"].lower())
        except ValueError:
            raise TransactionParseError(line_number, f"unknown transaction type {normalized['type']!r}")

        client_id = self._parse_id(normalized["client"], MAX_CLIENT_ID, "client", line_number)
        transaction_id = self._parse_id(normalized["tx"], MAX_TRANSACTION_ID, "tx", line_number)

        amount = None
        amount_str = normalized.get("amount", "")
        if transaction_type.carries_amount:
            if not amount_str:
                raise TransactionParseError(line_number, f"{transaction_type.value} must specify amount")
            try:
                amount = Amount.parse(amount_str)
            except AmountParseError as e:
                raise TransactionParseError(line_number, f"failed to parse amount: {e}") from e
        elif amount_str:
            raise TransactionParseError(line_number, f"{transaction_type.value} cannot specify amount")

        return Transaction(
            transaction_type=transaction_type,
            client_id=client_id,
            transaction_id=transaction_id,
            amount=amount,
        )

    @staticmethod
    def _parse_id(value: str, maximum: int, column: str, line_number: int) -> int:
        if not value.isascii() or not value.isdigit():
            raise TransactionParseError(line_number, f"invalid {column} id {value!r}")
        parsed = int(value)
        if parsed > maximum:
            raise TransactionParseError(line_number, f"{column} id {parsed} out of range (max {maximum})")
        return parsed


def read_transactions(filepath: str) -> Iterator[Transaction]:
    """Yield transactions from a CSV file, keeping the file open while iterating."""
    logger.info(f"Reading transactions from {filepath}")
    with open(filepath, "r", newline="") as f:
        yield from CsvTransactionReader(f)
