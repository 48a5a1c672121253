import csv
from typing import Iterable, TextIO, Tuple

from models import Account, ClientId

OUTPUT_COLUMNS = ("client", "available", "held", "total", "locked")


def write_accounts(accounts: Iterable[Tuple[ClientId, Account]], stream: TextIO) -> None:
    """Write one `client,available,held,total,locked` row per account."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(OUTPUT_COLUMNS)
    for client_id, account in accounts:
        writer.writerow([
            client_id,
            str(account.available),
            str(account.held),
            str(account.total),
            str(account.frozen).lower(),
        ])
