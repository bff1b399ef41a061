"""
CSV export of the expenses touching one user.

Columns: Expense ID, Description, Total Amount, Payer, Payer Name, User ID,
User Name, Share, Created At. One row per participant share of every expense
the user paid for or takes part in.
"""
import csv
import io
from typing import IO, Iterator, List

from splitbook.db.records import TIMESTAMP_FORMAT
from splitbook.repositories.expense_repo import Ledger
from splitbook.repositories.user_repo import IdentityRegistry

HEADER = [
    "Expense ID",
    "Description",
    "Total Amount",
    "Payer",
    "Payer Name",
    "User ID",
    "User Name",
    "Share",
    "Created At",
]


class ExportService:
    @staticmethod
    def export_rows(ledger: Ledger, registry: IdentityRegistry, user_id: int) -> Iterator[List[str]]:
        for expense in ledger.expenses_involving(user_id):
            payer_name = registry.resolve_name(expense.created_by)
            for participant in expense.participants:
                yield [
                    str(expense.id),
                    expense.description,
                    f"{expense.amount:.2f}",
                    str(expense.created_by),
                    payer_name,
                    str(participant.user_id),
                    registry.resolve_name(participant.user_id),
                    f"{participant.share:.2f}",
                    expense.created_at.strftime(TIMESTAMP_FORMAT),
                ]

    @staticmethod
    def write_csv(rows, stream: IO[str]) -> None:
        writer = csv.writer(stream)
        writer.writerow(HEADER)
        writer.writerows(rows)

    @staticmethod
    def to_csv(ledger: Ledger, registry: IdentityRegistry, user_id: int) -> str:
        """Whole report as CSV text."""
        buffer = io.StringIO()
        ExportService.write_csv(ExportService.export_rows(ledger, registry, user_id), buffer)
        return buffer.getvalue()
