"""Row codecs between models and the text store layout."""
import math
from datetime import datetime
from typing import List, Optional

from splitbook.models.expense import Expense, ParticipantShare, SplitMethod
from splitbook.models.user import User

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def user_to_row(user: User) -> List[str]:
    return [str(user.id), user.name, user.email, user.phone, user.secret]


def user_from_row(row: List[str]) -> Optional[User]:
    """id|name|email|phone|secret; returns None for rows that cannot be used."""
    if len(row) < 5:
        return None
    try:
        user_id = int(row[0])
    except ValueError:
        return None
    if user_id <= 0:
        return None
    return User(id=user_id, name=row[1], email=row[2], phone=row[3], secret=row[4])


def expense_to_row(expense: Expense) -> List[str]:
    shares = ",".join(f"{p.user_id}:{p.share:.2f}" for p in expense.participants)
    return [
        str(expense.id),
        expense.description,
        f"{expense.amount:.2f}",
        expense.split_method.value,
        str(expense.created_by),
        expense.created_at.strftime(TIMESTAMP_FORMAT),
        shares,
    ]


def _parse_share(text: str) -> ParticipantShare:
    user_id, share = text.split(":", 1)
    return ParticipantShare(user_id=int(user_id), share=float(share))


def expense_from_row(row: List[str]) -> Optional[Expense]:
    """id|description|amount|method|creator|created_at|uid:share,uid:share"""
    if len(row) < 7:
        return None
    try:
        expense_id = int(row[0])
        amount = float(row[2])
        created_by = int(row[4])
        created_at = datetime.strptime(row[5], TIMESTAMP_FORMAT)
        participants = tuple(
            _parse_share(part) for part in row[6].split(",") if part
        )
    except ValueError:
        return None
    if expense_id <= 0 or not math.isfinite(amount):
        return None
    if not all(math.isfinite(p.share) for p in participants):
        return None
    return Expense(
        id=expense_id,
        description=row[1],
        amount=amount,
        split_method=SplitMethod.parse(row[3]),
        created_by=created_by,
        created_at=created_at,
        participants=participants,
    )
