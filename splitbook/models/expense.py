"""
Expense model - one shared purchase and how it is divided.

Design principles:
- Shares belong to exactly one expense
- Immutable once created (append-only ledger)
- The creator is the payer and always appears among the shares
- Amounts are floats; two-decimal formatting happens at presentation/storage
"""

from datetime import datetime
from enum import Enum
from typing import Tuple
from pydantic import BaseModel, Field, ConfigDict


class SplitMethod(str, Enum):
    EQUAL = "EQUAL"
    EXACT = "EXACT"
    PERCENTAGE = "PERCENTAGE"

    @classmethod
    def parse(cls, value: str) -> "SplitMethod":
        """Map a persisted name to a method; unknown names fall back to EQUAL."""
        try:
            return cls(value)
        except ValueError:
            return cls.EQUAL


class ParticipantShare(BaseModel):
    user_id: int
    share: float

    model_config = ConfigDict(frozen=True)


class Expense(BaseModel):
    """
    A recorded expense.

    Invariants:
    - created_by is present among participants
    - sum(share) == amount within 0.01 for EXACT and PERCENTAGE
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    description: str
    amount: float
    split_method: SplitMethod = SplitMethod.EQUAL
    created_by: int
    created_at: datetime
    participants: Tuple[ParticipantShare, ...] = ()

    def involves(self, user_id: int) -> bool:
        """True if the user paid for or takes part in this expense."""
        if self.created_by == user_id:
            return True
        return any(p.user_id == user_id for p in self.participants)

    def share_of(self, user_id: int) -> float:
        return sum(p.share for p in self.participants if p.user_id == user_id)
