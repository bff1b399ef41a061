from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from splitbook.models.expense import SplitMethod


class ExpenseCreate(BaseModel):
    """
    Expense creation schema.

    shares holds exact amounts for EXACT and percentages for PERCENTAGE,
    aligned with participant_ids. The creator is added when missing.
    """
    description: str = Field(..., min_length=1, max_length=200)
    amount: float
    split_method: SplitMethod = SplitMethod.EQUAL
    participant_ids: List[int] = []
    shares: Optional[List[float]] = None

    model_config = ConfigDict(allow_inf_nan=False)


class ShareResponse(BaseModel):
    user_id: int
    name: str
    share: float


class ExpenseResponse(BaseModel):
    id: int
    description: str
    amount: float
    split_method: SplitMethod
    created_by: int
    created_at: datetime
    participants: List[ShareResponse]

    model_config = ConfigDict(from_attributes=True)


class MyExpenseResponse(ExpenseResponse):
    """Expense with the caller's own share."""
    your_share: float
