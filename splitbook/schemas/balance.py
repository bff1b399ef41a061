from typing import Dict, List, Literal
from pydantic import BaseModel


class BalanceLine(BaseModel):
    """One unsettled counterparty in a balance summary."""
    user_id: int
    name: str
    amount: float  # positive: they owe you, negative: you owe them
    direction: Literal["owes_you", "you_owe"]


class BalanceResponse(BaseModel):
    user_id: int
    entries: List[BalanceLine]
    settled: bool


class RawBalanceResponse(BaseModel):
    user_id: int
    balance: Dict[int, float]
