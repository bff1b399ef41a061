import math
from typing import List, Optional, Sequence

from splitbook.models.expense import ParticipantShare, SplitMethod
from splitbook.utils.validation import (
    SUM_TOLERANCE,
    InvalidAmount,
    InvalidShare,
    PercentageSumMismatch,
    ShareCountMismatch,
    ShareSumMismatch,
)


class SplitService:
    @staticmethod
    def calculate(
        total: float,
        method: SplitMethod,
        participant_ids: Sequence[int],
        weights: Optional[Sequence[float]] = None,
    ) -> List[ParticipantShare]:
        """
        Divide a total among participants.

        - EQUAL: total / count each, no remainder redistribution
        - EXACT: weights are the shares, must sum to total within 0.01
        - PERCENTAGE: weights are percentages, must sum to 100 within 0.01

        Output order follows participant_ids; duplicates get their own share.
        NaN or infinite totals and weights are rejected before any sum check.
        """
        if not math.isfinite(total):
            raise InvalidAmount(total)

        if method == SplitMethod.EQUAL:
            if not participant_ids:
                raise ShareCountMismatch(expected=0, actual=0)
            share = total / len(participant_ids)
            return [ParticipantShare(user_id=uid, share=share) for uid in participant_ids]

        weights = list(weights or [])
        if len(weights) != len(participant_ids):
            raise ShareCountMismatch(expected=len(participant_ids), actual=len(weights))
        for w in weights:
            if not math.isfinite(w):
                raise InvalidShare(w)

        weight_sum = sum(weights)
        if not math.isfinite(weight_sum):
            raise InvalidShare(weight_sum)

        if method == SplitMethod.EXACT:
            if abs(weight_sum - total) > SUM_TOLERANCE:
                raise ShareSumMismatch(total=weight_sum, expected=total)
            return [
                ParticipantShare(user_id=uid, share=w)
                for uid, w in zip(participant_ids, weights)
            ]

        if method == SplitMethod.PERCENTAGE:
            if abs(weight_sum - 100.0) > SUM_TOLERANCE:
                raise PercentageSumMismatch(total=weight_sum)
            return [
                ParticipantShare(user_id=uid, share=total * (w / 100.0))
                for uid, w in zip(participant_ids, weights)
            ]

        raise ValueError(f"Unsupported split method: {method}")
