from typing import Dict, List

from splitbook.repositories.expense_repo import Ledger
from splitbook.repositories.user_repo import IdentityRegistry
from splitbook.schemas.balance import BalanceLine
from splitbook.utils.validation import SUM_TOLERANCE


class BalanceService:
    @staticmethod
    def compute_balance(ledger: Ledger, user_id: int) -> Dict[int, float]:
        """
        Net every share in the ledger into a per-counterparty balance for user_id.

        Positive: the counterparty owes user_id. Negative: user_id owes them.
        Near-zero entries are kept; filtering is left to summarize().
        """
        balance: Dict[int, float] = {}
        for expense in ledger.all_expenses():
            payer = expense.created_by
            for participant in expense.participants:
                if payer == user_id and participant.user_id != user_id:
                    # They owe the user
                    balance[participant.user_id] = balance.get(participant.user_id, 0.0) + participant.share
                elif participant.user_id == user_id and payer != user_id:
                    # The user owes the payer
                    balance[payer] = balance.get(payer, 0.0) - participant.share
        return balance

    @staticmethod
    def summarize(balance: Dict[int, float], registry: IdentityRegistry) -> List[BalanceLine]:
        """Unsettled entries (|amount| > 0.01) with names, ordered by counterparty id."""
        lines = []
        for counterparty_id in sorted(balance):
            amount = balance[counterparty_id]
            if abs(amount) <= SUM_TOLERANCE:
                continue
            lines.append(
                BalanceLine(
                    user_id=counterparty_id,
                    name=registry.resolve_name(counterparty_id),
                    amount=round(amount, 2),
                    direction="owes_you" if amount > 0 else "you_owe",
                )
            )
        return lines
