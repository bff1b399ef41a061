"""
Ledger - append-only collection of expenses.

Core algorithm for create_expense:
1. Validate amount and description
2. Make sure the creator is among the participants (append, no de-duplication)
3. Check every participant is registered
4. Compute shares with the split calculator
5. Persist the new state, then append in memory
"""

import logging
import math
import threading
from datetime import datetime
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from splitbook.db.records import expense_from_row, expense_to_row
from splitbook.db.text_store import TextStore
from splitbook.models.expense import Expense, SplitMethod
from splitbook.repositories.user_repo import IdentityRegistry
from splitbook.services.split_service import SplitService
from splitbook.utils.validation import InvalidAmount, UnknownParticipant, validate_text_field

logger = logging.getLogger(__name__)


class Ledger:
    """Repository for expenses."""

    def __init__(self, registry: IdentityRegistry, store: Optional[TextStore] = None):
        self.registry = registry
        self.store = store
        self._lock = threading.RLock()
        self._expenses: List[Expense] = []
        self._next_id = 1

    def load(self) -> int:
        """Replace in-memory state with the store contents. Returns the expense count."""
        expenses: List[Expense] = []
        if self.store is not None:
            for row in self.store.read_rows():
                expense = expense_from_row(row)
                if expense is None:
                    logger.warning("Skipping malformed expense row: %r", "|".join(row))
                    continue
                expenses.append(expense)

        with self._lock:
            self._expenses = expenses
            self._next_id = max((e.id for e in expenses), default=0) + 1
        logger.info("Loaded %d expenses", len(expenses))
        return len(expenses)

    def create_expense(
        self,
        description: str,
        amount: float,
        method: SplitMethod,
        participant_ids: Sequence[int],
        weights: Optional[Sequence[float]],
        creator_id: int,
        current_time_provider: Callable[[], datetime] = datetime.now,
    ) -> Expense:
        """
        Record a new expense paid by creator_id.

        Raises InvalidAmount, InvalidField, UnknownParticipant, or whatever the
        split calculator raises; StorageError if the store cannot be written.
        The ledger is unchanged on any failure.
        """
        if not math.isfinite(amount) or amount <= 0:
            raise InvalidAmount(amount)
        validate_text_field("description", description)

        participants = list(participant_ids)
        if creator_id not in participants:
            participants.append(creator_id)

        for user_id in participants:
            if not self.registry.exists(user_id):
                raise UnknownParticipant(user_id)

        shares = SplitService.calculate(amount, method, participants, weights)

        with self._lock:
            expense = Expense(
                id=self._next_id,
                description=description,
                amount=amount,
                split_method=method,
                created_by=creator_id,
                created_at=current_time_provider(),
                participants=tuple(shares),
            )
            self._persist(self._expenses + [expense])

            self._expenses.append(expense)
            self._next_id = expense.id + 1

        logger.info(
            "Expense %d created by user %d: %.2f split %s among %d",
            expense.id, creator_id, amount, method.value, len(shares)
        )
        return expense

    def all_expenses(self) -> Tuple[Expense, ...]:
        """Snapshot of every expense in insertion order."""
        with self._lock:
            return tuple(self._expenses)

    def expenses_involving(self, user_id: int) -> Iterator[Expense]:
        """Expenses the user created or takes part in; a fresh pass per call."""
        return (e for e in self.all_expenses() if e.involves(user_id))

    def get_expense(self, expense_id: int) -> Optional[Expense]:
        with self._lock:
            for expense in self._expenses:
                if expense.id == expense_id:
                    return expense
        return None

    def _persist(self, expenses: List[Expense]) -> None:
        if self.store is not None:
            self.store.write_rows([expense_to_row(e) for e in expenses])
