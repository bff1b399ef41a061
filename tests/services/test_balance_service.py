import pytest

from splitbook.models.expense import SplitMethod
from splitbook.repositories.expense_repo import Ledger
from splitbook.repositories.user_repo import IdentityRegistry
from splitbook.services.balance_service import BalanceService


@pytest.fixture
def memory_ledger():
    """In-memory registry with four users and an empty ledger."""
    registry = IdentityRegistry()
    for i, name in enumerate(["Alice", "Bob", "Charlie", "Dana"], start=1):
        registry.register(name, f"{name.lower()}@example.com", f"555000000{i}", "pw")
    return Ledger(registry)


def test_scenario_equal_split(memory_ledger):
    # User 1 pays 90, split equally among 1, 2, 3
    memory_ledger.create_expense("Dinner", 90.0, SplitMethod.EQUAL, [1, 2, 3], None, 1)

    assert BalanceService.compute_balance(memory_ledger, 2) == {1: -30.0}
    assert BalanceService.compute_balance(memory_ledger, 1) == {2: 30.0, 3: 30.0}


def test_uninvolved_user_has_empty_balance(memory_ledger):
    memory_ledger.create_expense("Dinner", 90.0, SplitMethod.EQUAL, [1, 2, 3], None, 1)
    assert BalanceService.compute_balance(memory_ledger, 4) == {}


def test_multiple_expenses_net_together(memory_ledger):
    memory_ledger.create_expense("Dinner", 90.0, SplitMethod.EQUAL, [1, 2, 3], None, 1)
    memory_ledger.create_expense("Taxi", 40.0, SplitMethod.EXACT, [1, 2], [10.0, 30.0], 2)

    # 2 owed 1 30, then 1 owes 2 10 -> 2 owes 1 20
    assert BalanceService.compute_balance(memory_ledger, 1) == {2: 20.0, 3: 30.0}
    assert BalanceService.compute_balance(memory_ledger, 2) == {1: -20.0}


def test_payers_own_share_ignored(memory_ledger):
    memory_ledger.create_expense("Solo", 50.0, SplitMethod.EQUAL, [1], None, 1)
    assert BalanceService.compute_balance(memory_ledger, 1) == {}


def test_duplicate_participant_accumulates(memory_ledger):
    memory_ledger.create_expense("Snacks", 30.0, SplitMethod.EQUAL, [1, 2, 2], None, 1)
    assert BalanceService.compute_balance(memory_ledger, 1) == {2: 20.0}
    assert BalanceService.compute_balance(memory_ledger, 2) == {1: -20.0}


def test_near_zero_entries_kept_in_raw_map(memory_ledger):
    memory_ledger.create_expense("A", 20.0, SplitMethod.EXACT, [1, 2], [10.0, 10.0], 1)
    memory_ledger.create_expense("B", 20.0, SplitMethod.EXACT, [1, 2], [10.005, 9.995], 2)

    balance = BalanceService.compute_balance(memory_ledger, 1)
    assert set(balance) == {2}
    assert balance[2] == pytest.approx(-0.005)


def test_compute_is_idempotent(memory_ledger):
    memory_ledger.create_expense("Dinner", 90.0, SplitMethod.EQUAL, [1, 2, 3], None, 1)
    memory_ledger.create_expense("Hotel", 200.0, SplitMethod.PERCENTAGE, [1, 3], [70.0, 30.0], 3)

    first = BalanceService.compute_balance(memory_ledger, 1)
    second = BalanceService.compute_balance(memory_ledger, 1)
    assert first == second


def test_symmetry(memory_ledger):
    memory_ledger.create_expense("Dinner", 90.0, SplitMethod.EQUAL, [1, 2, 3], None, 1)
    memory_ledger.create_expense("Hotel", 200.0, SplitMethod.PERCENTAGE, [1, 3], [70.0, 30.0], 3)
    memory_ledger.create_expense("Taxi", 40.0, SplitMethod.EXACT, [2, 3], [25.0, 15.0], 2)
    memory_ledger.create_expense("Tickets", 60.0, SplitMethod.EQUAL, [1, 2, 4], None, 4)

    for x in range(1, 5):
        x_view = BalanceService.compute_balance(memory_ledger, x)
        for y, amount in x_view.items():
            y_view = BalanceService.compute_balance(memory_ledger, y)
            assert y_view[x] == pytest.approx(-amount)


def test_summarize_filters_settled_and_resolves_names(memory_ledger):
    memory_ledger.create_expense("Dinner", 90.0, SplitMethod.EQUAL, [1, 2, 3], None, 1)
    memory_ledger.create_expense("Taxi", 30.0, SplitMethod.EXACT, [1, 3], [30.0, 0.0], 3)
    memory_ledger.create_expense("Tickets", 20.0, SplitMethod.EXACT, [1, 4], [10.0, 10.0], 4)
    memory_ledger.create_expense("Tickets back", 20.0, SplitMethod.EXACT, [1, 4], [10.0, 10.0], 1)

    balance = BalanceService.compute_balance(memory_ledger, 1)
    assert balance[3] == 0.0
    assert balance[4] == 0.0

    lines = BalanceService.summarize(balance, memory_ledger.registry)

    assert [(line.user_id, line.name, line.amount, line.direction) for line in lines] == [
        (2, "Bob", 30.0, "owes_you"),
    ]


def test_summarize_you_owe(memory_ledger):
    memory_ledger.create_expense("Dinner", 90.0, SplitMethod.EQUAL, [1, 2, 3], None, 1)

    lines = BalanceService.summarize(BalanceService.compute_balance(memory_ledger, 3), memory_ledger.registry)

    assert len(lines) == 1
    assert lines[0].user_id == 1
    assert lines[0].name == "Alice"
    assert lines[0].amount == -30.0
    assert lines[0].direction == "you_owe"


def test_summarize_unknown_counterparty(memory_ledger):
    lines = BalanceService.summarize({9: 12.5}, memory_ledger.registry)
    assert lines[0].name == "Unknown"


def test_summarize_empty_means_settled(memory_ledger):
    assert BalanceService.summarize({}, memory_ledger.registry) == []
