from datetime import datetime

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from splitbook.core.auth import create_access_token
from splitbook.db.session import StoreDatabase, get_db
from splitbook.db.text_store import TextStore
from splitbook.main import app
from splitbook.repositories.expense_repo import Ledger
from splitbook.repositories.user_repo import IdentityRegistry


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same moment."""
    moment = datetime(2024, 1, 15, 12, 30, 0)
    return lambda: moment


@pytest.fixture
def users_store(tmp_path) -> TextStore:
    return TextStore(str(tmp_path / "users.txt"))


@pytest.fixture
def expenses_store(tmp_path) -> TextStore:
    return TextStore(str(tmp_path / "expenses.txt"))


@pytest.fixture
def registry(users_store) -> IdentityRegistry:
    return IdentityRegistry(users_store)


@pytest.fixture
def ledger(registry, expenses_store) -> Ledger:
    return Ledger(registry, expenses_store)


@pytest.fixture
def sample_user_data():
    """Sample user data for testing."""
    return {
        "name": "John Doe",
        "email": "john@example.com",
        "phone": "5551234567",
        "secret": "SecurePassword123"
    }


@pytest.fixture
def multiple_users(registry):
    """Alice (1), Bob (2) and Charlie (3)."""
    return [
        registry.register("Alice", "alice@example.com", "5550000001", "Pass123456"),
        registry.register("Bob", "bob@example.com", "5550000002", "Pass123456"),
        registry.register("Charlie", "charlie@example.com", "5550000003", "Pass123456"),
    ]


@pytest.fixture
def test_db(tmp_path) -> StoreDatabase:
    """Fresh text-store database in a temporary directory."""
    db = StoreDatabase(str(tmp_path / "data"))
    db.load()
    return db


@pytest_asyncio.fixture
async def client(test_db):
    """API client wired to the temporary database."""
    app.dependency_overrides[get_db] = lambda: test_db
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Build bearer headers for a user id."""
    def _headers(user_id: int) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}
    return _headers
