import logging
import os

from splitbook.core.config import settings
from splitbook.core.security import get_verifier
from splitbook.db.text_store import TextStore
from splitbook.repositories.expense_repo import Ledger
from splitbook.repositories.user_repo import IdentityRegistry

logger = logging.getLogger(__name__)


class StoreDatabase:
    """Registry and ledger backed by the text stores in one data directory."""

    def __init__(self, data_dir: str, credential_scheme: str | None = None):
        self.data_dir = data_dir
        self.registry = IdentityRegistry(
            TextStore(os.path.join(data_dir, settings.USERS_FILE)),
            verifier=get_verifier(credential_scheme),
        )
        self.ledger = Ledger(
            self.registry,
            TextStore(os.path.join(data_dir, settings.EXPENSES_FILE)),
        )

    def load(self) -> None:
        self.registry.load()
        self.ledger.load()


database = StoreDatabase(settings.DATA_DIR)


def connect_to_store():
    """Load users and expenses from DATA_DIR."""
    database.load()
    logger.info("Text store ready: %s", os.path.abspath(database.data_dir))


def close_store():
    # every mutation is written through, nothing to flush
    logger.info("Text store closed")


def get_db() -> StoreDatabase:
    """Get database instance."""
    return database
