import logging
import threading
from typing import Dict, List, Optional

from splitbook.core.security import CredentialVerifier, PlaintextVerifier
from splitbook.db.records import user_from_row, user_to_row
from splitbook.db.text_store import TextStore
from splitbook.models.user import User
from splitbook.utils.validation import (
    DuplicateEmail,
    InvalidCredentials,
    InvalidEmail,
    InvalidPhone,
    is_valid_email,
    is_valid_phone,
    validate_text_field,
)

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"


class IdentityRegistry:
    """Registered users, keyed by id."""

    def __init__(self, store: Optional[TextStore] = None, verifier: Optional[CredentialVerifier] = None):
        self.store = store
        self.verifier = verifier or PlaintextVerifier()
        self._lock = threading.RLock()
        self._users: Dict[int, User] = {}
        self._by_email: Dict[str, int] = {}
        self._next_id = 1

    def load(self) -> int:
        """Replace in-memory state with the store contents. Returns the user count."""
        users: Dict[int, User] = {}
        by_email: Dict[str, int] = {}
        if self.store is not None:
            for row in self.store.read_rows():
                user = user_from_row(row)
                if user is None:
                    logger.warning("Skipping malformed user row: %r", "|".join(row))
                    continue
                users[user.id] = user
                if user.email in by_email:
                    # first row wins for login
                    logger.warning(
                        "Duplicate email %s on user %d; login keeps user %d",
                        user.email, user.id, by_email[user.email]
                    )
                    continue
                by_email[user.email] = user.id

        with self._lock:
            self._users = users
            self._by_email = by_email
            self._next_id = max(users, default=0) + 1
        logger.info("Loaded %d users", len(users))
        return len(users)

    def register(self, name: str, email: str, phone: str, secret: str) -> User:
        """
        Create a new user.

        Raises InvalidEmail, InvalidPhone, InvalidField or DuplicateEmail;
        StorageError if the store cannot be written (nothing is kept in memory then).
        """
        if not is_valid_email(email):
            raise InvalidEmail(email)
        if not is_valid_phone(phone):
            raise InvalidPhone(phone)
        validate_text_field("name", name)
        validate_text_field("email", email)
        validate_text_field("password", secret)

        with self._lock:
            if email in self._by_email:
                raise DuplicateEmail(email)

            user = User(
                id=self._next_id,
                name=name,
                email=email,
                phone=phone,
                secret=self.verifier.hash(secret),
            )
            self._persist(list(self._users.values()) + [user])

            self._users[user.id] = user
            self._by_email[email] = user.id
            self._next_id = user.id + 1

        logger.info("Registered user %d", user.id)
        return user

    def authenticate(self, email: str, secret: str) -> User:
        """Return the user matching email and secret, else raise InvalidCredentials."""
        with self._lock:
            user_id = self._by_email.get(email)
            user = self._users.get(user_id) if user_id is not None else None
        if user is None or not self.verifier.verify(secret, user.secret):
            raise InvalidCredentials()
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def resolve_name(self, user_id: int) -> str:
        user = self.get_user(user_id)
        return user.name if user else UNKNOWN_NAME

    def exists(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._users

    def list_users(self) -> List[User]:
        """All users in registration order."""
        with self._lock:
            return list(self._users.values())

    def _persist(self, users: List[User]) -> None:
        if self.store is not None:
            self.store.write_rows([user_to_row(u) for u in users])
