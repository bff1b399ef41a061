"""Validation utilities and the domain error taxonomy."""
from typing import Optional


class SplitbookError(Exception):
    """Base class for every recoverable domain error."""
    pass


class ValidationFailure(SplitbookError):
    """Input rejected before anything was stored."""
    pass


class RecordLookupError(SplitbookError):
    """A referenced record is missing or clashes with an existing one."""
    pass


class StorageError(SplitbookError):
    """The text store could not be written."""
    pass


class InvalidEmail(ValidationFailure):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Invalid email format: {email!r}")


class InvalidPhone(ValidationFailure):
    def __init__(self, phone: str):
        self.phone = phone
        super().__init__(f"Invalid phone number {phone!r} (must be 10+ digits)")


class InvalidAmount(ValidationFailure):
    def __init__(self, amount: float):
        self.amount = amount
        super().__init__(f"Amount must be greater than 0, got {amount}")


class InvalidShare(ValidationFailure):
    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Share must be a finite number, got {value}")


class InvalidField(ValidationFailure):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field '{field}' must not contain '|' or line breaks")


class ShareCountMismatch(ValidationFailure):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Number of shares ({actual}) doesn't match participants ({expected})"
        )


class ShareSumMismatch(ValidationFailure):
    def __init__(self, total: float, expected: float):
        self.total = total
        self.expected = expected
        super().__init__(
            f"Sum of shares ({total:.2f}) doesn't match total amount ({expected:.2f})"
        )


class PercentageSumMismatch(ValidationFailure):
    def __init__(self, total: float):
        self.total = total
        super().__init__(f"Percentages must add up to 100% (current: {total}%)")


class DuplicateEmail(RecordLookupError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class InvalidCredentials(RecordLookupError):
    def __init__(self):
        super().__init__("Invalid email or password")


class UnknownParticipant(RecordLookupError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found")


# Tolerance used for every monetary/percentage sum comparison
SUM_TOLERANCE = 0.01

FORBIDDEN_CHARS = ("|", "\n", "\r")


def is_valid_email(email: str) -> bool:
    """Basic check: an '@' and a '.' somewhere in the address."""
    return "@" in email and "." in email


def is_valid_phone(phone: str) -> bool:
    """At least 10 characters, digits only."""
    if not phone or len(phone) < 10:
        return False
    return all(c in "0123456789" for c in phone)


def validate_text_field(field: str, value: Optional[str]) -> None:
    """
    Reject values the pipe-delimited store cannot hold.

    Raises InvalidField when the value contains a delimiter or line break.
    """
    if value is None:
        return
    if any(ch in value for ch in FORBIDDEN_CHARS):
        raise InvalidField(field)
