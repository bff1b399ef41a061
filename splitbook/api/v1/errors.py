from fastapi import HTTPException, status

from splitbook.utils.validation import (
    InvalidCredentials,
    SplitbookError,
    StorageError,
    UnknownParticipant,
)


def http_error(exc: SplitbookError) -> HTTPException:
    """Translate a domain error into the matching HTTP error."""
    if isinstance(exc, InvalidCredentials):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc))
    if isinstance(exc, UnknownParticipant):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, StorageError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Could not save: {exc}"
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
