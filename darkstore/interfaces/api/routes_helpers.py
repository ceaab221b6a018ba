"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from darkstore.application.use_cases.accounts import AccountStatusChange
from darkstore.domain.exceptions import (
    AccountNotFoundError,
    InvalidNotificationError,
    InvalidRecipientError,
    NotificationNotFoundError,
    PrivilegedAccountError,
    UnknownAccountRoleError,
)
from darkstore.interfaces.api.schemas import AccountStatusRead

_STATUS_BY_ERROR: tuple[tuple[type[ValueError], int], ...] = (
    (AccountNotFoundError, status.HTTP_404_NOT_FOUND),
    (NotificationNotFoundError, status.HTTP_404_NOT_FOUND),
    (PrivilegedAccountError, status.HTTP_403_FORBIDDEN),
    (UnknownAccountRoleError, status.HTTP_409_CONFLICT),
    (InvalidRecipientError, status.HTTP_400_BAD_REQUEST),
    (InvalidNotificationError, status.HTTP_400_BAD_REQUEST),
)


def http_error_for(exc: ValueError) -> HTTPException:
    """Return the HTTP error matching a domain error raised by a use case."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def status_change_to_response(change: AccountStatusChange, message: str) -> AccountStatusRead:
    """Build the transition response carrying only the fields that were written."""

    return AccountStatusRead(id=change.account_id, message=message, **change.changes)
