from .account import AccountRead, AccountStatusRead, SuspendAccountRequest
from .notification import (
    MarkAllReadRequest,
    MarkAllReadResponse,
    NotificationCreate,
    NotificationRead,
)

__all__ = [
    "AccountRead",
    "AccountStatusRead",
    "SuspendAccountRequest",
    "MarkAllReadRequest",
    "MarkAllReadResponse",
    "NotificationCreate",
    "NotificationRead",
]
