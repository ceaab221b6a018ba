"""Repository implementations for infrastructure layer."""

from .account_repository import AccountRepository
from .notification_repository import NotificationRepository, audience_filter

__all__ = [
    "AccountRepository",
    "NotificationRepository",
    "audience_filter",
]
