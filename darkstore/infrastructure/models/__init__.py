"""ORM models used by the application infrastructure."""

from .account import AccountModel
from .notification import NotificationModel

__all__ = [
    "AccountModel",
    "NotificationModel",
]
