"""Errors raised by use cases and translated to responses by the API layer."""

from __future__ import annotations


class AccountNotFoundError(ValueError):
    """The referenced account does not exist."""

    def __init__(self, account_id: int) -> None:
        self.account_id = account_id
        super().__init__("User not found")


class PrivilegedAccountError(ValueError):
    """A status change was requested on a super admin account."""

    def __init__(self, account_id: int) -> None:
        self.account_id = account_id
        super().__init__("Cannot modify super admin account status")


class InvalidRecipientError(ValueError):
    """A recipient descriptor carries neither a user id nor a role."""

    def __init__(self) -> None:
        super().__init__("user_id or role is required")


class UnknownAccountRoleError(ValueError):
    """A stored account carries a role this service does not recognise."""

    def __init__(self, account_id: int, role: str | None) -> None:
        self.account_id = account_id
        self.role = role
        super().__init__("Account has an unrecognised role")


class NotificationNotFoundError(ValueError):
    """The referenced notification does not exist."""

    def __init__(self, notification_id: int) -> None:
        self.notification_id = notification_id
        super().__init__("Notification not found")


class InvalidNotificationError(ValueError):
    """A notification cannot be created from the supplied values."""


__all__ = [
    "AccountNotFoundError",
    "InvalidNotificationError",
    "InvalidRecipientError",
    "NotificationNotFoundError",
    "PrivilegedAccountError",
    "UnknownAccountRoleError",
]
