"""Rules deciding which notifications are addressed to a recipient.

A notification reaches a recipient when any of these holds:

* it targets a single user and that user is the recipient;
* it targets everyone;
* it targets roles and its ``target_roles`` text contains the recipient's
  role term (see :func:`resolve_role_term`).

The repository builds the same rule as a SQL expression; the functions here
are the in-memory reference used by callers holding loaded entities.
Listing additionally narrows JSON role lists to exact membership
(:func:`lists_recipient_role`).
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from darkstore.domain.entities import (
    ALL_ROLES_TOKEN,
    NOTIFICATION_TARGET_ALL,
    NOTIFICATION_TARGET_ROLE,
    NOTIFICATION_TARGET_USER,
    Notification,
)
from darkstore.domain.exceptions import InvalidRecipientError


@dataclass(frozen=True)
class Recipient:
    """Identity a notification query is evaluated for."""

    user_id: int | None = None
    role: str | None = None

    @property
    def has_identity(self) -> bool:
        return self.user_id is not None or bool(self.role)


def ensure_recipient(recipient: Recipient) -> Recipient:
    """Return ``recipient`` or raise when it carries neither user id nor role."""

    if not recipient.has_identity:
        raise InvalidRecipientError()
    return recipient


def resolve_role_term(recipient: Recipient) -> str | None:
    """Return the text role-targeted notifications must contain.

    An explicit role wins. A user without an explicit role only picks up
    notifications tagged for every role (``"all"``), never those of other
    roles. Without any identity there is no role term.
    """

    if recipient.role:
        return recipient.role
    if recipient.user_id is not None:
        return ALL_ROLES_TOKEN
    return None


def is_targeted_at(notification: Notification, recipient: Recipient) -> bool:
    """Return ``True`` when the targeting of ``notification`` covers ``recipient``."""

    if notification.target_type == NOTIFICATION_TARGET_ALL:
        return True

    if notification.target_type == NOTIFICATION_TARGET_USER:
        return recipient.user_id is not None and notification.user_id == recipient.user_id

    if notification.target_type == NOTIFICATION_TARGET_ROLE:
        role_term = resolve_role_term(recipient)
        return role_term is not None and role_term in (notification.target_roles or "")

    return False


def is_in_audience(notification: Notification, recipient: Recipient) -> bool:
    """Return ``True`` when ``notification`` is unread and addressed to ``recipient``."""

    return not notification.is_read and is_targeted_at(notification, recipient)


def lists_recipient_role(notification: Notification, recipient: Recipient) -> bool:
    """Return ``False`` when a JSON role list names neither ``"all"`` nor the role.

    Listing narrows the substring match of :func:`is_targeted_at`, so that
    ``admin`` does not see notifications addressed to ``["super_admin"]``.
    Notifications of other target types and role texts that are not a JSON
    list are kept.
    """

    if notification.target_type != NOTIFICATION_TARGET_ROLE or not notification.target_roles:
        return True
    try:
        roles = json.loads(notification.target_roles)
    except ValueError:
        return True
    if not isinstance(roles, list):
        return True
    return ALL_ROLES_TOKEN in roles or (bool(recipient.role) and recipient.role in roles)


__all__ = [
    "Recipient",
    "ensure_recipient",
    "is_in_audience",
    "is_targeted_at",
    "lists_recipient_role",
    "resolve_role_term",
]
