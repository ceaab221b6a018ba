"""Use cases for listing notifications."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from darkstore.domain.audience import Recipient, lists_recipient_role
from darkstore.domain.entities import Notification
from darkstore.infrastructure.repositories import NotificationRepository
from darkstore.utils import now_in_app_timezone


def list_notifications_for(
    session: Session,
    recipient: Recipient,
    *,
    unread_only: bool = False,
    limit: int = 50,
) -> Sequence[Notification]:
    """Return the live notifications addressed to ``recipient``.

    Expired notifications are skipped. An anonymous recipient only sees
    notifications addressed to everyone. Role-targeted notifications whose
    JSON role list names neither ``"all"`` nor the recipient's role are
    dropped after the query.
    """

    notifications = NotificationRepository(session).list_matching(
        recipient,
        now=now_in_app_timezone(),
        unread_only=unread_only,
        limit=limit,
    )
    return [
        notification
        for notification in notifications
        if lists_recipient_role(notification, recipient)
    ]


def list_all_notifications(session: Session, *, limit: int = 100) -> Sequence[Notification]:
    """Return the most recent notifications regardless of their target."""

    return NotificationRepository(session).list_recent(limit=limit)
