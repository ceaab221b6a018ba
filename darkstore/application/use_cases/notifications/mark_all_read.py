"""Use case for marking a recipient's whole audience as read."""

import logging

from sqlalchemy.orm import Session

from darkstore.domain.audience import Recipient, ensure_recipient
from darkstore.infrastructure.repositories import NotificationRepository
from darkstore.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def mark_all_read_for(session: Session, recipient: Recipient) -> int:
    """Mark every unread notification addressed to ``recipient`` as read.

    The recipient must carry a user id, a role, or both; otherwise
    :class:`~darkstore.domain.exceptions.InvalidRecipientError` is raised
    before the database is touched. Notifications that were already read keep
    their original ``read_at``. Returns the number of notifications updated.
    """

    ensure_recipient(recipient)
    updated = NotificationRepository(session).mark_read_matching(
        recipient, read_at=now_in_app_timezone()
    )
    logger.info(
        "Marked %s notification(s) as read for user_id=%s role=%s",
        updated,
        recipient.user_id,
        recipient.role,
    )
    return updated
