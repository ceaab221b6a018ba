"""Use case for retrieving a single notification."""

from sqlalchemy.orm import Session

from darkstore.domain.entities import Notification
from darkstore.domain.exceptions import NotificationNotFoundError
from darkstore.infrastructure.repositories import NotificationRepository


def get_notification(session: Session, notification_id: int) -> Notification:
    notification = NotificationRepository(session).get(notification_id)
    if notification is None:
        raise NotificationNotFoundError(notification_id)
    return notification
