"""Tests for notification audience resolution against the database."""

import json
from datetime import datetime, timedelta

import pytest

from darkstore.application.use_cases.notifications import (
    create_notification,
    get_notification,
    list_all_notifications,
    list_notifications_for,
    mark_all_read_for,
)
from darkstore.domain.audience import Recipient, is_in_audience
from darkstore.domain.exceptions import (
    AccountNotFoundError,
    InvalidNotificationError,
    InvalidRecipientError,
    NotificationNotFoundError,
)
from darkstore.infrastructure.repositories import NotificationRepository


@pytest.fixture()
def audience(insert_notification):
    """The four targeting shapes plus a notification for another user."""

    return {
        "A": insert_notification(target_type="all"),
        "U": insert_notification(target_type="user", user_id=7),
        "R": insert_notification(target_type="role", target_roles="admin"),
        "G": insert_notification(target_type="role", target_roles="all"),
        "U8": insert_notification(target_type="user", user_id=8),
    }


def _read_keys(audience, fetch_notifications):
    state = fetch_notifications()
    return {key for key, notification_id in audience.items() if state[notification_id][0]}


def test_user_without_role_marks_own_everyone_and_all_roles(
    session, audience, fetch_notifications
):
    updated = mark_all_read_for(session, Recipient(user_id=7))

    assert updated == 3
    assert _read_keys(audience, fetch_notifications) == {"A", "U", "G"}


def test_role_only_marks_everyone_and_matching_role(session, audience, fetch_notifications):
    updated = mark_all_read_for(session, Recipient(role="admin"))

    assert updated == 2
    assert _read_keys(audience, fetch_notifications) == {"A", "R"}


def test_user_with_role_uses_the_given_role(session, audience, fetch_notifications):
    updated = mark_all_read_for(session, Recipient(user_id=7, role="admin"))

    assert updated == 3
    assert _read_keys(audience, fetch_notifications) == {"A", "U", "R"}


def test_marked_notifications_get_a_read_timestamp(session, audience, fetch_notifications):
    mark_all_read_for(session, Recipient(user_id=7))

    state = fetch_notifications()
    assert state[audience["A"]][1] is not None
    assert state[audience["R"]] == (False, None)


def test_empty_recipient_is_rejected_before_touching_storage(audience, fetch_notifications):
    before = fetch_notifications()

    with pytest.raises(InvalidRecipientError):
        mark_all_read_for(None, Recipient())

    assert fetch_notifications() == before


def test_already_read_notifications_keep_their_timestamp(
    session, insert_notification, fetch_notifications
):
    read_at = datetime(2024, 1, 1, 9, 30)
    already_read = insert_notification(target_type="all", is_read=True, read_at=read_at)
    unread = insert_notification(target_type="all")

    assert mark_all_read_for(session, Recipient(user_id=1)) == 1
    assert mark_all_read_for(session, Recipient(user_id=1)) == 0

    state = fetch_notifications()
    assert state[already_read] == (True, read_at)
    assert state[unread][0] is True


def test_database_filter_agrees_with_in_memory_rule(session, insert_notification):
    for target_type, extra in [
        ("all", {}),
        ("user", {"user_id": 3}),
        ("user", {"user_id": 4}),
        ("role", {"target_roles": json.dumps(["customer"])}),
        ("role", {"target_roles": json.dumps(["all"])}),
        ("role", {"target_roles": json.dumps(["admin", "delivery_partner"])}),
        ("all", {"is_read": True, "read_at": datetime(2024, 5, 1)}),
    ]:
        insert_notification(target_type=target_type, **extra)

    recipient = Recipient(user_id=3, role="delivery_partner")
    repository = NotificationRepository(session)
    expected = {
        notification.id
        for notification in repository.list_recent(limit=None)
        if is_in_audience(notification, recipient)
    }

    matched = {
        notification.id
        for notification in repository.list_matching(
            recipient, now=datetime.now(), unread_only=True, limit=None
        )
    }

    assert matched == expected
    assert mark_all_read_for(session, recipient) == len(expected)


def test_list_for_recipient_skips_expired_and_orders_by_priority(session, insert_notification):
    now = datetime.now()
    low = insert_notification(target_type="all", priority="low")
    urgent = insert_notification(target_type="all", priority="urgent")
    insert_notification(target_type="all", expires_at=now - timedelta(days=1))
    future = insert_notification(target_type="all", expires_at=now + timedelta(days=30))

    notifications = list_notifications_for(session, Recipient(user_id=1))

    ids = [notification.id for notification in notifications]
    assert ids[0] == urgent
    assert ids[-1] == low
    assert set(ids) == {low, urgent, future}


def test_list_unread_only(session, insert_notification):
    unread = insert_notification(target_type="all")
    insert_notification(target_type="all", is_read=True, read_at=datetime(2024, 1, 1))

    notifications = list_notifications_for(session, Recipient(role="customer"), unread_only=True)

    assert [notification.id for notification in notifications] == [unread]


def test_anonymous_listing_only_returns_broadcasts(session, audience):
    notifications = list_notifications_for(session, Recipient())

    assert [notification.id for notification in notifications] == [audience["A"]]


def test_admin_listing_returns_every_target(session, audience):
    notifications = list_all_notifications(session)

    assert {notification.id for notification in notifications} == set(audience.values())


def test_create_role_notification_stores_json_roles(session):
    notification = create_notification(
        session,
        title="Stock update",
        message="New arrivals",
        target_type="role",
        target_roles=["customer", " delivery_partner "],
        user_id=12,
    )

    assert notification.id is not None
    assert notification.target_roles == '["customer", "delivery_partner"]'
    assert notification.user_id is None
    assert notification.is_read is False
    assert notification.read_at is None


def test_create_user_notification_requires_user_id(session):
    with pytest.raises(InvalidNotificationError):
        create_notification(session, title="Hi", message="There", target_type="user")


def test_create_user_notification_requires_existing_account(session):
    with pytest.raises(AccountNotFoundError):
        create_notification(
            session, title="Hi", message="There", target_type="user", user_id=42
        )


def test_create_user_notification(session, insert_account):
    account_id = insert_account()

    notification = create_notification(
        session,
        title="Order shipped",
        message="Your order is on the way",
        target_type="user",
        user_id=account_id,
        target_roles=["admin"],
        priority="high",
    )

    assert notification.user_id == account_id
    assert notification.target_roles is None
    assert notification.priority == "high"
    assert get_notification(session, notification.id).title == "Order shipped"


@pytest.mark.parametrize(
    "overrides",
    [
        {"title": "   "},
        {"message": ""},
        {"target_type": "group"},
        {"priority": "critical"},
        {"target_type": "role", "target_roles": []},
    ],
)
def test_create_notification_rejects_invalid_values(session, overrides):
    values = {"title": "Title", "message": "Body"}
    values.update(overrides)

    with pytest.raises(InvalidNotificationError):
        create_notification(session, **values)


def test_get_notification_raises_for_unknown_id(session):
    with pytest.raises(NotificationNotFoundError):
        get_notification(session, 123)


def test_listing_requires_exact_membership_in_json_role_lists(session, insert_notification):
    insert_notification(target_type="role", target_roles=json.dumps(["super_admin"]))
    for_admins = insert_notification(target_type="role", target_roles=json.dumps(["admin"]))
    for_all_roles = insert_notification(
        target_type="role", target_roles=json.dumps(["customer", "all"])
    )
    legacy_text = insert_notification(target_type="role", target_roles="admin,customer")

    notifications = list_notifications_for(session, Recipient(role="admin"))

    assert {notification.id for notification in notifications} == {
        for_admins,
        for_all_roles,
        legacy_text,
    }


def test_listing_narrows_role_lists_but_mark_all_read_does_not(
    session, insert_notification, fetch_notifications
):
    super_admins_only = insert_notification(
        target_type="role", target_roles=json.dumps(["super_admin"])
    )

    assert list_notifications_for(session, Recipient(role="admin")) == []
    assert mark_all_read_for(session, Recipient(role="admin")) == 1
    assert fetch_notifications()[super_admins_only][0] is True
