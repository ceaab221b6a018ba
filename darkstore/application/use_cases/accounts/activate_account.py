"""Use case for activating an account."""

from sqlalchemy.orm import Session

from .lifecycle import AccountStatusChange, apply_status_change


def activate_account(session: Session, account_id: int) -> AccountStatusChange:
    """Mark the account as active."""

    return apply_status_change(session, account_id, {"is_active": True})
