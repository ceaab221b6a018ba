"""Use case for deactivating an account."""

from sqlalchemy.orm import Session

from .lifecycle import AccountStatusChange, apply_status_change


def deactivate_account(session: Session, account_id: int) -> AccountStatusChange:
    """Mark the account as inactive. Suspension and lock state are left alone."""

    return apply_status_change(session, account_id, {"is_active": False})
