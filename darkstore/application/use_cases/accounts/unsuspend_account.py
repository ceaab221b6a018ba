"""Use case for lifting an account suspension."""

from sqlalchemy.orm import Session

from .lifecycle import AccountStatusChange, apply_status_change


def unsuspend_account(session: Session, account_id: int) -> AccountStatusChange:
    """Clear the suspension flag and its reason."""

    return apply_status_change(
        session, account_id, {"is_suspended": False, "suspension_reason": None}
    )
