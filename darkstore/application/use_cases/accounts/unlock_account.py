"""Use case for unlocking an account."""

from sqlalchemy.orm import Session

from .lifecycle import AccountStatusChange, apply_status_change


def unlock_account(session: Session, account_id: int) -> AccountStatusChange:
    """Remove the login lock and reset the failed attempt counter."""

    return apply_status_change(
        session, account_id, {"locked_until": None, "failed_login_attempts": 0}
    )
