"""Use case for retrieving a single account."""

from sqlalchemy.orm import Session

from darkstore.domain.entities import Account
from darkstore.domain.exceptions import AccountNotFoundError
from darkstore.infrastructure.repositories import AccountRepository


def get_account(session: Session, account_id: int) -> Account:
    """Return the requested account or raise an error if it does not exist."""

    account = AccountRepository(session).get(account_id)
    if account is None:
        raise AccountNotFoundError(account_id)
    return account
