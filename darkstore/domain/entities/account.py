"""Domain entity representing a platform account."""

from dataclasses import dataclass
from datetime import datetime

from .role import PRIVILEGED_ROLE, AccountRole


@dataclass
class Account:
    """Identity and status attributes of a platform account.

    The four status dimensions (active, suspended, locked, failed attempts)
    are independent of each other: an account can be active and suspended at
    the same time.
    """

    id: int | None
    role: AccountRole
    name: str
    email: str | None
    phone: str | None
    is_active: bool
    is_suspended: bool
    suspension_reason: str | None
    locked_until: datetime | None
    failed_login_attempts: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_login_at: datetime | None = None

    def has_role(self, role: AccountRole | str) -> bool:
        """Return ``True`` when the account holds ``role``."""

        value = role.value if isinstance(role, AccountRole) else str(role)
        return self.role.value == value.lower()

    def is_privileged(self) -> bool:
        """Return ``True`` for accounts whose status can never be modified."""

        return self.has_role(PRIVILEGED_ROLE)
