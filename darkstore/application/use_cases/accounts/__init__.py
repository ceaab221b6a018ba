"""Use cases for reading accounts and changing their status."""

from .activate_account import activate_account
from .deactivate_account import deactivate_account
from .get_account import get_account
from .lifecycle import AccountStatusChange, load_mutable_account
from .suspend_account import DEFAULT_SUSPENSION_REASON, suspend_account
from .unlock_account import unlock_account
from .unsuspend_account import unsuspend_account

__all__ = [
    "AccountStatusChange",
    "DEFAULT_SUSPENSION_REASON",
    "activate_account",
    "deactivate_account",
    "get_account",
    "load_mutable_account",
    "suspend_account",
    "unlock_account",
    "unsuspend_account",
]
