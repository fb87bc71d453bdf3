from market.services.accounts.kinds import ADMIN, CUSTOMER, AccountKind
from market.services.accounts.service import AccountService

__all__ = ["ADMIN", "CUSTOMER", "AccountKind", "AccountService"]
