"""Account proxy that only lets the owner through."""

import logging
from typing import Callable, Optional

from surrogate.core.exceptions import AccessDenied
from surrogate.core.identity import current_caller_identity
from surrogate.protocols import AccountSubject
from surrogate.proxies.account_proxy import AccountProxy

logger = logging.getLogger(__name__)


class AccountProtectionProxy(AccountProxy):
    """
    Checks the caller's identity before every operation.

    The identity source is consulted on each call, so a change of caller
    between calls is honoured. A denied call never reaches the subject.
    """

    def __init__(
        self,
        real_account: AccountSubject,
        owner_name: str,
        identity_source: Optional[Callable[[], str]] = None,
    ):
        super().__init__(real_account)
        self._owner_name = owner_name
        self._identity_source = identity_source or current_caller_identity

    @property
    def owner_name(self) -> str:
        return self._owner_name

    def balance(self) -> int:
        self._check_access("balance")
        return super().balance()

    def deposit(self, amount: int) -> None:
        self._check_access("deposit")
        return super().deposit(amount)

    def withdraw(self, amount: int) -> None:
        self._check_access("withdraw")
        return super().withdraw(amount)

    def _check_access(self, operation: str) -> None:
        caller = self._identity_source()
        if caller != self._owner_name:
            logger.warning(
                "Denied %s by %s on account owned by %s", operation, caller, self._owner_name
            )
            raise AccessDenied(operation, attempted=caller, required=self._owner_name)
