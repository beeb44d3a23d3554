"""Account proxy that builds its subject on first use."""

import logging
import threading
from typing import Callable, Optional

from surrogate.core.dispatch import Dispatchable
from surrogate.domain.models import BankAccount
from surrogate.protocols import AccountSubject

logger = logging.getLogger(__name__)


class VirtualAccountProxy(Dispatchable):
    """
    Defers creating the real account until an operation needs it.

    Only the construction parameters are captured up front. The subject is
    built at most once, under a lock, so concurrent first calls share a
    single instance.
    """

    exposed_operations = ("balance", "deposit", "withdraw")

    def __init__(
        self,
        starting_balance: int,
        factory: Callable[[int], AccountSubject] = BankAccount,
    ):
        self._starting_balance = starting_balance
        self._factory = factory
        self._subject: Optional[AccountSubject] = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._subject is not None

    def balance(self) -> int:
        return self.subject().balance()

    def deposit(self, amount: int) -> None:
        return self.subject().deposit(amount)

    def withdraw(self, amount: int) -> None:
        return self.subject().withdraw(amount)

    def subject(self) -> AccountSubject:
        """Return the real account, creating it if this is the first use."""
        subject = self._subject
        if subject is not None:
            return subject
        with self._lock:
            if self._subject is None:
                logger.debug("Creating account with starting balance %s", self._starting_balance)
                self._subject = self._factory(self._starting_balance)
            return self._subject
