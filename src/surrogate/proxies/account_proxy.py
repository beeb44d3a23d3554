"""Pass-through account proxy."""

from surrogate.core.dispatch import Dispatchable
from surrogate.core.exceptions import ValidationError
from surrogate.protocols import AccountSubject


class AccountProxy(Dispatchable):
    """
    Forwards every account operation to the wrapped subject unchanged.

    The subject may itself be a proxy, so proxies chain to any depth.
    Results and errors from the subject pass through untouched.
    """

    exposed_operations = ("balance", "deposit", "withdraw")

    def __init__(self, real_object: AccountSubject):
        if real_object is None:
            raise ValidationError("AccountProxy requires a subject")
        self._subject = real_object

    @property
    def subject(self) -> AccountSubject:
        return self._subject

    def balance(self) -> int:
        return self._subject.balance()

    def deposit(self, amount: int) -> None:
        return self._subject.deposit(amount)

    def withdraw(self, amount: int) -> None:
        return self._subject.withdraw(amount)
