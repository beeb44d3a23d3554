"""Bank account domain model."""

from surrogate.core.dispatch import Dispatchable


class BankAccount(Dispatchable):
    """
    In-memory account ledger.

    The balance only changes through deposit and withdraw. Funds are not
    checked, so a withdrawal may leave the balance negative.
    """

    exposed_operations = ("balance", "deposit", "withdraw")

    def __init__(self, starting_balance: int):
        self._balance = starting_balance

    def balance(self) -> int:
        return self._balance

    def deposit(self, amount: int) -> None:
        self._balance += amount

    def withdraw(self, amount: int) -> None:
        self._balance -= amount

    def __repr__(self) -> str:
        return f"BankAccount(balance={self._balance})"
