"""Account subject protocol."""

from typing import Protocol


class AccountSubject(Protocol):
    """Interface shared by accounts and every account stand-in."""

    def balance(self) -> int:
        """Return the current balance."""
        ...

    def deposit(self, amount: int) -> None:
        """Add amount to the balance."""
        ...

    def withdraw(self, amount: int) -> None:
        """Subtract amount from the balance."""
        ...
