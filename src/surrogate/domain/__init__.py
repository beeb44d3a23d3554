"""Domain layer - the real objects that wrappers stand in for."""

from surrogate.domain.models import BankAccount, SimpleWriter, MathService

__all__ = [
    "BankAccount",
    "SimpleWriter",
    "MathService",
]
