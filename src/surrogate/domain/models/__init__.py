"""Domain models package."""

from surrogate.domain.models.account import BankAccount
from surrogate.domain.models.writer import SimpleWriter
from surrogate.domain.models.math_service import MathService

__all__ = [
    "BankAccount",
    "SimpleWriter",
    "MathService",
]
