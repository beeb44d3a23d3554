"""Subject protocol definitions (interfaces)."""

from surrogate.protocols.account import AccountSubject
from surrogate.protocols.writer import WriterSubject
from surrogate.core.dispatch import SupportsInvoke, SupportsOperations

__all__ = [
    "AccountSubject",
    "WriterSubject",
    "SupportsOperations",
    "SupportsInvoke",
]
