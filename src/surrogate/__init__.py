"""Composable local and remote stand-ins for objects."""

from surrogate.domain.models import BankAccount, SimpleWriter, MathService
from surrogate.proxies import (
    AccountProxy,
    AccountProtectionProxy,
    VirtualAccountProxy,
    DynamicProxy,
)
from surrogate.decorators import (
    WriterDecorator,
    NumberingWriter,
    CheckSummingWriter,
    TimeStampingWriter,
)
from surrogate.remote import RemoteServer, RemoteProxy, RemoteAccountProxy

__all__ = [
    "BankAccount",
    "SimpleWriter",
    "MathService",
    "AccountProxy",
    "AccountProtectionProxy",
    "VirtualAccountProxy",
    "DynamicProxy",
    "WriterDecorator",
    "NumberingWriter",
    "CheckSummingWriter",
    "TimeStampingWriter",
    "RemoteServer",
    "RemoteProxy",
    "RemoteAccountProxy",
]
