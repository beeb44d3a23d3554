"""Proxy that forwards any operation by name."""

import functools
from typing import Any, Callable

from surrogate.core.dispatch import invoke
from surrogate.core.exceptions import ValidationError


class DynamicProxy:
    """
    Forwards operations by name without declaring them.

    `proxy.invoke("deposit", 10)` and `proxy.deposit(10)` are equivalent.
    Whatever the subject can be invoked with is reachable, including
    operations added after this proxy was written; anything else raises
    UnsupportedOperation when called. The subject may be another dynamic
    proxy or a remote stub.
    """

    def __init__(self, subject: Any):
        if subject is None:
            raise ValidationError("DynamicProxy requires a subject")
        self._subject = subject

    @property
    def subject(self) -> Any:
        return self._subject

    def invoke(self, operation: str, /, *args: Any, **kwargs: Any) -> Any:
        return invoke(self._subject, operation, *args, **kwargs)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        return functools.partial(self.invoke, name)

    def __repr__(self) -> str:
        return f"DynamicProxy({self._subject!r})"
