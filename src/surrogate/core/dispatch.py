"""Invoke-by-name support shared by subjects and wrappers."""

from typing import Any, Callable, Protocol

from surrogate.core.exceptions import UnsupportedOperation


class SupportsOperations(Protocol):
    """Anything that publishes a table of operations callable by name."""

    def operations(self) -> dict[str, Callable[..., Any]]:
        """Map operation name -> bound handler."""
        ...


class SupportsInvoke(Protocol):
    """Anything that forwards an arbitrary operation by name itself."""

    def invoke(self, operation: str, /, *args: Any, **kwargs: Any) -> Any:
        """Call `operation` with the given arguments."""
        ...


class Dispatchable:
    """
    Mixin that builds the operation table from `exposed_operations`.

    Subclasses list the names they want reachable by name; overriding a
    method in a subclass keeps it registered under the same name.
    """

    exposed_operations: tuple[str, ...] = ()

    def operations(self) -> dict[str, Callable[..., Any]]:
        return {name: getattr(self, name) for name in self.exposed_operations}


def _defines(subject: Any, name: str) -> bool:
    # Looked up on the class so a forwarding __getattr__ cannot fake it
    return callable(getattr(type(subject), name, None))


def invoke(subject: Any, operation: str, /, *args: Any, **kwargs: Any) -> Any:
    """
    Call `operation` on `subject` by name.

    Subjects that forward by name themselves (dynamic and remote proxies)
    receive the call through their own `invoke`; everything else is looked
    up in its operation table. Raises UnsupportedOperation if the subject
    offers neither or the table has no entry for the name. Errors from the
    handler propagate.
    """
    if _defines(subject, "invoke"):
        return subject.invoke(operation, *args, **kwargs)
    if not _defines(subject, "operations"):
        raise UnsupportedOperation(operation, type(subject).__name__)
    handler = subject.operations().get(operation)
    if handler is None:
        raise UnsupportedOperation(operation, type(subject).__name__)
    return handler(*args, **kwargs)
