"""Client stubs that call a subject served by RemoteServer."""

import functools
import logging
from typing import Any, Callable, Optional

import httpx

from surrogate.config.settings import get_settings
from surrogate.core.exceptions import (
    AppError,
    RemoteOperationError,
    TransportFailure,
    UnsupportedOperation,
)

logger = logging.getLogger(__name__)


class RemoteProxy:
    """
    Stand-in for a subject living behind a remote endpoint.

    Every call is one synchronous HTTP round trip over a pooled
    connection. Transport problems raise TransportFailure and are never
    retried here; errors raised by the remote subject come back as
    RemoteOperationError (or UnsupportedOperation for unknown names).
    """

    def __init__(
        self,
        uri: str,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        if timeout is None:
            timeout = get_settings().remote_timeout_seconds
        self._uri = uri.rstrip("/")
        self._client = http_client or httpx.Client(base_url=self._uri, timeout=timeout)

    @property
    def uri(self) -> str:
        return self._uri

    def call(self, operation: str, /, *args: Any, **kwargs: Any) -> Any:
        """Invoke `operation` remotely and return its result."""
        payload = {"args": list(args), "kwargs": kwargs}
        try:
            response = self._client.post(f"/calls/{operation}", json=payload)
        except httpx.TransportError as e:
            logger.warning("Transport failure calling %s at %s: %s", operation, self._uri, e)
            raise TransportFailure(operation, self._uri, str(e)) from e

        try:
            body = response.json()
        except ValueError as e:
            raise TransportFailure(operation, self._uri, "undecodable response") from e

        if response.is_success:
            if not isinstance(body, dict) or "result" not in body:
                raise TransportFailure(operation, self._uri, "malformed response")
            return body["result"]
        raise self._remote_error(operation, response, body)

    def invoke(self, operation: str, /, *args: Any, **kwargs: Any) -> Any:
        """Forward by name; lets dynamic proxies and servers wrap this stub."""
        return self.call(operation, *args, **kwargs)

    def disconnect(self) -> None:
        """Release pooled connections."""
        self._client.close()

    def _remote_error(self, operation: str, response: httpx.Response, body: Any) -> AppError:
        code = body.get("error") if isinstance(body, dict) else None
        if code == "UNSUPPORTED_OPERATION":
            return UnsupportedOperation(operation, self._uri)
        if code is None:
            return RemoteOperationError(operation, f"HTTP_{response.status_code}", response.text)
        return RemoteOperationError(operation, code, body.get("message", ""))

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        return functools.partial(self.call, name)

    def __enter__(self) -> "RemoteProxy":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.disconnect()
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._uri!r})"


class RemoteAccountProxy(RemoteProxy):
    """Account interface over a RemoteProxy."""

    def balance(self) -> int:
        return self.call("balance")

    def deposit(self, amount: int) -> None:
        return self.call("deposit", amount)

    def withdraw(self, amount: int) -> None:
        return self.call("withdraw", amount)
