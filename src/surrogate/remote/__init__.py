"""Remote adapter: HTTP server and client stubs."""

from surrogate.remote.server import RemoteServer
from surrogate.remote.client import RemoteProxy, RemoteAccountProxy

__all__ = [
    "RemoteServer",
    "RemoteProxy",
    "RemoteAccountProxy",
]
