"""Explicitly started HTTP server exposing a subject."""

import logging
import threading
import time
from typing import Any, Optional

import uvicorn

from surrogate.config.settings import Settings, get_settings
from surrogate.core.exceptions import TransportFailure, ValidationError
from surrogate.main import create_app

logger = logging.getLogger(__name__)


class _ThreadedServer(uvicorn.Server):
    def install_signal_handlers(self) -> None:
        # Signals can only be handled on the main thread
        pass

    def run(self, sockets=None) -> None:
        # uvicorn exits the process on startup failure; end only this thread
        try:
            super().run(sockets=sockets)
        except SystemExit as e:
            logger.error("Remote server exited during startup (exit code %s)", e.code)


class RemoteServer:
    """
    Binds a subject to an HTTP endpoint served from a background thread.

    Nothing listens until start() is called. Port 0 picks a free port; the
    URI returned by start() carries the port actually bound.
    """

    def __init__(self, subject: Any, settings: Optional[Settings] = None):
        self._subject = subject
        self._settings = settings or get_settings()
        self._server: Optional[_ThreadedServer] = None
        self._thread: Optional[threading.Thread] = None
        self._uri: Optional[str] = None

    @property
    def uri(self) -> Optional[str]:
        return self._uri

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, host: Optional[str] = None, port: Optional[int] = None) -> str:
        """Start serving and block until the server accepts connections."""
        if self._thread is not None:
            raise ValidationError(f"Remote server already running at {self._uri}")

        host = host or self._settings.remote_host
        port = self._settings.remote_port if port is None else port
        config = uvicorn.Config(
            create_app(self._subject, self._settings),
            host=host,
            port=port,
            log_level=self._settings.log_level.lower(),
        )
        server = _ThreadedServer(config)
        thread = threading.Thread(
            target=server.run, name=f"remote-server-{host}:{port}", daemon=True
        )
        thread.start()

        deadline = time.monotonic() + self._settings.startup_timeout_seconds
        while not server.started:
            if not thread.is_alive() or time.monotonic() > deadline:
                server.should_exit = True
                thread.join(timeout=self._settings.startup_timeout_seconds)
                raise TransportFailure("start", f"http://{host}:{port}", "server did not start")
            time.sleep(0.01)

        bound_port = server.servers[0].sockets[0].getsockname()[1]
        self._server = server
        self._thread = thread
        self._uri = f"http://{host}:{bound_port}"
        logger.info("Serving %s at %s", type(self._subject).__name__, self._uri)
        return self._uri

    def stop(self) -> None:
        """Stop serving; a no-op if the server is not running."""
        if self._thread is None:
            return
        self._server.should_exit = True
        self._thread.join(timeout=self._settings.startup_timeout_seconds)
        logger.info("Stopped serving at %s", self._uri)
        self._server = None
        self._thread = None
        self._uri = None

    def __enter__(self) -> "RemoteServer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.stop()
        return False
