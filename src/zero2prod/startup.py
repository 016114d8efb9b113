"""Listener allocation and server launch.

The HTTP server always runs on a socket bound by the caller: production binds
the configured address, tests bind port 0 and let the OS pick. Binding first
means the port is known (and reserved) before the server task exists.
"""

import asyncio
import logging
import socket
from dataclasses import dataclass
from typing import Optional

import uvicorn
from sqlalchemy.ext.asyncio import AsyncEngine

from zero2prod.config import Settings, load_settings
from zero2prod.db.database import make_engine
from zero2prod.main import create_app

logger = logging.getLogger(__name__)

LOOPBACK = "127.0.0.1"


def bind_listener(
    host: str = LOOPBACK, port: int = 0, backlog: int = 128
) -> socket.socket:
    """
    Bind a listening TCP socket.

    With `port=0` the OS assigns a free ephemeral port. The socket already
    listens when returned, so connections made before the server starts
    accepting wait in the backlog instead of being refused.

    Raises:
        OSError: If the address cannot be bound.
    """
    return socket.create_server((host, port), backlog=backlog)


def listener_port(listener: socket.socket) -> int:
    """Port a listener is actually bound to."""
    return listener.getsockname()[1]


@dataclass
class ServerHandle:
    """A uvicorn server running as a detached task on one listener."""

    server: uvicorn.Server
    task: asyncio.Task
    listener: socket.socket

    @property
    def port(self) -> int:
        return listener_port(self.listener)

    async def shutdown(self) -> None:
        """Ask the server to exit and wait for the task to finish.

        The task's own failure, if any, has already been logged and is not
        raised here.
        """
        self.server.should_exit = True
        await asyncio.wait([self.task])


def build_server(
    engine: AsyncEngine,
    *,
    log_level: str = "warning",
    log_config: Optional[dict] = None,
) -> uvicorn.Server:
    """
    Build a uvicorn server for the application bound to `engine`.

    The config is loaded eagerly so an invalid application or option raises
    here, before any task is scheduled.
    """
    config = uvicorn.Config(
        create_app(engine),
        log_level=log_level,
        log_config=log_config,
        lifespan="on",
    )
    config.load()
    return uvicorn.Server(config)


def _log_task_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Server task stopped with an error", exc_info=exc)


def spawn_server(server: uvicorn.Server, listener: socket.socket) -> ServerHandle:
    """
    Start serving on `listener` in a detached task and return immediately.

    Nobody awaits the task: a failure inside it is logged, never raised into
    the caller. Must be called from a running event loop.
    """
    task = asyncio.create_task(
        server.serve(sockets=[listener]), name=f"uvicorn:{listener_port(listener)}"
    )
    task.add_done_callback(_log_task_failure)
    return ServerHandle(server=server, task=task, listener=listener)


def run(
    listener: socket.socket, engine: AsyncEngine, *, log_level: str = "warning"
) -> ServerHandle:
    """Build the server for `engine` and spawn it on `listener`."""
    return spawn_server(build_server(engine, log_level=log_level), listener)


async def serve(settings: Settings) -> None:
    """Serve in the foreground until the process is asked to stop."""
    listener = bind_listener(settings.application.host, settings.application.port)
    engine = make_engine(settings.database)
    logger.info(
        "zero2prod listening on http://%s:%s",
        settings.application.host,
        listener_port(listener),
    )
    try:
        server = build_server(engine, log_level=settings.application.log_level)
        await server.serve(sockets=[listener])
    finally:
        await engine.dispose()
        listener.close()


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.application.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(serve(settings))
