"""Unit tests for listener allocation and the detached server task."""

import asyncio
import logging
import socket

import httpx
import pytest

from zero2prod.config import DBSettings
from zero2prod.db.database import make_engine
from zero2prod.startup import (
    LOOPBACK,
    bind_listener,
    build_server,
    listener_port,
    spawn_server,
)


class TestBindListener:
    def test_os_assigns_a_real_port(self):
        listener = bind_listener()
        try:
            assert listener_port(listener) != 0
            assert listener.getsockname()[0] == LOOPBACK
        finally:
            listener.close()

    def test_listeners_held_together_get_distinct_ports(self):
        listeners = [bind_listener() for _ in range(10)]
        try:
            ports = {listener_port(listener) for listener in listeners}
            assert len(ports) == len(listeners)
            assert 0 not in ports
        finally:
            for listener in listeners:
                listener.close()

    def test_accepts_connections_before_a_server_runs(self):
        listener = bind_listener()
        try:
            # queued in the backlog, not refused
            with socket.create_connection((LOOPBACK, listener_port(listener)), 1):
                pass
        finally:
            listener.close()

    def test_taken_port_raises(self):
        listener = bind_listener()
        try:
            with pytest.raises(OSError):
                bind_listener(port=listener_port(listener))
        finally:
            listener.close()


class _FailingServer:
    """Stands in for uvicorn.Server; dies as soon as it starts serving."""

    should_exit = False

    async def serve(self, sockets=None):
        raise RuntimeError("boom")


async def test_spawn_server_returns_before_the_server_finishes(unreachable_db_settings):
    listener = bind_listener()
    engine = make_engine(unreachable_db_settings)

    handle = spawn_server(build_server(engine), listener)
    try:
        assert not handle.task.done()
        assert handle.port == listener_port(listener)

        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"http://{LOOPBACK}:{handle.port}/health_check"
            )
        assert response.status_code == 200
    finally:
        await handle.shutdown()
        await engine.dispose()

    assert handle.task.done()


async def test_task_failure_is_logged_not_raised(caplog):
    listener = bind_listener()
    caplog.set_level(logging.ERROR, logger="zero2prod.startup")

    handle = spawn_server(_FailingServer(), listener)
    await asyncio.wait([handle.task])
    await handle.shutdown()
    listener.close()

    assert "Server task stopped with an error" in caplog.text
    assert isinstance(handle.task.exception(), RuntimeError)


def test_build_server_rejects_bad_config_synchronously():
    engine = make_engine(DBSettings())
    with pytest.raises(KeyError):
        build_server(engine, log_level="chatty")
