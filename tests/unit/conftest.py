"""Unit test specific fixtures.

Nothing here needs a database server. `offline_app` runs the real service on
a real listener, but its pool points at a port nobody listens on, so any
request that reaches the database fails.
"""

import socket
from collections.abc import AsyncIterator

import pytest

from tests.envs import setup_unit_test_env
from zero2prod.config import DBSettings
from zero2prod.db.database import make_engine
from zero2prod.startup import LOOPBACK, bind_listener, listener_port, run


def _pick_free_port() -> int:
    """A localhost TCP port that was free a moment ago (bound then released)."""
    s = socket.socket()
    s.bind((LOOPBACK, 0))
    port = s.getsockname()[1]
    s.close()
    return port


@pytest.fixture(autouse=True)
def set_unit_test_env(monkeypatch):
    """Setup environment variables for unit tests."""
    setup_unit_test_env(monkeypatch)


@pytest.fixture
def unreachable_db_settings() -> DBSettings:
    return DBSettings(db_host=LOOPBACK, db_port=_pick_free_port(), db_name="nowhere")


@pytest.fixture
async def offline_app(unreachable_db_settings: DBSettings) -> AsyncIterator[str]:
    """Base URL of a running service whose database cannot be reached."""
    listener = bind_listener()
    engine = make_engine(unreachable_db_settings)
    handle = run(listener, engine)
    try:
        yield f"http://{LOOPBACK}:{listener_port(listener)}"
    finally:
        await handle.shutdown()
        await engine.dispose()
