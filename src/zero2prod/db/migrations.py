"""Programmatic access to the Alembic migrations.

The scripts live in `alembic/` at the repository root. This module builds an
Alembic `Config` pointing at them and runs upgrades over a connection
borrowed from an async engine. Standalone runs go through `alembic.ini`.

The scripts are not shipped inside the wheel: `SCRIPT_LOCATION` is resolved
from the source tree, so migrations only run from a checkout or an editable
install (`pip install -e .`). With a regular install the path points outside
the installed package and Alembic fails to find the scripts.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from alembic import command
from alembic.config import Config

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection
    from sqlalchemy.ext.asyncio import AsyncEngine

ROOT = Path(__file__).resolve().parents[3]
SCRIPT_LOCATION = ROOT / "alembic"

ALEMBIC_URL_KEY = "sqlalchemy.url"
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"
ALEMBIC_CONNECTION_ATTRIBUTE = "connection"


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` for the project's migrations.

    Args:
        db_url: SQLAlchemy database URL. Leave as `None` when the caller hands
            Alembic a connection instead, or when no database is needed
            (e.g. inspecting the revision graph).
        stdout: Stream Alembic writes status lines to.

    Returns:
        An `alembic.config.Config` pointing at `alembic/`.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(ALEMBIC_SCRIPT_LOCATION_KEY, str(SCRIPT_LOCATION))
    return cfg


def _upgrade(connection: Connection, cfg: Config, revision: str) -> None:
    cfg.attributes[ALEMBIC_CONNECTION_ATTRIBUTE] = connection
    command.upgrade(cfg, revision)


async def run_migrations(engine: AsyncEngine, revision: str = "head") -> None:
    """Apply every pending migration up to `revision` through `engine`.

    Runs inside a single transaction; if any script fails the whole upgrade
    is rolled back and the error propagates.
    """
    cfg = build_alembic_config()
    async with engine.begin() as conn:
        await conn.run_sync(_upgrade, cfg, revision)
