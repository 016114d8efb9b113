"""Alembic environment for zero2prod.

URL precedence: a connection handed over through `config.attributes` >
`sqlalchemy.url` in the config > `DBSettings().database_url`.
"""

from sqlalchemy import create_engine, pool

from alembic import context
from zero2prod.config import DBSettings
from zero2prod.db import models  # noqa: F401
from zero2prod.db.database import Base

config = context.config

target_metadata = Base.metadata


def get_url() -> str:
    """Resolve the database URL for standalone runs."""
    url = config.get_main_option("sqlalchemy.url")
    if not url or "%(" in url:
        url = DBSettings().database_url
    return url


def do_run_migrations(connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connection = config.attributes.get("connection")
    if connection is not None:
        do_run_migrations(connection)
        return

    connectable = create_engine(get_url(), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        do_run_migrations(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
