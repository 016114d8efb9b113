from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from zero2prod.config import DBSettings


def make_engine(settings: DBSettings, **kwargs) -> AsyncEngine:
    """
    Create the connection pool for the configured database.

    Connections are opened lazily, so building an engine never touches the
    server; the first checkout does.
    """
    return create_async_engine(settings.database_url, pool_pre_ping=True, **kwargs)


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to an engine, used by the request dependency."""
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


# --- Declarative Base for Models ---

Base = declarative_base()
