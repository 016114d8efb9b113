"""Central dependency injection hub for zero2prod using FastAPI's Depends mechanism."""

from functools import lru_cache
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from zero2prod.config import DBSettings

# ============================================================================
# Configuration Providers
# ============================================================================


@lru_cache()
def get_db_settings() -> DBSettings:
    """Get the database settings singleton."""
    return DBSettings()


# ============================================================================
# Database Session Provider
# ============================================================================


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Provide an AsyncSession bound to the application's connection pool.

    The pool is attached to `app.state` by `create_app`, either handed in by
    the caller or created in the lifespan from `DBSettings`.
    """
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session
