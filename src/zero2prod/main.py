import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from zero2prod import __version__, dependencies
from zero2prod.api.router import router
from zero2prod.db.database import make_engine, make_session_factory

logger = logging.getLogger(__name__)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    """Reject malformed input with a plain 400 instead of FastAPI's 422."""
    fields = sorted({str(error["loc"][-1]) for error in exc.errors() if error["loc"]})
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, fields)
    return PlainTextResponse(
        f"Invalid request, check fields: {', '.join(fields)}", status_code=400
    )


def create_app(engine: Optional[AsyncEngine] = None) -> FastAPI:
    """
    Build the FastAPI application.

    When `engine` is given the caller owns it and the app never disposes it.
    Otherwise the lifespan creates one from `DBSettings` and disposes it on
    shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned_engine = None
        if getattr(app.state, "engine", None) is None:
            owned_engine = make_engine(dependencies.get_db_settings())
            _attach_engine(app, owned_engine)
        yield
        if owned_engine is not None:
            await owned_engine.dispose()

    app = FastAPI(
        title="zero2prod",
        version=__version__,
        description="Newsletter service: health check and subscriptions.",
        lifespan=lifespan,
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(router)

    if engine is not None:
        _attach_engine(app, engine)

    return app


def _attach_engine(app: FastAPI, engine: AsyncEngine) -> None:
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)


app = create_app()
