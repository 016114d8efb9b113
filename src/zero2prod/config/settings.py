"""Aggregated settings for one running instance."""

from pydantic import BaseModel

from .db_settings import DBSettings
from .zero2prod_settings import Zero2ProdSettings


class Settings(BaseModel):
    """Application and database settings read together."""

    application: Zero2ProdSettings
    database: DBSettings


def load_settings() -> Settings:
    """Read a fresh Settings value from the environment and `.env`.

    Every call builds new objects, so callers may change their copy (for
    instance the database name) without affecting anyone else.
    """
    return Settings(application=Zero2ProdSettings(), database=DBSettings())
