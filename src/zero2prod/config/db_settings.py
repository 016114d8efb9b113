"""Database-specific settings for the zero2prod project."""

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

DRIVER_NAME = "postgresql+psycopg"
MAINTENANCE_DATABASE = "postgres"


class DBSettings(BaseSettings):
    """Database configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    db_user: str = Field(
        default="postgres",
        title="Database User",
        description="Username for the database connection.",
        alias="POSTGRES_USER",
    )
    db_password: str = Field(
        default="password",
        title="Database Password",
        description="Password for the database connection.",
        alias="POSTGRES_PASSWORD",
    )
    db_host: str = Field(
        default="localhost",
        title="Database Host",
        description="Hostname for the database server.",
        alias="POSTGRES_HOST",
    )
    db_port: int = Field(
        default=5432,
        title="Database Port",
        description="Port number for the database server.",
        alias="POSTGRES_PORT",
    )
    db_name: str = Field(
        default="newsletter",
        title="Database Name",
        description="Name of the database to connect to.",
        alias="POSTGRES_DB",
    )

    def _url(self, database: str) -> URL:
        return URL.create(
            DRIVER_NAME,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=database,
        )

    @computed_field
    @property
    def database_url(self) -> str:
        """Assemble the URL of the configured database."""
        return self._url(self.db_name).render_as_string(hide_password=False)

    @computed_field
    @property
    def admin_url(self) -> str:
        """URL addressing the server rather than the configured database.

        Postgres always needs a database to connect to, so server-level
        statements (CREATE/DROP DATABASE) go through the maintenance database.
        """
        return self._url(MAINTENANCE_DATABASE).render_as_string(hide_password=False)

    def with_database_name(self, name: str) -> "DBSettings":
        """Return a copy of these settings pointing at another database."""
        return self.model_copy(update={"db_name": name})
