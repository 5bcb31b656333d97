"""
Database configuration settings.

Documents and their chunk embeddings (pgvector column) share one Postgres
database. Either set POSTGRES_URL to a full connection string, as hosted
providers hand out, or set the individual POSTGRES_* parts.

Dependencies: pydantic, pydantic_settings, sqlalchemy
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict
from sqlalchemy.engine import URL, make_url

from repository_ai.configs.base import BaseSettings

SYNC_DRIVER = "postgresql+psycopg2"
ASYNC_DRIVER = "postgresql+asyncpg"


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection and pool settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(default=None, description="Full connection string; overrides the parts below")
    host: str = Field(default="localhost")
    port: int = Field(default=5432)
    user: str = Field(default="postgres")
    password: str = Field(default="postgres")
    db: str = Field(default="research_repository", description="Database name")
    sslmode: str = Field(default="prefer", description="libpq sslmode")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Connections allowed beyond pool_size")
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    def _base_url(self) -> URL:
        if self.url:
            return make_url(self.url)
        return URL.create(
            "postgresql",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.db,
        )

    @property
    def database_url(self) -> URL:
        """psycopg2 URL used by create_tables."""
        base = self._base_url()
        query = dict(base.query)
        query.setdefault("sslmode", self.sslmode)
        return base.set(drivername=SYNC_DRIVER, query=query)

    @property
    def async_database_url(self) -> URL:
        """
        asyncpg URL used by the application.

        asyncpg does not accept sslmode; "require" is translated to ssl=require
        and other modes are dropped.
        """
        base = self._base_url()
        query = {k: v for k, v in base.query.items() if k != "sslmode"}
        sslmode = base.query.get("sslmode", self.sslmode)
        if sslmode == "require":
            query["ssl"] = "require"
        return base.set(drivername=ASYNC_DRIVER, query=query)
