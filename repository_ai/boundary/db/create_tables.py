"""
Database table creation script.

Enables the pgvector extension and creates all tables defined in ORM models.

Dependencies: sqlalchemy, repository_ai.configs
System role: Database schema initialization

Usage:
    python -m repository_ai.boundary.db.create_tables
"""

import logging

from sqlalchemy import text

from repository_ai.boundary.db.base import Base
from repository_ai.boundary.db.connection import get_engine

# Import all models to register them with Base.metadata
from repository_ai.boundary.db.models import DocumentChunkModel, DocumentModel  # noqa: F401

logger = logging.getLogger(__name__)


def create_all_tables() -> None:
    """
    Create the vector extension and all database tables.

    Idempotent: existing extension and tables are left unchanged.

    Raises:
        SQLAlchemyError: If the connection fails or the role may not create extensions
    """
    engine = get_engine()

    with engine.begin() as conn:
        conn.execute(text("CREATE EXTENSION IF NOT EXISTS vector"))
    Base.metadata.create_all(bind=engine)
    logger.info("All tables created successfully.")


def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    logger.info("All tables dropped successfully.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_all_tables()
