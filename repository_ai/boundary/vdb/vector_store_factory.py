"""
Vector store factory for selecting between in-memory (dev) and pgvector (prod).

Selected by VectorStoreSettings.store_type.

Dependencies: repository_ai.boundary.vdb, repository_ai.configs
System role: Vector store instantiation and selection
"""

import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from repository_ai.boundary.vdb.base import VectorStore
from repository_ai.boundary.vdb.memory_store import InMemoryVectorStore
from repository_ai.boundary.vdb.pgvector_store import PgVectorStore
from repository_ai.configs.vector_store import VectorStoreSettings

logger = logging.getLogger(__name__)


def get_vector_store(
    settings: VectorStoreSettings,
    session_factory: async_sessionmaker | None = None,
    dimension: int | None = None,
) -> VectorStore:
    """
    Factory function to get vector store based on configuration.

    Args:
        settings: Vector store settings
        session_factory: Required for the pgvector store
        dimension: Embedding width the pgvector store enforces

    Returns:
        VectorStore: Configured vector store instance

    Raises:
        ValueError: If the store type is invalid or pgvector lacks a session factory
    """
    store_type = settings.store_type.lower()

    if store_type == "memory":
        logger.info(f"{__name__}:get_vector_store - Creating in-memory vector store (local dev mode)")
        return InMemoryVectorStore()

    elif store_type == "pgvector":
        if session_factory is None:
            raise ValueError("pgvector store requires a database session factory")
        logger.info(f"{__name__}:get_vector_store - Creating pgvector store (production mode)")
        return PgVectorStore(
            session_factory,
            dimension=dimension,
            insert_batch_size=settings.insert_batch_size,
        )

    else:
        raise ValueError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'memory' (dev) or 'pgvector' (production)."
        )
