"""
Dependency injection container.

Factory functions for FastAPI dependencies. Every collaborator is built once
from Settings and shared across requests.

Dependencies: repository_ai.configs, repository_ai.core, repository_ai.boundary
System role: DI container for service injection
"""

from repository_ai.configs import Settings, get_settings
from repository_ai.core.document_processing.configs import get_pipeline_settings
from repository_ai.core.document_processing.database import DocumentStore
from repository_ai.core.document_processing.entrypoint import IngestionPipeline
from repository_ai.core.rag_query import RagContextAssembler
from repository_ai.core.summarization import DocumentSummarizer


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._session_factory = None
        self._storage = None
        self._document_store = None
        self._vector_store = None
        self._embedding_client = None
        self._summarizer = None
        self._ingestion_pipeline = None
        self._rag_assembler = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def session_factory(self):
        """Get cached async session factory."""
        if self._session_factory is None:
            from repository_ai.boundary.db import get_async_session_factory
            self._session_factory = get_async_session_factory()
        return self._session_factory

    @property
    def storage(self):
        """Get cached blob storage."""
        if self._storage is None:
            from repository_ai.boundary.storage import S3BlobStorage
            self._storage = S3BlobStorage.from_settings(self.settings.storage)
        return self._storage

    @property
    def document_store(self) -> DocumentStore:
        """Get cached document store."""
        if self._document_store is None:
            self._document_store = DocumentStore(self.session_factory)
        return self._document_store

    @property
    def vector_store(self):
        """Get cached vector store."""
        if self._vector_store is None:
            from repository_ai.boundary.vdb import get_vector_store
            session_factory = (
                self.session_factory if self.settings.vector_store.store_type == "pgvector" else None
            )
            self._vector_store = get_vector_store(
                self.settings.vector_store,
                session_factory,
                dimension=self.settings.embedding.dimension,
            )
        return self._vector_store

    @property
    def embedding_client(self):
        """Get cached embedding client."""
        if self._embedding_client is None:
            from repository_ai.boundary.embeddings import create_embedding_client
            self._embedding_client = create_embedding_client(self.settings.embedding)
        return self._embedding_client

    @property
    def summarizer(self) -> DocumentSummarizer:
        """Get cached summarizer."""
        if self._summarizer is None:
            self._summarizer = DocumentSummarizer.from_settings(self.settings.summarization)
        return self._summarizer

    @property
    def ingestion_pipeline(self) -> IngestionPipeline:
        """Get cached ingestion pipeline."""
        if self._ingestion_pipeline is None:
            self._ingestion_pipeline = IngestionPipeline(
                storage=self.storage,
                document_store=self.document_store,
                vector_store=self.vector_store,
                embedding_client=self.embedding_client,
                summarizer=self.summarizer,
                settings=get_pipeline_settings(),
            )
        return self._ingestion_pipeline

    @property
    def rag_assembler(self) -> RagContextAssembler:
        """Get cached RAG assembler."""
        if self._rag_assembler is None:
            self._rag_assembler = RagContextAssembler.from_settings(
                self.settings.vector_store,
                embedding_client=self.embedding_client,
                vector_store=self.vector_store,
            )
        return self._rag_assembler

    async def aclose(self) -> None:
        """Release network clients and the database pool held by cached services."""
        if self._embedding_client is not None:
            await self._embedding_client.aclose()
        if self._session_factory is not None:
            from repository_ai.boundary.db import get_async_engine
            await get_async_engine().dispose()
            get_async_engine.cache_clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._session_factory = None
        self._storage = None
        self._document_store = None
        self._vector_store = None
        self._embedding_client = None
        self._summarizer = None
        self._ingestion_pipeline = None
        self._rag_assembler = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_ingestion_pipeline() -> IngestionPipeline:
    """Get ingestion pipeline from the service cache."""
    return get_service_cache().ingestion_pipeline


def get_rag_assembler() -> RagContextAssembler:
    """Get RAG assembler from the service cache."""
    return get_service_cache().rag_assembler


def get_document_store() -> DocumentStore:
    """Get document store from the service cache."""
    return get_service_cache().document_store


def get_vector_store():
    """Get vector store from the service cache."""
    return get_service_cache().vector_store


def get_summarizer() -> DocumentSummarizer:
    """Get summarizer from the service cache."""
    return get_service_cache().summarizer
