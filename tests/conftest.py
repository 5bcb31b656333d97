"""
Shared test fixtures and configuration for entire test suite.

Provides: PDF byte builder, in-memory SQLite session factory, fake embedding
provider, sample pages and chunks
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import hashlib

import pytest
import pytest_asyncio

from repository_ai.boundary.embeddings.base import EmbeddingProvider
from repository_ai.core.document_processing.models import EmbeddedChunk, PageRecord


def _escape_pdf_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(page_texts: list[str]) -> bytes:
    """
    Build a minimal single-font PDF with one text line per page.

    An empty string produces a page with no text operators.
    """
    page_count = len(page_texts)
    kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(page_count))
    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, text in enumerate(page_texts):
        content_id = 5 + 2 * i
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {content_id} 0 R >>"
            ).encode()
        )
        stream = (
            f"BT /F1 12 Tf 72 720 Td ({_escape_pdf_text(text)}) Tj ET".encode("latin-1")
            if text
            else b""
        )
        objects.append(
            f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream"
        )

    output = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(output))
        output += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(output)
    output += f"xref\n0 {len(objects) + 1}\n".encode()
    output += b"0000000000 65535 f \n"
    for offset in offsets:
        output += f"{offset:010d} 00000 n \n".encode()
    output += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(output)


class FakeEmbeddingProvider(EmbeddingProvider):
    """
    Deterministic provider for tests.

    Returns vectors from `vectors` when the text is a key, otherwise a
    hash-derived unit-ish vector of `dimension` floats. Records every call.
    """

    name = "fake"

    def __init__(
        self,
        dimension: int = 8,
        vectors: dict[str, list[float]] | None = None,
        concurrency: int = 1,
    ) -> None:
        self.dimension = dimension
        self.vectors = vectors or {}
        self.concurrency = concurrency
        self.calls: list[str] = []
        self.closed = False

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if text in self.vectors:
            return self.vectors[text]
        digest = hashlib.sha256(text.encode()).digest()
        return [(digest[i % len(digest)] + 1) / 256 for i in range(self.dimension)]

    async def aclose(self) -> None:
        self.closed = True


def filler_text(word: str, length: int) -> str:
    """Exactly `length` characters of repeated `word`, never ending in a space."""
    text = ((word + " ") * (length // (len(word) + 1) + 1))[:length]
    if text.endswith(" "):
        text = text[:-1] + word[0]
    return text


@pytest.fixture
def pdf_factory():
    """Provide the minimal PDF builder."""
    return build_pdf


@pytest.fixture
def fake_provider() -> FakeEmbeddingProvider:
    """Provide a sequential fake embedding provider."""
    return FakeEmbeddingProvider()


@pytest.fixture
def sample_pages() -> list[PageRecord]:
    """Three pages of 1000, 1500 and 800 characters of space-separated words."""
    return [
        PageRecord(page_number=1, text=filler_text("alpha", 1000)),
        PageRecord(page_number=2, text=filler_text("beta", 1500)),
        PageRecord(page_number=3, text=filler_text("gamma", 800)),
    ]


def make_embedded_chunk(
    content: str,
    embedding: list[float] | None,
    page_start: int = 1,
    page_end: int = 1,
    char_start: int = 0,
) -> EmbeddedChunk:
    return EmbeddedChunk(
        content=content,
        phrase=" ".join(content.split()[:20]),
        page_start=page_start,
        page_end=page_end,
        char_start=char_start,
        char_end=char_start + len(content),
        embedding=embedding,
    )


@pytest.fixture
def embedded_chunk_factory():
    """Provide the EmbeddedChunk builder."""
    return make_embedded_chunk


@pytest_asyncio.fixture
async def session_factory():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        async_sessionmaker: Session factory bound to a fresh schema
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from repository_ai.boundary.db.base import Base
    from repository_ai.boundary.db.models import DocumentChunkModel, DocumentModel  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    yield factory

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def provider_factory():
    """Provide the FakeEmbeddingProvider class for custom configurations."""
    return FakeEmbeddingProvider
