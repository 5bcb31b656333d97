"""
Document ingestion API endpoint.

Routes:
- POST /admin/ingest - Ingest a stored document, streaming NDJSON progress

Each line of the response body is one progress event:
{"step": "...", "progress": 0-100, "message": "..."}. The stream closes after
a "complete" or "error" event.

Dependencies: repository_ai.core.document_processing
System role: Ingestion HTTP API
"""

import logging
from typing import AsyncIterator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, ConfigDict, Field

from repository_ai.api.deps import get_ingestion_pipeline
from repository_ai.core.document_processing.entrypoint import IngestionPipeline
from repository_ai.core.document_processing.models import ProgressEvent
from repository_ai.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["ingestion"])

NDJSON_MEDIA_TYPE = "application/x-ndjson"


class IngestRequest(BaseModel):
    """Ingestion request body."""

    model_config = ConfigDict(populate_by_name=True)

    document_id: int | None = Field(default=None, alias="documentId", description="Document to ingest")


async def _ndjson(events: AsyncIterator[ProgressEvent]) -> AsyncIterator[str]:
    async for event in events:
        yield event.to_ndjson()


@router.post("/ingest")
async def ingest_document(
    request: IngestRequest,
    pipeline: IngestionPipeline = Depends(get_ingestion_pipeline),
) -> StreamingResponse:
    """
    Ingest a document and stream progress.

    Args:
        request: Body carrying documentId
        pipeline: Injected ingestion pipeline

    Returns:
        StreamingResponse: NDJSON progress events

    Raises:
        HTTPException(400): documentId missing
    """
    try:
        events = pipeline.run(request.document_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    logger.info(
        f"{__name__}:ingest_document - Streaming ingestion",
        extra={"document_id": request.document_id},
    )
    return StreamingResponse(_ndjson(events), media_type=NDJSON_MEDIA_TYPE)
