"""
Ingestion progress events.

Events are pushed to the caller as newline-delimited JSON objects
{"step": ..., "progress": ..., "message": ...}. "complete" and "error"
are terminal.

Dependencies: pydantic
System role: Progress stream protocol between pipeline and caller
"""

import json
from enum import Enum

from pydantic import BaseModel, Field


class IngestStep(str, Enum):
    """Pipeline stages reported to the caller."""

    DOWNLOADING = "downloading"
    EXTRACTING = "extracting"
    EMBEDDING = "embedding"
    SUMMARIZING = "summarizing"
    COMPLETE = "complete"
    ERROR = "error"


TERMINAL_STEPS = frozenset({IngestStep.COMPLETE, IngestStep.ERROR})


class ProgressEvent(BaseModel):
    """
    Single progress update.

    Attributes:
        step: Current stage
        progress: Overall progress percentage (0-100)
        message: Human-readable status message
    """

    step: IngestStep
    progress: float = Field(ge=0, le=100)
    message: str

    @property
    def is_terminal(self) -> bool:
        return self.step in TERMINAL_STEPS

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {"step": self.step.value, "progress": self.progress, "message": self.message}

    def to_ndjson(self) -> str:
        """Serialize as one newline-terminated JSON line."""
        return json.dumps(self.to_dict()) + "\n"


def parse_progress_line(line: str) -> ProgressEvent | None:
    """
    Parse one line of an NDJSON progress stream.

    Args:
        line: Raw line (may include trailing newline)

    Returns:
        ProgressEvent | None: Parsed event, or None for blank lines
    """
    if not line.strip():
        return None
    return ProgressEvent.model_validate(json.loads(line))
