"""
FastAPI API routes.
"""

import time

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from common_log_format import __version__
from common_log_format.api.dependencies import get_batch_parser
from common_log_format.batch import BatchLimitExceeded, BatchResult, CommonLogParser
from common_log_format.errors import LogEntryParseError
from common_log_format.models.log_entry import LogEntry
from common_log_format.parser import parse


router = APIRouter()


# Request/Response Models
class ParseRequest(BaseModel):
    """Request model for parsing a single line."""
    line: str


class BatchRequest(BaseModel):
    """Request model for parsing a block of lines."""
    log_content: str


class BatchResponse(BaseModel):
    """Response model for batch parsing."""
    result: BatchResult
    parsed_count: int
    error_count: int
    processing_time_ms: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


def _error_detail(error: LogEntryParseError) -> dict:
    return {
        "kind": error.kind.value,
        "field": error.field,
        "message": str(error),
    }


# Routes
@router.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@router.post("/api/parse", response_model=LogEntry)
async def parse_line(request: ParseRequest):
    """Parse one CLF line into its structured form."""
    if not request.line.strip():
        raise HTTPException(status_code=400, detail="Log line is required")

    try:
        return parse(request.line)
    except LogEntryParseError as e:
        raise HTTPException(status_code=422, detail=_error_detail(e))


@router.post("/api/parse/batch", response_model=BatchResponse)
async def parse_batch(
    request: BatchRequest,
    parser: CommonLogParser = Depends(get_batch_parser),
):
    """
    Parse a block of CLF lines.

    Depending on configuration, bad lines are either reported in the
    result or fail the whole request with 422.
    """
    start_time = time.time()

    if not request.log_content.strip():
        raise HTTPException(status_code=400, detail="Log content is required")

    try:
        result = parser.parse_content(request.log_content)
    except BatchLimitExceeded as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LogEntryParseError as e:
        raise HTTPException(status_code=422, detail=_error_detail(e))

    duration_ms = int((time.time() - start_time) * 1000)

    return BatchResponse(
        result=result,
        parsed_count=result.parsed_count,
        error_count=result.error_count,
        processing_time_ms=duration_ms,
    )
