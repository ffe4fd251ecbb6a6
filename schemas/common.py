"""
schemas/common.py

- Shared schemas used across the project (Pydantic v2)
- Standard error response: ErrorDetail, ErrorResponse
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


# =========================================================
# Standard error response
# =========================================================

class ErrorDetail(BaseModel):
    """Smallest unit carrying an error code/message"""
    code: str = Field(..., description="Error code (e.g. INTERNAL_ERROR, VALIDATION_ERROR)")
    message: str = Field(..., description="Human readable error message")


class ErrorResponse(BaseModel):
    """
    Standard error body returned by the global error handler
    - middlewares/error_handler.py renders this schema
    """
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Time the response was generated (UTC)"
    )
    latency_ms: Optional[int] = Field(
        default=None, ge=0, description="Request processing time (ms), filled from the timing middleware"
    )
    trace_id: Optional[str] = Field(
        default=None, description="Request tracing id (copied from X-Request-ID when present)"
    )

    model_config = ConfigDict(extra="ignore")
