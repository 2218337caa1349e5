"""
Pydantic models for the fuzzy-locate API.

Request fields mirror the harness form: numeric inputs arrive as text and
are parsed server-side so that malformed input yields a readable message.
"""

from typing import Optional

from pydantic import BaseModel, Field


class LocateRequest(BaseModel):
    """Request body for the locate endpoint."""

    sample: str = Field(..., description="Text to search")
    pattern: str = Field(..., description="Pattern to look for")
    location: str = Field("0", description="Expected location of the pattern")
    distance: Optional[str] = Field(
        None, description="Location tolerance; server default when omitted"
    )
    threshold: Optional[str] = Field(
        None, description="Score threshold (0.0 - 1.0); server default when omitted"
    )


class LocateResponse(BaseModel):
    """Response body for the locate endpoint."""

    index: Optional[int] = Field(None, description="Start of the match, null if none")
    score: Optional[float] = Field(None, description="Score of the match (0 is perfect)")
    label: str = Field(..., description="Index as text, or 'no match'")


class ErrorResponse(BaseModel):
    """Error response body."""

    error: dict = Field(..., description="Error details")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str
