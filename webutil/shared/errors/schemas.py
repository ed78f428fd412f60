"""Pydantic models for error responses.

Wire shape:

    {
      "error": {
        "code": 400,
        "message": "Missing parameter \"name\"",
        "details": ["optional", "string", "list"]
      }
    }

"details" is left out entirely when there are none.
"""

from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    """Inner error object."""

    code: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human-readable error description")
    details: list[str] | None = Field(default=None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Unified error response envelope."""

    error: ErrorBody

    def to_content(self) -> dict:
        """Serialize for the wire, dropping empty details."""
        return self.model_dump(exclude_none=True)
