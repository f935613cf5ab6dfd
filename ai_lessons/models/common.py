"""
Common response models.

Error schema shared by all routers.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Structured failure returned as the HTTPException detail."""

    kind: str = Field(description="Error kind (InvalidArgument, UpstreamServiceError, ...)")
    message: str = Field(description="Human-readable error message")
