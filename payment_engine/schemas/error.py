# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details body returned by every error response."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Problem Details (https://datatracker.ietf.org/doc/html/rfc7807)."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str = ""
    request_id: str = Field(
        default="",
        description="Echoes x-request-id, or a fresh UUID when the client sent none.",
    )
    instance: str = Field(default="", description="Request path that produced the error.")
