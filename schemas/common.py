"""
schemas/common.py

Shared error envelope, pydantic v2.
- every error leaves the API as {"success": false, "error": {"code", "message"}}
- routers build the matching success body {"success": true, "data", "message"} inline
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ConfigDict


class ErrorDetail(BaseModel):
    code: int = Field(..., description="HTTP status code, e.g. 404, 422, 502")
    message: str = Field(..., description="human readable error message")


class ErrorResponse(BaseModel):
    """Body written by the global error handlers in middlewares/error_handler.py"""
    success: bool = False
    error: ErrorDetail

    model_config = ConfigDict(extra="ignore")


def error_body(code: int, message: str) -> dict:
    return ErrorResponse(error=ErrorDetail(code=code, message=message)).model_dump()
