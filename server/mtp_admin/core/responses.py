"""Helpers for the ``{"success": ..., "data": ..., "message": ...}`` envelope."""

from typing import Any, Optional
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(
    data: Any = None,
    *,
    message: Optional[str] = None,
    status_code: int = 200,
    **extra: Any,
) -> JSONResponse:
    """
    Build a successful envelope response.

    Pydantic models, datetimes and UUIDs inside ``data`` are encoded to
    JSON-compatible values. Keys with a None value are left out.
    """
    content = {"success": True}
    if data is not None:
        content["data"] = jsonable_encoder(data)
    if message is not None:
        content["message"] = message
    content.update(jsonable_encoder(extra))
    return JSONResponse(status_code=status_code, content=content)
