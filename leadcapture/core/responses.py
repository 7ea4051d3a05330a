"""
Response envelope helpers.
Every endpoint answers with {success, message|error, timestamp, ...}.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def success_response(
    message: str,
    data: Any = None,
    status_code: int = 200,
    meta: Optional[dict] = None
) -> JSONResponse:
    """Build a success envelope."""
    content = {
        "success": True,
        "message": message,
        "timestamp": _timestamp(),
    }
    if data is not None:
        content["data"] = data
    if meta is not None:
        content["meta"] = meta

    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def error_response(
    error: str,
    status_code: int = 400,
    extra: Optional[dict] = None,
    headers: Optional[dict] = None
) -> JSONResponse:
    """Build an error envelope. Extra keys are merged at the top level."""
    content = {
        "success": False,
        "error": error,
        "timestamp": _timestamp(),
    }
    if extra:
        content.update(extra)

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(content),
        headers=headers
    )
