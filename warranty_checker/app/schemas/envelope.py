"""
JSON envelope returned by ajax actions.

Every ajax response has the shape ``{"success": bool, "data": ...}``.
Failures always carry ``{"message": str}`` in ``data``.
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorData(BaseModel):
    message: str


class SuccessEnvelope(BaseModel):
    success: bool = True
    data: Any = None


class ErrorEnvelope(BaseModel):
    success: bool = False
    data: ErrorData


def send_json_success(data: Any = None, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Wrap ``data`` in a success envelope."""
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True)
    return JSONResponse(
        status_code=status_code,
        content=SuccessEnvelope(data=data).model_dump(),
    )


def send_json_error(message: str, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Wrap ``message`` in a failure envelope.

    Business outcomes (invalid input, nothing found) keep status 200 so the
    browser script can read the message; protocol failures pass 4xx codes.
    """
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(data=ErrorData(message=message)).model_dump(),
    )
