from typing import Any, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from ..schemas.common import ApiResponse, ErrorResponse


def ok(request: Request, data: Any = None, message: str = "") -> ApiResponse[Any]:
    req_id = getattr(request.state, "request_id", None)
    return ApiResponse(success=True, message=message, request_id=req_id or "", data=data)


def fail(
    request: Request,
    error: str,
    message: str,
    details: Optional[dict] = None,
    status_code: int = 400,
) -> JSONResponse:
    req_id = getattr(request.state, "request_id", None)
    body = ErrorResponse(error=error, message=message, request_id=req_id or "", details=details or {})
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
