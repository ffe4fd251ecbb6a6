import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from schemas.common import ErrorDetail, ErrorResponse
from services.output_of_work import ScoreValidationError

logger = logging.getLogger(__name__)


def _error_body(code: str, message: str, request: Request) -> dict:
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message),
        latency_ms=0,
        trace_id=request.headers.get("X-Request-ID"),
    )
    return body.model_dump(mode="json")


def add_error_handlers(app: FastAPI):
    @app.exception_handler(ScoreValidationError)
    async def score_validation_handler(request: Request, exc: ScoreValidationError):
        logger.warning("rejected scores on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=422, content=_error_body("VALIDATION_ERROR", str(exc), request))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content=_error_body("INTERNAL_ERROR", str(exc), request))
