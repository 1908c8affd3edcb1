"""API middleware: correlation ID, failure translation, access audit."""

import json
import logging
import uuid
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.api.error_classifier import Classification, ErrorClassifier
from app.core.context import correlation_id_ctx

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _caller_email(request: Request) -> Optional[str]:
    """Caller resolved by the get_caller dependency, if the request got that far."""
    caller = getattr(request.state, "caller", None)
    return caller.email if caller is not None else None


def error_response(classification: Classification) -> JSONResponse:
    return JSONResponse(
        status_code=classification.status_code,
        content=classification.body.model_dump(mode="json"),
    )


async def classified_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Exception handler for framework-raised errors (validation, routing)."""
    return error_response(ErrorClassifier.handle(exc, caller=_caller_email(request)))


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Generate or preserve correlation ID; attach to request.state, response header, and logging context."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        correlation_id_ctx.set(correlation_id)

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class ErrorTranslationMiddleware(BaseHTTPMiddleware):
    """Catch every failure escaping the app and answer with its classified status and ErrorResource."""

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return error_response(ErrorClassifier.handle(exc, caller=_caller_email(request)))


class AuditTriggerMiddleware(BaseHTTPMiddleware):
    """After response: log structured audit event (correlation_id, caller, path, method, status_code)."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        caller = _caller_email(request)
        audit_event = {
            "event": "request_audit",
            "correlation_id": getattr(request.state, "correlation_id", None),
            "caller": caller,
            "path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
        }
        logger.info(json.dumps(audit_event), extra={"caller": caller})
        return response
