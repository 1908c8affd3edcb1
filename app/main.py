# app/main.py

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.middleware import (
    AuditTriggerMiddleware,
    CorrelationIdMiddleware,
    ErrorTranslationMiddleware,
    classified_exception_handler,
)
from app.api.routers import health, students, teachers, whoami
from app.config.logging import configure_logging
from app.config.settings import get_settings

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> AuditTrigger -> ErrorTranslation.
app.add_middleware(ErrorTranslationMiddleware)
app.add_middleware(AuditTriggerMiddleware)
app.add_middleware(CorrelationIdMiddleware)

# Framework-raised errors go through the same classifier as application failures.
app.add_exception_handler(RequestValidationError, classified_exception_handler)
app.add_exception_handler(StarletteHTTPException, classified_exception_handler)

# Routers: /health, /whoami, /students, /teachers
app.include_router(health.router)
app.include_router(whoami.router)
app.include_router(students.router, prefix="/students")
app.include_router(teachers.router, prefix="/teachers")
