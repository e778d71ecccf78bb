"""
Gestionnaires d'exceptions communs.
- AppError (taxonomie mockstore.errors) -> statut via STATUS_BY_KIND, corps {"error", "detail"}.
- RequestValidationError (JSON mal formé) -> même rendu que ValidationError (400).
- HTTPException (ex. 429 du rate limit) -> corps JSON FastAPI standard.
"""
import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mockstore.errors import AppError, UpstreamUnavailable, ValidationError, error_body, status_for

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if isinstance(exc, UpstreamUnavailable):
            logger.warning("%s %s: upstream unavailable", request.method, request.url.path)
        return JSONResponse(status_code=status_for(exc), content=error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{where}: {first.get('msg')}" if where else str(first.get("msg") or "Invalid request body")
        err = ValidationError(message)
        return JSONResponse(status_code=status_for(err), content=error_body(err))

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=getattr(exc, "headers", None))
