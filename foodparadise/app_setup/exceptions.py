"""
Gestionnaires d'exceptions.
- AppError (erreurs typées du domaine) -> code HTTP de l'erreur + {"message": ...}.
  Les messages restent génériques (ne révèlent pas si un email existe).
- HTTPException -> réponse JSON FastAPI standard {"detail": ...}.
"""
import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from foodparadise.errors import AppError

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s -> %s %s", request.method, request.url.path, exc.status_code, type(exc).__name__)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=getattr(exc, "headers", None))
