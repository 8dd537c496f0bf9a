"""Montaje de la aplicación FastAPI.

`create_app` crea el registro de jobs, configura CORS, el log de peticiones,
el manejador de errores y los routers. No crea ninguna app al importarse.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.api.v1.jobs import router as jobs_router
from app.core.config import Settings, get_settings
from app.core.errors import JobNotFoundError, job_not_found_handler
from app.core.logging_config import configure_logging
from app.services.job_service import JobService
from app.services.job_store import build_job_service

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    job_service: JobService | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
    )
    # Cada aplicación tiene su propio registro; los tests crean uno limpio
    if job_service is None:
        job_service = build_job_service(settings)
    app.state.job_service = job_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(o) for o in settings.allowed_origins],
        allow_credentials=settings.allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        """Emite una línea por petición completada: método, ruta y status."""
        response = await call_next(request)
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        logger.info("Request: %s %s %s", request.method, path, response.status_code)
        return response

    app.add_exception_handler(JobNotFoundError, job_not_found_handler)

    @app.get("/", response_class=PlainTextResponse)
    async def welcome() -> str:
        return settings.welcome_message

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(jobs_router, prefix=settings.api_prefix)
    return app
