"""Errores de dominio y su traducción a respuestas HTTP."""

from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse

JOB_NOT_FOUND_MESSAGE = "Job not found"


class JobNotFoundError(Exception):
    """Raised when a path identifier does not match any stored job."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, job_id: int | None) -> None:
        super().__init__(f"{JOB_NOT_FOUND_MESSAGE}: {job_id}")
        self.job_id = job_id
        self.message = JOB_NOT_FOUND_MESSAGE

    def to_dict(self) -> dict:
        return {"message": self.message}


class SeedFileError(Exception):
    """El fichero de jobs iniciales no existe o no tiene el formato esperado."""


async def job_not_found_handler(request: Request, exc: JobNotFoundError) -> JSONResponse:
    """Convierte `JobNotFoundError` en un 404 con `{"message": ...}`."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
