"""Dependencias compartidas que FastAPI inyecta en los routers."""

from typing import Annotated

from fastapi import Depends, Request

from app.services.job_service import JobService


def get_job_service(request: Request) -> JobService:
    """Devuelve el registro de jobs creado por `create_app`."""
    return request.app.state.job_service


JobServiceDep = Annotated[JobService, Depends(get_job_service)]
