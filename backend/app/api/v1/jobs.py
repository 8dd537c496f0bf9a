from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, status

from app.api.dependencies import JobServiceDep
from app.models.job import JobRecord, MessageResponse
from app.services.job_service import parse_job_id

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", summary="List every job")
@router.get("/", include_in_schema=False)
async def list_jobs(job_service: JobServiceDep) -> List[JobRecord]:
    return job_service.list_jobs()


@router.get("/{job_id}", summary="Get a specific job")
async def get_job(job_id: str, job_service: JobServiceDep) -> JobRecord:
    return job_service.get_job(parse_job_id(job_id))


@router.post("", summary="Create a new job", status_code=status.HTTP_201_CREATED)
@router.post("/", include_in_schema=False, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_service: JobServiceDep,
    payload: Optional[Dict[str, Any]] = Body(default=None),
) -> JobRecord:
    # Sin cuerpo se comporta como un objeto vacío
    return job_service.create_job(payload or {})


@router.patch("/{job_id}", summary="Update a specific job")
async def update_job(
    job_id: str,
    job_service: JobServiceDep,
    updates: Optional[Dict[str, Any]] = Body(default=None),
) -> JobRecord:
    return job_service.update_job(parse_job_id(job_id), updates or {})


@router.delete("/{job_id}", summary="Delete a specific job")
async def delete_job(job_id: str, job_service: JobServiceDep) -> MessageResponse:
    job_service.delete_job(parse_job_id(job_id))
    return MessageResponse(message="Job deleted successfully")
