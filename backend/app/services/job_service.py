"""Servicio simple en memoria para gestionar Jobs.

Los jobs viven en una lista ordenada mientras el proceso está en marcha.
La búsqueda por id es lineal: basta para el volumen de un tracker personal,
pero para miles de registros convendría indexar por id en un diccionario.
"""

from __future__ import annotations

import logging
import re
from threading import Lock
from typing import Iterable, List, Optional

from app.core.errors import JobNotFoundError
from app.models.job import JobRecord, record_id

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_job_id(raw: str) -> Optional[int]:
    """Parse the leading integer of a path segment.

    Trailing characters are ignored ("12abc" -> 12). Segments without a
    leading integer return None, which never matches a stored job.
    """
    match = _INT_PREFIX.match(raw)
    if not match:
        return None
    return int(match.group(1))


class JobService:
    """
    Registro ordenado de jobs en memoria.
    Cada operación toma el lock completo, así que también es seguro
    usarlo desde hilos.
    """

    def __init__(
        self,
        jobs: Iterable[JobRecord] | None = None,
        assign_ids: bool = False,
    ) -> None:
        self._jobs: List[JobRecord] = [dict(job) for job in jobs or ()]
        self._assign_ids = assign_ids
        self._lock = Lock()

    def _index_of(self, job_id: Optional[int]) -> int:
        if job_id is None:
            return -1
        for index, job in enumerate(self._jobs):
            if record_id(job) == job_id:
                return index
        return -1

    def _next_id(self) -> int:
        for job in reversed(self._jobs):
            last_id = record_id(job)
            if last_id is not None:
                return last_id + 1
        return 1

    def next_id(self) -> int:
        """Id que recibiría el siguiente job: último id + 1, o 1 si no hay."""
        with self._lock:
            return self._next_id()

    def list_jobs(self) -> List[JobRecord]:
        """Devuelve todos los jobs en orden de inserción."""
        with self._lock:
            return list(self._jobs)

    def get_job(self, job_id: Optional[int]) -> JobRecord:
        with self._lock:
            index = self._index_of(job_id)
            if index == -1:
                raise JobNotFoundError(job_id)
            return self._jobs[index]

    def create_job(self, payload: JobRecord) -> JobRecord:
        """Añade el job al final tal cual llega (salvo el id opcional)."""
        job = dict(payload)
        with self._lock:
            if self._assign_ids and "id" not in job:
                job["id"] = self._next_id()
            self._jobs.append(job)
        logger.debug("Created job %s", job.get("id"))
        return job

    def update_job(self, job_id: Optional[int], updates: JobRecord) -> JobRecord:
        """Mezcla `updates` sobre el job existente; las claves del cliente ganan."""
        with self._lock:
            index = self._index_of(job_id)
            # Comprobar antes de mezclar: nunca escribimos un job inexistente
            if index == -1:
                raise JobNotFoundError(job_id)
            updated = {**self._jobs[index], **updates}
            self._jobs[index] = updated
        logger.debug("Updated job %s", job_id)
        return updated

    def delete_job(self, job_id: Optional[int]) -> None:
        with self._lock:
            index = self._index_of(job_id)
            if index == -1:
                raise JobNotFoundError(job_id)
            del self._jobs[index]
        logger.debug("Deleted job %s", job_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)
