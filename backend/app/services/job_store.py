"""Construcción del almacén de Jobs a partir de la configuración.

No hay base de datos: el registro vive en memoria. Aquí sólo se decide con
qué jobs arranca (opcionalmente leídos de un JSON) y si asigna ids al crear.
La instancia resultante se guarda en `app.state` y llega a los routers por
inyección de dependencias.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from app.core.config import Settings
from app.core.errors import SeedFileError
from app.models.job import JobRecord
from app.services.job_service import JobService

logger = logging.getLogger(__name__)


def load_seed_jobs(path: Path) -> List[JobRecord]:
    """Lee la lista inicial de jobs desde un fichero JSON."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SeedFileError(f"Cannot read seed file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SeedFileError(f"Seed file {path} is not valid JSON: {e}") from e

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise SeedFileError(f"Seed file {path} must contain a list of objects")

    logger.info("Loaded %d seed jobs from %s", len(data), path)
    return data


def build_job_service(settings: Settings) -> JobService:
    jobs = load_seed_jobs(settings.seed_file) if settings.seed_file else []
    return JobService(jobs, assign_ids=settings.assign_ids_on_create)
