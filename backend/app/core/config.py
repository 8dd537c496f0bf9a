"""Carga de configuración de la aplicación.

Usa `pydantic-settings` para leer valores desde `.env` o variables de
entorno. Cada campo lleva un comentario corto con lo que controla.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Contenedor tipado para todas las opciones configurables."""

    app_name: str = "Job Application Tracker API"
    environment: str = "development"

    # Dónde escucha el servidor cuando se arranca con `job-tracker`
    host: str = "127.0.0.1"
    port: int = 4000

    # Texto devuelto por `GET /`
    welcome_message: str = "welcome to the Job App tracker API!!"
    # Prefijo bajo el que se monta el router de jobs ("" = en la raíz)
    api_prefix: str = ""

    # JSON opcional con la lista inicial de jobs
    seed_file: Path | None = None
    # Si está activo, `POST /jobs` asigna un id cuando el cuerpo no trae uno
    assign_ids_on_create: bool = False

    log_level: str = "INFO"

    # CORS
    # Acepta JSON o una cadena separada por comas (`ALLOWED_ORIGINS=http://a,http://b`)
    allowed_origins: Annotated[list[str], NoDecode] = ["*"]
    allow_credentials: bool = False

    # Le indicamos a Pydantic que lea automáticamente las variables de entorno
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        """Normaliza la lista de orígenes cuando llega como texto."""
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                return json.loads(value)
            return [s.strip() for s in value.split(",") if s.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Crea (y memoriza) la configuración de forma perezosa.

    Usamos `lru_cache` para que sólo se construya una instancia por proceso,
    evitando relecturas repetidas de `.env`.
    """
    return Settings()
