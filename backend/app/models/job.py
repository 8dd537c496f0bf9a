"""Definición del modelo de datos de un Job.

Un job es una solicitud de empleo que el cliente describe libremente
(título, empresa, estado...). No imponemos esquema: cada registro es un
diccionario con claves de texto, normalmente con un `id` numérico.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel

# Registro abierto tal y como lo envía el cliente
JobRecord = Dict[str, Any]


class MessageResponse(BaseModel):
    """Respuesta mínima con un mensaje legible para el cliente."""

    message: str


def record_id(record: JobRecord) -> Optional[int]:
    """Devuelve el id numérico del registro, o None si no tiene uno válido.

    `True`/`False` son `int` en Python pero nunca cuentan como id.
    """
    value = record.get("id")
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None
