"""Punto de entrada de la API usando FastAPI.

La variable `app` de este módulo es la que sirve `uvicorn app.main:app`.
El montaje de la aplicación vive en `app.factory.create_app`.
"""

from app.factory import create_app

app = create_app()
