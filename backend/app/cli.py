"""CLI para arrancar la API con uvicorn."""

import argparse
import logging
from pathlib import Path

import uvicorn

from app.core.config import get_settings
from app.factory import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Job Application Tracker API")
    parser.add_argument("--host", help="Host en el que escuchar")
    parser.add_argument("--port", type=int, help="Puerto en el que escuchar")
    parser.add_argument("--seed-file", type=Path, help="JSON con los jobs iniciales")
    parser.add_argument("--log-level", help="Nivel de logging (DEBUG, INFO, ...)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    overrides = {
        key: value
        for key, value in vars(args).items()
        if value is not None
    }
    settings = get_settings().model_copy(update=overrides)

    app = create_app(settings)
    logger.info("Server is running at http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
