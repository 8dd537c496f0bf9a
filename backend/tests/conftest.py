import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.factory import create_app
from app.services.job_service import JobService


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def job_service():
    return JobService()


@pytest.fixture
def client(settings, job_service):
    app = create_app(settings, job_service=job_service)
    return TestClient(app)
