import json

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.errors import SeedFileError
from app.factory import create_app
from app.services.job_store import build_job_service, load_seed_jobs


def test_load_seed_jobs(tmp_path):
    seed_file = tmp_path / "jobs.json"
    seed_file.write_text(
        json.dumps([{"id": 1, "company": "Acme"}, {"id": 2, "company": "Globex"}]),
        encoding="utf-8",
    )

    assert load_seed_jobs(seed_file) == [
        {"id": 1, "company": "Acme"},
        {"id": 2, "company": "Globex"},
    ]


@pytest.mark.parametrize("content", ["{not json", '{"id": 1}', "[1, 2]"])
def test_invalid_seed_file(tmp_path, content):
    seed_file = tmp_path / "jobs.json"
    seed_file.write_text(content, encoding="utf-8")

    with pytest.raises(SeedFileError):
        load_seed_jobs(seed_file)


def test_missing_seed_file(tmp_path):
    with pytest.raises(SeedFileError):
        load_seed_jobs(tmp_path / "missing.json")


def test_build_job_service_without_seed(settings):
    assert build_job_service(settings).list_jobs() == []


def test_app_serves_seeded_jobs(tmp_path):
    seed_file = tmp_path / "jobs.json"
    seed_file.write_text(json.dumps([{"id": 1, "title": "Backend Dev"}]), encoding="utf-8")

    client = TestClient(create_app(Settings(_env_file=None, seed_file=seed_file)))

    assert client.get("/jobs/1").json() == {"id": 1, "title": "Backend Dev"}
