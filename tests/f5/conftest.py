"""Fixtures for F5 tests - Web API."""

import pytest
from fastapi.testclient import TestClient

from curriculum.web.api import create_app


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Create test client with isolated data directory."""
    monkeypatch.chdir(tmp_path)
    app = create_app()
    return TestClient(app)


@pytest.fixture
def profile_body():
    return {
        "full_name": "Ana",
        "academic_status": "Junior",
        "employed": False,
        "job_details": "",
        "programming_languages": ["Python"],
        "databases": ["Postgres"],
        "preferred_role": "Back-End",
    }


@pytest.fixture
def seeded(client):
    for name in ["Python", "Java"]:
        client.post("/api/languages", json={"name": name})
    return client
