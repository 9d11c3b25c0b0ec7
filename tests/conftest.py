from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    # Ensure local .env cannot leak a real model key into tests.
    os.environ["ENVIRONMENT"] = "test"
    os.environ["GEMINI_API_KEY"] = ""


@pytest.fixture()
def client() -> Any:
    from jobsai.database import Base, create_core_tables, engine
    from jobsai.main import create_app
    import jobsai.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    create_core_tables(engine)

    app = create_app()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


class FakeGenerationClient:
    """Stands in for the hosted model: records prompts and returns a canned reply."""

    def __init__(self, reply: Any) -> None:
        self.reply = reply
        self.prompts: list[str] = []

    def generate_json(self, prompt: str) -> Any:
        self.prompts.append(prompt)
        return self.reply


@pytest.fixture()
def fake_generation_client():
    return FakeGenerationClient
