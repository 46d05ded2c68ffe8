"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
HTTP tests run against an in-memory store, so no MongoDB is required.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest
from fastapi.testclient import TestClient

from app.api import application_controller
from app.core.config import settings
from app.main import app
from app.models.application_models import ApplicationRecord
from app.services.application_service import ApplicationService
from app.services.upload_validator import UploadValidator
from app.store.base import ApplicationStore

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


class InMemoryApplicationStore(ApplicationStore):
    """ApplicationStore that keeps documents in a list, like a one-collection MongoDB."""

    def __init__(self) -> None:
        self.documents: List[dict] = []
        self.calls = 0

    async def insert(self, record: ApplicationRecord) -> None:
        self.calls += 1
        self.documents.append(record.to_document())

    async def find_all(self) -> List[ApplicationRecord]:
        self.calls += 1
        return [ApplicationRecord.from_document(doc) for doc in self.documents]


# ── Store + client fixtures ────────────────────────────────────────────────────

@pytest.fixture
def store() -> InMemoryApplicationStore:
    return InMemoryApplicationStore()


@pytest.fixture
def client(store, monkeypatch) -> TestClient:
    """
    A synchronous TestClient wrapping the FastAPI app, with the controller's
    service rebuilt around the in-memory store.
    """
    service = ApplicationService(validator=UploadValidator(), store=store)
    monkeypatch.setattr(application_controller, "application_service", service)
    monkeypatch.setattr(settings, "static_dir", str(STATIC_DIR))
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


# ── Sample form fixtures ───────────────────────────────────────────────────────

@pytest.fixture
def form_fields() -> dict:
    """Text fields of a complete submission (notes included)."""
    return {
        "fullName": "Ana Souza",
        "email": "ana@example.com",
        "phone": "+55 11 99999-0000",
        "city": "Recife",
        "jobRole": "Driver",
        "notes": "Available on weekends",
    }


@pytest.fixture
def upload_bytes() -> dict:
    """Distinct content per upload field so mix-ups are detectable."""
    return {
        "idFront": b"\xff\xd8\xff\xe0front-jpeg\x00\x01",
        "idBack": b"\x89PNG\r\n\x1a\nback-png",
        "selfieWithId": b"%PDF-1.4\nselfie\n%%EOF",
    }


@pytest.fixture
def upload_files(upload_bytes) -> list:
    """
    (field_name, (filename, content, content_type)) tuples ready for
    use with TestClient's `files=` parameter.
    """
    return [
        ("idFront", ("front.jpg", upload_bytes["idFront"], "image/jpeg")),
        ("idBack", ("back.PNG", upload_bytes["idBack"], "image/png")),
        ("selfieWithId", ("selfie.pdf", upload_bytes["selfieWithId"], "application/pdf")),
    ]
