"""
app/models/application_models.py

Pydantic models for the application intake flow.

``ApplicationRecord`` is the one persisted unit: it is built once per
request, never mutated, and uses the same field names in MongoDB and in
the JSON returned by GET /users. The request has no DTO — the multipart
form is read field by field in the service.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ApplicationRecord(BaseModel):
    """
    One job-application submission.

    The three document fields hold the Base64 text of the uploaded file.
    ``notes`` is the only optional field; a blank note is stored as
    absent rather than as an empty string.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    phone_number: str
    city: str
    job_title: str
    identity_doc_front: str
    identity_doc_back: str
    selfie_with_doc: str
    notes: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Map to the stored document shape, dropping a blank note."""
        doc = self.model_dump(exclude={"notes"})
        if self.notes and self.notes.strip():
            doc["notes"] = self.notes
        return doc

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "ApplicationRecord":
        """Build a record from a stored document, ignoring store-only keys like ``_id``."""
        fields = {k: v for k, v in doc.items() if k in cls.model_fields}
        return cls(**fields)

    def to_public(self) -> Dict[str, Any]:
        """JSON shape for API responses; same keys as the stored document."""
        return self.to_document()


class MessageResponse(BaseModel):
    """
    Body of every non-list response, success or error:

        { "message": "Application submitted successfully" }
    """

    message: str
