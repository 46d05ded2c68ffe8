"""
app/services/application_service.py

Orchestrates the two application flows:

    submit:  FormData
               └─ text fields (verbatim)
               └─ UploadValidator.validate() ×3   (stop at first failure)
                    └─ ApplicationRecord
                         └─ ApplicationStore.insert()

    list:    ApplicationStore.find_all() → [ApplicationRecord]

Both dependencies are constructor-injected so tests can swap them out;
the module-level singleton wires in the production implementations.
"""

from __future__ import annotations

from typing import Dict, List

from starlette.datastructures import FormData

from app.core.constants import (
    FIELD_CITY,
    FIELD_EMAIL,
    FIELD_FULL_NAME,
    FIELD_ID_BACK,
    FIELD_ID_FRONT,
    FIELD_JOB_ROLE,
    FIELD_NOTES,
    FIELD_PHONE,
    FIELD_SELFIE_WITH_ID,
    UPLOAD_FIELDS,
)
from app.core.logger import get_logger
from app.models.application_models import ApplicationRecord
from app.services.upload_validator import UploadValidator
from app.store.base import ApplicationStore
from app.store.mongo_store import MongoApplicationStore

logger = get_logger(__name__)


class ApplicationService:
    """
    Builds application records from submitted forms and reads them back.

    A record is stored only after all three uploads have passed
    validation; nothing is written for a rejected submission.
    """

    def __init__(
        self,
        validator: UploadValidator | None = None,
        store: ApplicationStore | None = None,
    ) -> None:
        self._validator: UploadValidator = validator or UploadValidator()
        self._store: ApplicationStore = store or MongoApplicationStore()

    # ── Public API ─────────────────────────────────────────────────────────────

    async def submit(self, form: FormData) -> ApplicationRecord:
        """
        Validate a submitted form and persist it as one record.

        Args:
            form: Parsed multipart form from the request.

        Returns:
            The record that was stored.

        Raises:
            UploadError : The first upload that failed validation; later
                          uploads are not read.
            StoreError  : The insert failed.
        """
        encoded: Dict[str, str] = {}
        for field in UPLOAD_FIELDS:
            encoded[field] = await self._validator.validate(field, form.get(field))

        record = ApplicationRecord(
            name=_text(form, FIELD_FULL_NAME),
            email=_text(form, FIELD_EMAIL),
            phone_number=_text(form, FIELD_PHONE),
            city=_text(form, FIELD_CITY),
            job_title=_text(form, FIELD_JOB_ROLE),
            identity_doc_front=encoded[FIELD_ID_FRONT],
            identity_doc_back=encoded[FIELD_ID_BACK],
            selfie_with_doc=encoded[FIELD_SELFIE_WITH_ID],
            notes=_text(form, FIELD_NOTES) or None,
        )

        await self._store.insert(record)
        logger.info("Application stored — job_title='%s'.", record.job_title)
        return record

    async def list_applications(self) -> List[ApplicationRecord]:
        """Return every stored application. An empty store gives ``[]``."""
        records = await self._store.find_all()
        logger.info("Listed %d application(s).", len(records))
        return records


def _text(form: FormData, field: str) -> str:
    """Form text value as sent; absent (or a file sent in its place) becomes ''."""
    value = form.get(field)
    return value if isinstance(value, str) else ""


# ── Module-level singleton ─────────────────────────────────────────────────────
# Controllers import this instance. Tests construct ApplicationService
# directly with injected fakes.

application_service = ApplicationService()
