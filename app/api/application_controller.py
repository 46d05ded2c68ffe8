"""
app/api/application_controller.py

Handles POST /submit and GET /users.

This layer is responsible only for HTTP concerns:
  - Parsing the multipart form.
  - Delegating validation, record assembly and storage to ApplicationService.
  - Translating service-level errors into status codes and the shared
    ``{"message": "..."}`` envelope.

Wrong methods never reach these handlers: the router answers 405 and the
app-level handler in app.main renders it in the same envelope.

Responses (POST /submit):
  201  Application stored.
  400  Form unparseable, or an upload was missing, too large, of a
       disallowed type or unreadable. The message names the problem.
  413  Request body over the configured limit.
  500  The store could not be reached or the insert failed.

Responses (GET /users):
  200  JSON array of every stored application (``[]`` when empty).
  500  The store could not be reached, the query failed, or a stored
       document could not be decoded.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.constants import (
    MSG_INVALID_FORM,
    MSG_PAYLOAD_TOO_LARGE,
    MSG_STORE_READ_FAILED,
    MSG_STORE_WRITE_FAILED,
    MSG_SUBMITTED,
)
from app.core.exceptions import (
    AppBaseException,
    PayloadTooLargeError,
    SerializationError,
    StoreError,
    UploadError,
)
from app.core.logger import get_logger
from app.models.application_models import MessageResponse
from app.services.application_service import application_service

logger = get_logger(__name__)

router = APIRouter(tags=["Applications"])


# ── Helpers ────────────────────────────────────────────────────────────────────

def _message(message: str, status: int) -> JSONResponse:
    """Return the standard ``{"message": ...}`` body."""
    return JSONResponse(status_code=status, content=MessageResponse(message=message).model_dump())


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.post(
    "/submit",
    status_code=201,
    response_model=MessageResponse,
    summary="Submit a job application",
)
async def submit(request: Request) -> JSONResponse:
    """
    Accepts multipart/form-data with text fields
    fullName, email, phone, city, jobRole, notes (optional)
    and file fields idFront, idBack, selfieWithId (.jpg, .png or .pdf).
    """
    # ── 1. Parse multipart form ────────────────────────────────────────────────
    try:
        form = await request.form()
    except PayloadTooLargeError as exc:
        logger.warning("Submission rejected: %s", exc)
        return _message(MSG_PAYLOAD_TOO_LARGE, 413)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Unparseable submission: %s", exc)
        return _message(MSG_INVALID_FORM, 400)

    # ── 2. Validate + store ────────────────────────────────────────────────────
    try:
        await application_service.submit(form)

    except UploadError as exc:
        logger.warning("Upload rejected (%s): %s", exc.kind_name, exc)
        return _message(exc.client_message, exc.status_code)

    except StoreError as exc:
        logger.exception("Failed to store application: %s", exc)
        return _message(MSG_STORE_WRITE_FAILED, 500)

    except AppBaseException as exc:
        logger.exception("Application error during submit: %s", exc)
        return _message(MSG_STORE_WRITE_FAILED, 500)

    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error during submit: %s", exc)
        return _message(MSG_STORE_WRITE_FAILED, 500)

    finally:
        await form.close()

    return _message(MSG_SUBMITTED, 201)


@router.get("/users", summary="List all stored applications")
async def list_users() -> JSONResponse:
    """Returns every stored application; ``notes`` is absent when blank."""
    try:
        records = await application_service.list_applications()
        body = [record.to_public() for record in records]
        response = JSONResponse(status_code=200, content=body)

    except (StoreError, SerializationError) as exc:
        logger.exception("Failed to list applications (%s): %s", exc.kind_name, exc)
        return _message(MSG_STORE_READ_FAILED, 500)

    except (TypeError, ValueError) as exc:
        logger.exception("Failed to encode applications: %s", exc)
        return _message(MSG_STORE_READ_FAILED, 500)

    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error listing applications: %s", exc)
        return _message(MSG_STORE_READ_FAILED, 500)

    return response
