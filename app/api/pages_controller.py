"""
app/api/pages_controller.py

Serves the two static HTML pages: the public application form and the
admin panel that lists submissions through GET /users.
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from app.core.config import settings
from app.core.constants import ADMIN_PAGE, FORM_PAGE, HTML_CONTENT_TYPE
from app.core.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Pages"])


def _page(name: str) -> FileResponse:
    path = Path(settings.static_dir) / name
    if not path.is_file():
        logger.error("Static page missing: %s", path)
        raise HTTPException(status_code=404)
    return FileResponse(path, media_type=HTML_CONTENT_TYPE)


@router.get("/form", summary="Application form page", include_in_schema=False)
async def form_page() -> FileResponse:
    return _page(FORM_PAGE)


@router.get("/adminpanel", summary="Admin panel page", include_in_schema=False)
async def admin_page() -> FileResponse:
    return _page(ADMIN_PAGE)
