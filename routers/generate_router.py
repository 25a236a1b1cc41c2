from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from core.auth import require_roles
from core.config import settings
from core.database import get_db
from generator.pipeline import SiteLayout, generate_static_site
from routers.content_router import EDITOR_ROLES

router = APIRouter(tags=["Site"])


@router.post("/generate-static")
def generate_static(db: Session = Depends(get_db), current_user = Depends(require_roles(*EDITOR_ROLES))):
    """Rebuild the public homepage listings and per-record pages from published content."""
    result = generate_static_site(db, SiteLayout.from_settings(settings))
    payload = result.to_payload()
    if not result.success:
        payload["message"] = result.error
        return JSONResponse(status_code=500, content=payload)
    payload["message"] = (
        f"Successfully generated {result.projects_generated} portfolio pages "
        f"and {result.ai_sectors_generated} AI sector pages"
    )
    return payload
