from fastapi import Depends, File, HTTPException, UploadFile
from core.auth import require_roles
from core.media import save_image_upload
from models.ai_sector import AiSector
from routers.content_router import EDITOR_ROLES, build_content_router

router = build_content_router(AiSector, prefix="/ai-sectors", tag="AI Sectors", label="AI Sector", upload_prefix="ai-sector")


@router.post("/upload")
def upload_image(
    thumbnail: UploadFile | None = File(None),
    current_user = Depends(require_roles(*EDITOR_ROLES)),
):
    if thumbnail is None or not thumbnail.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")
    url = save_image_upload(thumbnail, "ai-sector")
    return {"success": True, "data": url, "message": "Image uploaded successfully"}
