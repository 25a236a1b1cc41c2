from fastapi import Depends, File, HTTPException, UploadFile
from core.auth import require_roles
from core.media import save_image_upload
from models.project import Project
from routers.content_router import EDITOR_ROLES, build_content_router

MAX_IMAGES_PER_UPLOAD = 10

router = build_content_router(Project, prefix="/projects", tag="Projects", label="Project", upload_prefix="project")


@router.post("/upload")
def upload_images(
    images: list[UploadFile] = File(...),
    current_user = Depends(require_roles(*EDITOR_ROLES)),
):
    """Upload additional gallery images; returns their public URLs in order."""
    files = [f for f in images if f.filename]
    if not files:
        raise HTTPException(status_code=400, detail="No files uploaded")
    if len(files) > MAX_IMAGES_PER_UPLOAD:
        raise HTTPException(status_code=400, detail=f"At most {MAX_IMAGES_PER_UPLOAD} images per upload")
    urls = [save_image_upload(f, "project") for f in files]
    return {"success": True, "data": urls, "message": "Images uploaded successfully"}
