import json
import math
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from core.auth import get_optional_user, require_roles
from core.database import get_db
from core.media import delete_media_file, save_image_upload
from crud.content_crud import create_record, delete_record, get_record, list_records, reorder_records, update_record
from schemas.content_schema import (
    ContentCreate,
    ContentEnvelope,
    ContentListResponse,
    ContentResponse,
    ContentUpdate,
    Pagination,
    ReorderRequest,
)

EDITOR_ROLES = ("admin", "editor")
# Form fields where an empty string means "not provided"
_BLANK_AS_MISSING = ("category", "featured", "order", "status", "project_date", "tags", "images")


def parse_list_field(value: Optional[str]) -> Optional[list[str]]:
    """Accept a JSON array or a comma-separated string from a multipart form."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return []
    try:
        parsed = json.loads(value)
    except ValueError:
        parsed = None
    if isinstance(parsed, list):
        items = [str(item).strip() for item in parsed]
    else:
        items = [part.strip() for part in value.split(",")]
    return [item for item in items if item]


def content_form(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    short_description: Optional[str] = Form(None, alias="shortDescription"),
    category: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    images: Optional[str] = Form(None),
    thumbnail_url: Optional[str] = Form(None, alias="thumbnailUrl"),
    client: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    timeline: Optional[str] = Form(None),
    project_url: Optional[str] = Form(None, alias="projectUrl"),
    project_date: Optional[str] = Form(None, alias="projectDate"),
    featured: Optional[str] = Form(None),
    order: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
) -> dict:
    raw = {
        "title": title,
        "description": description,
        "short_description": short_description,
        "category": category,
        "tags": tags,
        "images": images,
        "thumbnail": thumbnail_url,
        "client": client,
        "location": location,
        "timeline": timeline,
        "project_url": project_url,
        "project_date": project_date,
        "featured": featured,
        "order": order,
        "status": status,
    }
    data = {}
    for key, value in raw.items():
        if value is None:
            continue
        if key in _BLANK_AS_MISSING and not value.strip():
            continue
        data[key] = value
    for key in ("tags", "images"):
        if key in data:
            data[key] = parse_list_field(data[key])
    return data


def _validate(schema, data: dict):
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False, include_context=False))


def _has_file(upload: Optional[UploadFile]) -> bool:
    return upload is not None and bool(upload.filename)


def build_content_router(model, *, prefix: str, tag: str, label: str, upload_prefix: str) -> APIRouter:
    """CRUD routes shared by every kind of published record."""
    router = APIRouter(prefix=prefix, tags=[tag])
    not_found = f"{label} not found"

    @router.get("/", response_model=ContentListResponse)
    def list_all(
        category: str | None = None,
        featured: bool | None = None,
        status: str | None = None,
        limit: int = Query(20, ge=1, le=100),
        page: int = Query(1, ge=1),
        db: Session = Depends(get_db),
        current_user = Depends(get_optional_user),
    ):
        if current_user is None:
            # Public callers only ever see published records
            statuses = ["published"]
        elif status:
            statuses = [s.strip() for s in status.split(",") if s.strip()]
        else:
            statuses = None
        items, total = list_records(
            db,
            model,
            statuses=statuses,
            category=category,
            featured=featured,
            skip=(page - 1) * limit,
            limit=limit,
        )
        return ContentListResponse(
            data=[ContentResponse.model_validate(item) for item in items],
            pagination=Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit)),
        )

    @router.get("/{record_id}", response_model=ContentEnvelope)
    def read_one(record_id: str, db: Session = Depends(get_db), current_user = Depends(get_optional_user)):
        record = get_record(db, model, record_id)
        if not record or (current_user is None and record.status != "published"):
            raise HTTPException(status_code=404, detail=not_found)
        return ContentEnvelope(data=ContentResponse.model_validate(record))

    @router.post("/", response_model=ContentEnvelope, status_code=201)
    def create(
        form: dict = Depends(content_form),
        thumbnail: Optional[UploadFile] = File(None),
        db: Session = Depends(get_db),
        current_user = Depends(require_roles(*EDITOR_ROLES)),
    ):
        payload = _validate(ContentCreate, form)
        if _has_file(thumbnail):
            payload.thumbnail = save_image_upload(thumbnail, upload_prefix)
        record = create_record(db, model, payload)
        return ContentEnvelope(
            data=ContentResponse.model_validate(record),
            message=f"{label} created successfully",
        )

    @router.put("/reorder")
    def reorder(
        payload: ReorderRequest,
        db: Session = Depends(get_db),
        current_user = Depends(require_roles(*EDITOR_ROLES)),
    ):
        reorder_records(db, model, payload.orders)
        return {"success": True, "message": f"{tag} reordered successfully"}

    @router.put("/{record_id}", response_model=ContentEnvelope)
    def update(
        record_id: str,
        form: dict = Depends(content_form),
        thumbnail: Optional[UploadFile] = File(None),
        db: Session = Depends(get_db),
        current_user = Depends(require_roles(*EDITOR_ROLES)),
    ):
        payload = _validate(ContentUpdate, form)
        existing = get_record(db, model, record_id)
        if not existing:
            raise HTTPException(status_code=404, detail=not_found)
        if _has_file(thumbnail):
            old_thumbnail = existing.thumbnail
            payload.thumbnail = save_image_upload(thumbnail, upload_prefix)
            delete_media_file(old_thumbnail)
        record = update_record(db, model, record_id, payload)
        return ContentEnvelope(
            data=ContentResponse.model_validate(record),
            message=f"{label} updated successfully",
        )

    @router.delete("/{record_id}")
    def delete(
        record_id: str,
        db: Session = Depends(get_db),
        current_user = Depends(require_roles("admin")),
    ):
        ok = delete_record(db, model, record_id)
        if not ok:
            raise HTTPException(status_code=404, detail=not_found)
        return {"success": True, "message": f"{label} deleted successfully"}

    return router
