import re
import unicodedata
import uuid
from sqlalchemy.orm import Session
from sqlalchemy import desc
from schemas.content_schema import ContentCreate, ContentUpdate
from core.media import delete_media_file


def slugify(title: str) -> str:
    """Lower-case, URL-safe slug; ``&`` is spelled out before stripping."""
    text = unicodedata.normalize("NFKD", title or "").encode("ascii", "ignore").decode("ascii")
    text = text.replace("&", " and ").lower()
    text = re.sub(r"[^a-z0-9]+", "-", text)
    return text.strip("-")


def record_slug(title: str, record_id: str) -> str:
    """Slug for a stored record; falls back to the id so the page directory is never empty."""
    return slugify(title) or record_id


def _ordered(q, model):
    return q.order_by(model.order.asc(), desc(model.created_at))


def get_record(db: Session, model, record_id: str):
    return db.query(model).filter(model.id == record_id).first()


def list_records(
    db: Session,
    model,
    statuses: list[str] | None = None,
    category: str | None = None,
    featured: bool | None = None,
    skip: int = 0,
    limit: int = 20,
):
    q = db.query(model)
    if statuses:
        q = q.filter(model.status.in_(statuses))
    if category:
        q = q.filter(model.category == category)
    if featured is not None:
        q = q.filter(model.featured.is_(featured))
    total = q.count()
    items = _ordered(q, model).offset(skip).limit(limit).all()
    return items, total


def list_published(db: Session, model):
    return _ordered(db.query(model).filter(model.status == "published"), model).all()


def create_record(db: Session, model, payload: ContentCreate):
    data = payload.model_dump()
    record_id = str(uuid.uuid4())
    record = model(id=record_id, slug=record_slug(data["title"], record_id), **data)
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def update_record(db: Session, model, record_id: str, payload: ContentUpdate):
    record = get_record(db, model, record_id)
    if not record:
        return None
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is None and field in ("title", "description", "category", "featured", "order", "status", "tags", "images"):
            continue
        setattr(record, field, value)
    if payload.title:
        record.slug = record_slug(payload.title, record.id)
    db.commit()
    db.refresh(record)
    return record


def delete_record(db: Session, model, record_id: str) -> bool:
    record = get_record(db, model, record_id)
    if not record:
        return False
    delete_media_file(record.thumbnail)
    db.delete(record)
    db.commit()
    return True


def reorder_records(db: Session, model, orders) -> int:
    updated = 0
    for item in orders:
        record = get_record(db, model, item.id)
        if record is None:
            continue
        record.order = item.order
        updated += 1
    db.commit()
    return updated
