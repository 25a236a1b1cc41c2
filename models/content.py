import uuid
from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, JSON
from models.base import TimestampMixin, utcnow

CATEGORIES = (
    "branding",
    "web-design",
    "3d-design",
    "ui-ux",
    "motion",
    "illustration",
    "design",
    "mockup",
    "other",
)
STATUSES = ("draft", "published")


class ContentRecordMixin(TimestampMixin):
    """Columns shared by every kind of record published on the site."""

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(200), nullable=False)
    # Not unique: two titles that slugify alike share one page directory
    slug = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    short_description = Column(String(300), nullable=True)
    category = Column(String(32), default=CATEGORIES[0], nullable=False)
    tags = Column(JSON, default=list, nullable=False)
    thumbnail = Column(String(512), nullable=True)
    images = Column(JSON, default=list, nullable=False)
    client = Column(String(255), nullable=True)
    location = Column(String(255), nullable=True)
    timeline = Column(String(255), nullable=True)
    project_date = Column(DateTime(timezone=True), default=utcnow, nullable=True)
    project_url = Column(String(512), nullable=True)
    featured = Column(Boolean, default=False, nullable=False)
    order = Column("sort_order", Integer, default=0, nullable=False)
    status = Column(String(16), default="published", nullable=False, index=True)
