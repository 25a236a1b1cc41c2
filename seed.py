"""Create the admin account and a handful of sample projects.

Usage: python seed.py [admin-email] [admin-password]
"""
import logging
import sys
from datetime import datetime, timezone

from core.config import settings
from core.database import Base, SessionLocal, engine
from core.logging import configure_logging
from crud.content_crud import create_record
from crud.user_crud import create_user, delete_user_by_email
from models import user, session, ai_sector  # noqa: F401
from models.project import Project
from schemas.content_schema import ContentCreate
from schemas.user_schema import UserCreate

logger = logging.getLogger("seed")

SAMPLE_PROJECTS = [
    {
        "title": "Holographic Earpod with Casing Design",
        "description": "<p>A futuristic earpod design featuring holographic elements and premium casing.</p>",
        "category": "3d-design",
        "tags": ["3D Design", "Product Design", "Futuristic"],
        "thumbnail": "/wp-content/uploads/2024/10/image1.webp",
        "images": ["/wp-content/uploads/2024/10/image1.webp", "/wp-content/uploads/2024/10/image2.webp"],
        "client": "TechAudio Inc.",
        "project_date": datetime(2024, 10, 15, tzinfo=timezone.utc),
        "project_url": "https://example.com/earpod",
        "featured": True,
        "order": 1,
    },
    {
        "title": "Modern 3D Layout for Dribbble Presentation",
        "description": "<p>A stunning 3D layout design created for Dribbble portfolio presentation.</p>",
        "category": "3d-design",
        "tags": ["3D Design", "UI/UX", "Presentation"],
        "thumbnail": "/wp-content/uploads/2024/10/image2.webp",
        "featured": True,
        "order": 2,
    },
    {
        "title": "Brand Identity for a Coffee Roastery",
        "description": "<p>Logo, packaging and signage for an independent roastery.</p>",
        "category": "branding",
        "tags": ["Branding", "Packaging"],
        "thumbnail": "/wp-content/uploads/2024/10/image3.webp",
        "order": 3,
    },
]


def seed(email: str, password: str) -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        delete_user_by_email(db, email)
        create_user(db, UserCreate(username="admin", email=email, password=password, role="admin"))
        logger.info("admin user created: %s", email)

        deleted = db.query(Project).delete()
        db.commit()
        logger.info("deleted %d existing projects", deleted)
        for data in SAMPLE_PROJECTS:
            create_record(db, Project, ContentCreate(status="published", **data))
        logger.info("created %d sample projects", len(SAMPLE_PROJECTS))
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    args = sys.argv[1:]
    seed(
        args[0] if len(args) > 0 else "admin@geekpie.com",
        args[1] if len(args) > 1 else "admin123",
    )
