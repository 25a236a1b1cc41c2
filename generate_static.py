"""Regenerate the public site once from the current database contents.

Usage: python generate_static.py
"""
import json
import logging
import sys

from core.config import settings
from core.database import SessionLocal
from core.logging import configure_logging
from generator.pipeline import SiteLayout, generate_static_site

logger = logging.getLogger("generate_static")


def main() -> int:
    configure_logging(settings.LOG_LEVEL)
    db = SessionLocal()
    try:
        result = generate_static_site(db, SiteLayout.from_settings(settings))
    finally:
        db.close()
    print(json.dumps(result.to_payload()))
    if not result.success:
        logger.error("static site generation failed: %s", result.error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
