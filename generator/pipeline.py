"""One full regeneration of the public site tree from the content store.

The run is sequential and unlocked: two concurrent runs race on the same
homepage file and media directory, and the last writer wins. Nothing is
rolled back when a step fails, and pages for records that were unpublished
or deleted since the previous run are left on disk.
"""

import logging
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, Optional

from sqlalchemy.orm import Session

from crud.content_crud import list_published
from generator.homepage import HomepageSectionError, replace_depth_bounded_section, replace_marker_bounded_section
from generator.listing import (
    AI_SECTORS_LISTING,
    PROJECTS_LISTING,
    render_ai_sectors_section,
    render_projects_section,
)
from generator.media import sync_media
from generator.page_renderer import render_record_page
from models.ai_sector import AiSector
from models.project import Project
from schemas.generate_schema import GenerationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteLayout:
    """Where the generator reads from and writes to."""

    site_root: Path
    upload_dir: Path
    site_name: str = "GeekPie"
    homepage: str = "index.html"
    page_template: str = "portfolio/mockup-3d/index.html"
    uploads_dir: str = "uploads"
    projects_dir: str = "portfolio"
    ai_sectors_dir: str = "ai-sector"

    @classmethod
    def from_settings(cls, settings) -> "SiteLayout":
        return cls(
            site_root=Path(settings.SITE_ROOT),
            upload_dir=Path(settings.MEDIA_DIR),
            site_name=settings.SITE_NAME,
            homepage=settings.SITE_HOMEPAGE,
            page_template=settings.SITE_PAGE_TEMPLATE,
            uploads_dir=settings.SITE_UPLOADS_DIR,
            projects_dir=settings.SITE_PROJECTS_DIR,
            ai_sectors_dir=settings.SITE_AI_SECTORS_DIR,
        )

    @property
    def homepage_path(self) -> Path:
        return self.site_root / self.homepage

    @property
    def page_template_path(self) -> Path:
        return self.site_root / self.page_template

    @property
    def public_uploads_path(self) -> Path:
        return self.site_root / self.uploads_dir

    def page_path(self, pages_dir: str, slug: str) -> Path:
        return self.site_root / pages_dir / slug / "index.html"


def _write_pages(layout: SiteLayout, records, pages_dir: str, kind: str, on_template_miss) -> int:
    written = 0
    template_path = layout.page_template_path.resolve()
    for record in records:
        on_miss = partial(on_template_miss, kind, record.slug) if on_template_miss else None
        target = layout.page_path(pages_dir, record.slug)
        if target.resolve() == template_path:
            # The reference template is never overwritten by a record page
            logger.warning("[generate] skipped %s page %s: it would overwrite the page template", kind, record.slug)
            if on_miss is not None:
                on_miss("page_path")
            continue
        # The template is re-read for every page so edits between runs are picked up
        template = layout.page_template_path.read_text(encoding="utf-8")
        html = render_record_page(record, kind, template, site_name=layout.site_name, on_miss=on_miss)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        logger.info("[generate] wrote %s page %s", kind, record.slug)
        written += 1
    return written


def generate_static_site(
    db: Session,
    layout: SiteLayout,
    on_template_miss: Optional[Callable[[str, str, str], None]] = None,
) -> GenerationResult:
    """Regenerate the homepage listings, copy media and write one page per published record.

    ``db`` is owned by the caller. ``on_template_miss(kind, slug, anchor)`` is
    called for every page-template anchor that did not match, and with anchor
    ``"page_path"`` for a record skipped because its page is the template
    itself. The reported counts are pages actually written.
    """
    try:
        logger.info("[generate] starting static site generation")

        projects = list_published(db, Project)
        logger.info("[generate] found %d published projects", len(projects))
        ai_sectors = list_published(db, AiSector)
        logger.info("[generate] found %d published AI sectors", len(ai_sectors))

        sync_media(layout.upload_dir, layout.public_uploads_path)

        homepage = layout.homepage_path
        document = homepage.read_text(encoding="utf-8")
        try:
            document = replace_depth_bounded_section(
                document, PROJECTS_LISTING.container_id, render_projects_section(projects), "portfolio"
            )
        except HomepageSectionError as exc:
            logger.error("[generate] %s", exc)
            return GenerationResult.failed(str(exc))
        homepage.write_text(document, encoding="utf-8")
        logger.info("[generate] updated homepage with %d portfolio items", len(projects))

        document = homepage.read_text(encoding="utf-8")
        try:
            document = replace_marker_bounded_section(
                document, AI_SECTORS_LISTING.container_id, render_ai_sectors_section(ai_sectors), "AI Sectors"
            )
        except HomepageSectionError as exc:
            logger.error("[generate] %s", exc)
            return GenerationResult.failed(str(exc))
        homepage.write_text(document, encoding="utf-8")
        logger.info("[generate] updated homepage with %d AI sector items", len(ai_sectors))

        projects_generated = _write_pages(
            layout, projects, layout.projects_dir, PROJECTS_LISTING.page_root, on_template_miss
        )
        ai_sectors_generated = _write_pages(
            layout, ai_sectors, layout.ai_sectors_dir, AI_SECTORS_LISTING.page_root, on_template_miss
        )

        logger.info("[generate] static site generation complete")
        return GenerationResult(
            success=True,
            projects_generated=projects_generated,
            ai_sectors_generated=ai_sectors_generated,
        )
    except Exception as exc:
        # Database and filesystem errors abort the whole run; earlier writes stay on disk
        logger.exception("[generate] static site generation failed")
        return GenerationResult.failed(str(exc))
