from generator.pipeline import SiteLayout, generate_static_site
from models.ai_sector import AiSector
from models.project import Project

PROJECTS_ID = "pxl_portfolio-99a9dd8-9958"
AI_ID = "pxl_portfolio-15bf4fe-5345"


def _homepage(layout):
    return layout.homepage_path.read_text(encoding="utf-8")


def _page(layout, pages_dir, slug):
    return layout.page_path(pages_dir, slug).read_text(encoding="utf-8")


class TestGenerateStaticSite:
    def test_reports_published_counts(self, db, site_layout, make_record):
        make_record(Project, "Neon Packaging")
        make_record(Project, "Hidden Draft", status="draft")
        make_record(AiSector, "Vision Models")

        result = generate_static_site(db, site_layout)

        assert result.success is True
        assert result.to_payload() == {"success": True, "projectsGenerated": 1, "aiSectorsGenerated": 1}

    def test_writes_one_page_per_published_record(self, db, site_layout, make_record):
        make_record(Project, "Neon Packaging", client="Acme")
        make_record(AiSector, "Vision Models")

        generate_static_site(db, site_layout)

        project_page = _page(site_layout, "portfolio", "neon-packaging")
        assert "<title>Neon Packaging – GeekPie</title>" in project_page
        assert 'class="pxl-author-link">Acme</a>' in project_page
        ai_page = _page(site_layout, "ai-sector", "vision-models")
        assert '<link rel="canonical" href="/ai-sector/vision-models/">' in ai_page

    def test_drafts_are_excluded_everywhere(self, db, site_layout, make_record):
        make_record(Project, "Live One")
        make_record(Project, "Secret Draft", status="draft")
        make_record(AiSector, "Secret Sector", status="draft")

        result = generate_static_site(db, site_layout)

        homepage = _homepage(site_layout)
        assert "Live One" in homepage
        assert "Secret Draft" not in homepage
        assert "Secret Sector" not in homepage
        assert not site_layout.page_path("portfolio", "secret-draft").exists()
        assert not site_layout.page_path("ai-sector", "secret-sector").exists()
        assert result.ai_sectors_generated == 0

    def test_homepage_listings_replace_old_items(self, db, site_layout, make_record):
        make_record(Project, "Brand New")
        make_record(AiSector, "Fresh Sector")

        generate_static_site(db, site_layout)

        homepage = _homepage(site_layout)
        assert "Old project one" not in homepage
        assert "Old sector" not in homepage
        assert 'href="/portfolio/brand-new/"' in homepage
        assert 'href="/ai-sector/fresh-sector/"' in homepage
        assert "Footer stays put" in homepage

    def test_listing_follows_display_order(self, db, site_layout, make_record):
        make_record(Project, "Second", order=2)
        make_record(Project, "First", order=1)

        generate_static_site(db, site_layout)

        homepage = _homepage(site_layout)
        assert homepage.index("/portfolio/first/") < homepage.index("/portfolio/second/")

    def test_rerun_is_idempotent(self, db, site_layout, make_record):
        for i in range(8):
            make_record(Project, f"Project {i}")
        for i in range(7):
            make_record(AiSector, f"Sector {i}")

        generate_static_site(db, site_layout)
        first = _homepage(site_layout)
        generate_static_site(db, site_layout)
        second = _homepage(site_layout)

        assert first == second
        assert second.count(f'id="{PROJECTS_ID}"') == 1
        assert second.count(f'id="{AI_ID}"') == 1
        assert second.count("<script>") == 2
        assert second.count("<div") == second.count("</div")

    def test_slug_collision_last_write_wins(self, db, site_layout, make_record):
        make_record(Project, "Same Name", description="<p>first copy</p>", order=1)
        make_record(Project, "Same  Name!", description="<p>second copy</p>", order=2)

        result = generate_static_site(db, site_layout)

        assert result.projects_generated == 2
        page = _page(site_layout, "portfolio", "same-name")
        assert "<p>second copy</p>" in page
        assert "<p>first copy</p>" not in page

    def test_media_is_copied_into_site(self, db, site_layout, make_record):
        (site_layout.upload_dir / "project-1.webp").write_bytes(b"img")
        make_record(Project, "With Media")

        generate_static_site(db, site_layout)

        assert (site_layout.public_uploads_path / "project-1.webp").read_bytes() == b"img"

    def test_unpublished_pages_are_left_on_disk(self, db, site_layout, make_record):
        record = make_record(Project, "Gone Soon")
        generate_static_site(db, site_layout)
        record.status = "draft"
        db.commit()

        generate_static_site(db, site_layout)

        assert site_layout.page_path("portfolio", "gone-soon").exists()
        assert "Gone Soon" not in _homepage(site_layout)

    def test_template_misses_are_reported(self, db, site_layout, make_record):
        template = site_layout.page_template_path
        template.write_text(
            template.read_text(encoding="utf-8").replace("United Kingdom", "Elsewhere"), encoding="utf-8"
        )
        make_record(Project, "Drifted")
        misses = []

        result = generate_static_site(db, site_layout, on_template_miss=lambda *args: misses.append(args))

        assert result.success is True
        assert misses == [("portfolio", "drifted", "location")]


class TestGenerateFailures:
    def test_missing_projects_marker(self, db, site_layout, make_record):
        homepage = site_layout.homepage_path
        homepage.write_text(homepage.read_text(encoding="utf-8").replace(PROJECTS_ID, "renamed"), encoding="utf-8")
        make_record(Project, "Anything")

        result = generate_static_site(db, site_layout)

        assert result.to_payload() == {
            "success": False,
            "error": "Could not find portfolio section marker in index.html",
        }
        assert not site_layout.page_path("portfolio", "anything").exists()

    def test_missing_ai_sector_marker(self, db, site_layout, make_record):
        homepage = site_layout.homepage_path
        homepage.write_text(homepage.read_text(encoding="utf-8").replace(AI_ID, "renamed"), encoding="utf-8")
        make_record(Project, "Anything")

        result = generate_static_site(db, site_layout)

        assert result.success is False
        assert result.error == "Could not find AI Sectors section marker in index.html"
        # the projects listing was already written before the failure
        assert 'href="/portfolio/anything/"' in _homepage(site_layout)

    def test_unterminated_projects_section(self, db, site_layout):
        site_layout.homepage_path.write_text(f'<div id="{PROJECTS_ID}"><div>', encoding="utf-8")

        result = generate_static_site(db, site_layout)

        assert result.error == "Could not find end of portfolio section in index.html"

    def test_missing_homepage_file(self, db, tmp_path, media_dir):
        layout = SiteLayout(site_root=tmp_path / "empty-site", upload_dir=media_dir)

        result = generate_static_site(db, layout)

        assert result.success is False
        assert result.error


class TestPagePaths:
    def test_title_without_slug_characters_gets_its_own_directory(self, db, site_layout, make_record):
        archive = site_layout.site_root / "portfolio" / "index.html"
        archive.write_text("PORTFOLIO ARCHIVE", encoding="utf-8")
        record = make_record(Project, "!!!")

        result = generate_static_site(db, site_layout)

        assert result.projects_generated == 1
        assert record.slug == record.id
        assert archive.read_text(encoding="utf-8") == "PORTFOLIO ARCHIVE"
        assert site_layout.page_path("portfolio", record.id).exists()
        assert f'href="/portfolio/{record.id}/"' in _homepage(site_layout)
        assert 'href="/portfolio//"' not in _homepage(site_layout)

    def test_record_slugged_like_the_template_is_skipped(self, db, site_layout, make_record):
        original_template = site_layout.page_template_path.read_text(encoding="utf-8")
        make_record(Project, "Mockup 3d", description="<p>AAA</p>", order=1)
        make_record(Project, "Other", description="<p>BBB</p>", order=2)
        misses = []

        result = generate_static_site(db, site_layout, on_template_miss=lambda *args: misses.append(args))

        assert result.success is True
        assert result.projects_generated == 1
        assert site_layout.page_template_path.read_text(encoding="utf-8") == original_template
        other = _page(site_layout, "portfolio", "other")
        assert "<p>BBB</p>" in other
        assert "<p>AAA</p>" not in other
        assert ("portfolio", "mockup-3d", "page_path") in misses
