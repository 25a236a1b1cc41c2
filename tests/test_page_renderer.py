"""Tests for per-record page rendering against the reference template."""

from types import SimpleNamespace

from generator.page_renderer import DEFAULT_THUMBNAIL, category_label, render_record_page


def _record(**overrides):
    fields = {
        "title": "Neon Packaging",
        "slug": "neon-packaging",
        "description": "<p>Glowing <strong>boxes</strong></p>",
        "thumbnail": "/uploads/neon.webp",
        "images": [],
        "category": "branding",
        "client": "Acme",
        "location": "Berlin",
        "timeline": "Jan 2024 - Feb 2024",
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestRenderRecordPage:
    def test_rewrites_title_and_canonical(self, page_template):
        html = render_record_page(_record(), "portfolio", page_template)
        assert "<title>Neon Packaging – GeekPie</title>" in html
        assert '<link rel="canonical" href="/portfolio/neon-packaging/">' in html

    def test_canonical_uses_kind(self, page_template):
        html = render_record_page(_record(), "ai-sector", page_template)
        assert '<link rel="canonical" href="/ai-sector/neon-packaging/">' in html

    def test_site_name_is_configurable(self, page_template):
        html = render_record_page(_record(), "portfolio", page_template, site_name="Studio X")
        assert "<title>Neon Packaging – Studio X</title>" in html

    def test_every_placeholder_title_span_is_replaced(self, page_template):
        html = render_record_page(_record(), "portfolio", page_template)
        assert html.count('<span class="pxl-post-title">Neon Packaging</span>') == 2
        assert "Mockup 3d</span>" not in html

    def test_home_breadcrumb_removed(self, page_template):
        html = render_record_page(_record(), "portfolio", page_template)
        assert 'class="pxl-breadcrumb-link" href="/">Home' not in html
        assert '<li class="pxl-breadcrumb-separator">.</li>' in html

    def test_thumbnail_replaced(self, page_template):
        html = render_record_page(_record(), "portfolio", page_template)
        assert 'src="/uploads/neon.webp"' in html
        assert "post-29.webp" not in html

    def test_missing_thumbnail_uses_default(self, page_template):
        html = render_record_page(_record(thumbnail=None), "portfolio", page_template)
        assert f'src="{DEFAULT_THUMBNAIL}"' in html

    def test_description_inserted_unescaped(self, page_template):
        html = render_record_page(_record(), "portfolio", page_template)
        assert "<p>Glowing <strong>boxes</strong></p>" in html
        assert "Placeholder body copy" not in html
        assert "overflow-wrap: break-word" in html

    def test_content_block_keeps_div_balance(self, page_template):
        html = render_record_page(_record(), "portfolio", page_template)
        assert html.count("<div") == html.count("</div>")

    def test_metadata_fields(self, page_template):
        html = render_record_page(_record(), "portfolio", page_template)
        assert 'class="pxl-author-link">Acme</a>' in html
        assert 'rel="tag">Branding</a>' in html
        assert '<a href="#">Berlin</a>' in html
        assert "<span>Jan 2024 - Feb 2024</span>" in html

    def test_missing_metadata_falls_back_to_na(self, page_template):
        html = render_record_page(_record(client=None, location="", timeline=None), "portfolio", page_template)
        assert 'class="pxl-author-link">N/A</a>' in html
        assert '<a href="#">N/A</a>' in html
        assert "<span>N/A</span>" in html
        assert "United Kingdom" not in html
        assert "Oct 2023 - Nov 2023" not in html

    def test_text_values_are_escaped(self, page_template):
        record = _record(title="Foo & Bar", client="<Evil> \"Co\" 'Ltd'", description="<em>raw</em>")
        html = render_record_page(record, "portfolio", page_template)
        assert "<title>Foo &amp; Bar – GeekPie</title>" in html
        assert '<span class="pxl-post-title">Foo &amp; Bar</span>' in html
        assert "&lt;Evil&gt; &quot;Co&quot; &#039;Ltd&#039;" in html
        assert "<em>raw</em>" in html

    def test_images_appended_before_article_end(self, page_template):
        record = _record(images=["/uploads/a.webp", "/uploads/b.webp"])
        html = render_record_page(record, "portfolio", page_template)
        article_end = html.index("</article><!-- #post -->")
        assert html.index('<img src="/uploads/a.webp"') < html.index('<img src="/uploads/b.webp"') < article_end
        assert html.count("</article><!-- #post -->") == 1

    def test_no_images_leaves_article_untouched(self, page_template):
        html = render_record_page(_record(), "portfolio", page_template)
        assert 'style="width: 100%; border-radius: 20px;"' not in html


class TestTemplateDrift:
    def test_missing_anchor_is_skipped_silently(self):
        template = "<html><title>Something else</title><body>no anchors here</body></html>"
        html = render_record_page(_record(), "portfolio", template)
        assert html == template

    def test_on_miss_reports_each_unmatched_anchor(self, page_template):
        drifted = page_template.replace("United Kingdom", "Somewhere").replace(
            '<link rel="canonical" href="/portfolio/mockup-3d/">', ""
        )
        missed = []
        html = render_record_page(_record(), "portfolio", drifted, on_miss=missed.append)
        assert missed == ["canonical", "location"]
        assert "<a href=\"#\">Somewhere</a>" in html

    def test_images_anchor_reported_only_when_images_present(self):
        missed = []
        render_record_page(_record(images=["/x.webp"]), "portfolio", "<html></html>", on_miss=missed.append)
        assert "images" in missed
        missed.clear()
        render_record_page(_record(), "portfolio", "<html></html>", on_miss=missed.append)
        assert "images" not in missed


def test_category_label_capitalises_first_letter():
    assert category_label("web-design") == "Web-design"
    assert category_label("3d-design") == "3d-design"
    assert category_label(None) == "Design"


def test_escape_html_entities():
    from generator.markup import escape_html

    assert escape_html("a & b <c> \"d\" 'e'") == "a &amp; b &lt;c&gt; &quot;d&quot; &#039;e&#039;"
    assert escape_html(None) == ""
