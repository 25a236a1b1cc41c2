"""Per-record static pages built by patching a reference page template.

The template is an exported page for a placeholder project ("Mockup 3d").
Each substitution below is anchored on that page's literal markup. When an
anchor is missing the substitution is skipped and the placeholder content is
left in place; callers can observe this through ``on_miss``.
"""

import logging
import re
from typing import Callable, Optional

from generator.markup import escape_html

logger = logging.getLogger(__name__)

PLACEHOLDER_TITLE = "Mockup 3d"
DEFAULT_THUMBNAIL = "/wp-content/uploads/2024/10/image5-scaled.webp"
FALLBACK_VALUE = "N/A"

TITLE_TAG = re.compile(r"<title>Mockup 3d\s*[–-]?\s*GeekPie</title>")
CANONICAL_LINK = re.compile(r'<link rel="canonical" href="/portfolio/mockup-3d/">')
BREADCRUMB_HOME = re.compile(
    r'<li><a class="pxl-breadcrumb-link" href="/">Home</a></li><li class="pxl-breadcrumb-separator">\.</li>'
)
POST_TITLE = re.compile(r'<span class="pxl-post-title">Mockup 3d</span>')
THUMBNAIL_SRC = re.compile(r'src="/wp-content/uploads/2025/02/post-29\.webp"')
CONTENT_BLOCK = re.compile(
    r'<div id="pxl_text_editor-6fc2186-5297" class="pxl-text-editor-wrapper text-primary link-default link-hover-default   ">'
    r".*?</div>\s*</div>\s*</div>",
    re.DOTALL,
)
CLIENT_META = re.compile(
    r'(<span class="pxl-info-title">\s*Client Name:\s*</span>.*?<span class="pxl-info-meta">.*?'
    r'<a href="/author/root/" class="pxl-author-link">)\s*root\s*(</a>.*?</span>)',
    re.DOTALL,
)
CATEGORY_META = re.compile(
    r'(<span class="pxl-info-title">\s*Category:\s*</span>.*?<span class="pxl-info-meta">.*?'
    r'<a href="/portfolio-category/design/" rel="tag">)[^<]*(</a>.*?</span>)',
    re.DOTALL,
)
LOCATION_META = re.compile(
    r'(<span class="pxl-info-title">\s*Location:\s*</span>.*?<span class="pxl-info-meta">.*?'
    r'<a href="#">)\s*United Kingdom\s*(</a>.*?</span>)',
    re.DOTALL,
)
TIMELINE_META = re.compile(
    r'(<span class="pxl-info-title">\s*Timeline:\s*</span>.*?<span class="pxl-info-meta">.*?'
    r"<span>)\s*Oct 2023 - Nov 2023\s*(</span>.*?</span>)",
    re.DOTALL,
)
ARTICLE_END = re.compile(r"</article><!-- #post -->")

CONTENT_BLOCK_OPEN = (
    '<div id="pxl_text_editor-6fc2186-5297" class="pxl-text-editor-wrapper text-primary link-default '
    'link-hover-default   " style="word-wrap: break-word; overflow-wrap: break-word; max-width: 100%;">'
)


def category_label(category: Optional[str]) -> str:
    value = category or "design"
    return value[:1].upper() + value[1:]


def _wrap(value: str):
    return lambda m: f"{m.group(1)}{value}{m.group(2)}"


def _images_block(images, alt: str) -> str:
    return "\n".join(
        f'<div style="margin-bottom: 30px;">\n'
        f'        <img src="{escape_html(img)}" alt="{alt}" style="width: 100%; border-radius: 20px;">\n'
        f"      </div>"
        for img in images
    )


def render_record_page(
    record,
    kind: str,
    template: str,
    site_name: str = "GeekPie",
    on_miss: Optional[Callable[[str], None]] = None,
) -> str:
    """Return a standalone page for ``record`` published under ``/{kind}/{slug}/``.

    ``description`` is trusted HTML from the admin editor and is inserted
    as-is; every other value is escaped.
    """
    title = escape_html(record.title)
    thumbnail = escape_html(record.thumbnail or DEFAULT_THUMBNAIL)
    content = record.description or ""
    images = list(record.images or [])

    substitutions = [
        ("title", TITLE_TAG, lambda m: f"<title>{title} – {escape_html(site_name)}</title>", 1),
        ("canonical", CANONICAL_LINK, lambda m: f'<link rel="canonical" href="/{kind}/{record.slug}/">', 1),
        ("breadcrumb", BREADCRUMB_HOME, lambda m: '<li class="pxl-breadcrumb-separator">.</li>', 0),
        ("post_title", POST_TITLE, lambda m: f'<span class="pxl-post-title">{title}</span>', 0),
        ("thumbnail", THUMBNAIL_SRC, lambda m: f'src="{thumbnail}"', 1),
        (
            "content",
            CONTENT_BLOCK,
            lambda m: f"{CONTENT_BLOCK_OPEN}\n\t{content}\t\t\n</div>\t\t\t\t</div>\n\t\t\t\t</div>",
            1,
        ),
        ("client", CLIENT_META, _wrap(escape_html(record.client or FALLBACK_VALUE)), 1),
        ("category", CATEGORY_META, _wrap(escape_html(category_label(record.category))), 1),
        ("location", LOCATION_META, _wrap(escape_html(record.location or FALLBACK_VALUE)), 1),
        ("timeline", TIMELINE_META, _wrap(escape_html(record.timeline or FALLBACK_VALUE)), 1),
    ]
    if images:
        block = _images_block(images, title)
        substitutions.append(
            ("images", ARTICLE_END, lambda m: f"{block}\n                    </article><!-- #post -->", 1)
        )

    page = template
    for name, pattern, replacement, count in substitutions:
        page, matched = pattern.subn(replacement, page, count=count)
        if not matched:
            logger.warning("[render] %s anchor not found in page template for %s/%s", name, kind, record.slug)
            if on_miss is not None:
                on_miss(name)
    return page
