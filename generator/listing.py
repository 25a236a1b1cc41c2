"""Homepage listing fragments: grid items, the load-more control and its script."""

from dataclasses import dataclass

from generator.markup import escape_html

INITIAL_ITEMS_COUNT = 6
LOAD_MORE_COUNT = 6
EXCERPT_LENGTH = 150

ARROW_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="30" height="30" viewbox="0 0 30 30" fill="none">'
    '<path d="M21.5657 19.3518L21.4975 9.87206C21.4975 9.46287 21.1793 9.1446 20.7701 9.1446L11.2903 9.0764'
    "C10.8811 9.0764 10.5628 9.39467 10.5628 9.80386C10.5628 10.2131 10.8811 10.5313 11.2903 10.5313L18.9969 "
    "10.5995L9.33525 20.2612C9.06246 20.534 9.06246 20.9886 9.33525 21.2614C9.60805 21.5342 10.0855 21.5569 "
    "10.3583 21.2842L20.0653 11.5771L20.1335 19.3746C20.1335 19.5564 20.2245 19.7383 20.3609 19.8747C20.4973 "
    '20.0111 20.6791 20.102 20.8837 20.0793C21.2475 20.0793 21.5885 19.7383 21.5657 19.3518Z" '
    'fill="currentcolor"></path></svg>'
)
PLUS_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20" viewbox="0 0 20 20" fill="none">'
    '<path d="M10 2V18M2 10H18" stroke="currentColor" stroke-width="2" stroke-linecap="round"/></svg>'
)


@dataclass(frozen=True)
class Listing:
    """One homepage listing and the names its markup is keyed on."""

    container_id: str
    page_root: str
    hidden_class: str
    button_id: str
    item_noun: str
    per_page: int = INITIAL_ITEMS_COUNT
    category_classes: bool = False
    first_item_active: bool = False


PROJECTS_LISTING = Listing(
    container_id="pxl_portfolio-99a9dd8-9958",
    page_root="portfolio",
    hidden_class="pxl-portfolio-hidden",
    button_id="pxl-load-more-btn",
    item_noun="projects",
    category_classes=True,
)

AI_SECTORS_LISTING = Listing(
    container_id="pxl_portfolio-15bf4fe-5345",
    page_root="ai-sector",
    hidden_class="pxl-ai-sector-hidden",
    button_id="pxl-ai-load-more-btn",
    item_noun="AI sectors",
    per_page=5,
    first_item_active=True,
)


def excerpt(record) -> str:
    if record.short_description:
        return record.short_description
    return (record.description or "")[:EXCERPT_LENGTH]


def record_url(listing: Listing, record) -> str:
    return f"/{listing.page_root}/{record.slug}/"


def render_listing_item(listing: Listing, record, index: int) -> str:
    link = record_url(listing, record)
    title = escape_html(record.title)
    hidden = index >= INITIAL_ITEMS_COUNT

    classes = ["pxl-grid-item", "col-12"]
    if listing.category_classes:
        classes.append(record.category or "design")
    if hidden:
        classes.append(listing.hidden_class)
    classes.extend(["wow", "fadeInUp"])
    style = f"z-index: {index}" + ("; display: none;" if hidden else "")
    active = " active" if listing.first_item_active and index == 0 else ""

    return f"""            <div class="{' '.join(classes)}" data-index="{index}" style="{style}">
                <div class="pxl-post-item hover-parent pxl-accordion-item{active}">
                    <div class="pxl-post-content">
                        <span class="pxl-post-index">{index + 1:02d}</span>
                        <div class="pxl-post-group">
                            <div class="pxl-accorrdion-header">
                                <h3 class="pxl-post-title hover-text-default">
                                    <a href="{link}" class="pxl-title-link">{title}</a>
                                </h3>
                            </div>
                            <div class="pxl-accordion-content">
                                <div class="pxl-accordion-details">
                                    <p class="pxl-post-excerpt">{escape_html(excerpt(record))}</p>
                                    <a href="{link}" class="btn pxl-post-btn pxl-btn-split">
                                        <span class="pxl-btn-icon icon-duplicated">{ARROW_ICON}</span>
                                        <span class="pxl-btn-text">View Project Details</span>
                                        <span class="pxl-btn-icon icon-main">{ARROW_ICON}</span>
                                    </a>
                                </div>
                            </div>
                        </div>
                    </div>
                    <div class="pxl-post-featured hover-image-parallax">
                        <a href="{link}" class="pxl-featured-link">
                            <img loading="lazy" decoding="async" src="{escape_html(record.thumbnail or '')}" width="767" height="642" class="pxl-featured-image no-lazyload" alt="{title}">
                        </a>
                    </div>
                </div>
            </div>"""


def load_more_label(remaining: int, listing: Listing) -> str:
    return f"Load More ({remaining} more {listing.item_noun})"


def render_load_more_button(listing: Listing, total: int) -> str:
    """Return the load-more control, or an empty string when everything is visible."""
    if total <= INITIAL_ITEMS_COUNT:
        return ""
    remaining = total - INITIAL_ITEMS_COUNT
    return f"""
            <div class="pxl-load-more-wrapper" style="text-align: center; margin-top: 50px; width: 100%;">
                <button id="{listing.button_id}" class="btn pxl-load-more-btn" data-loaded="{INITIAL_ITEMS_COUNT}" data-total="{total}" data-load-count="{LOAD_MORE_COUNT}" style="background-color: #FF6B35; color: #121212; padding: 18px 45px; border-radius: 50px; font-family: 'Kanit', sans-serif; font-size: 16px; font-weight: 500; border: none; cursor: pointer; transition: all 0.3s ease; display: inline-flex; align-items: center; gap: 10px;">
                    <span class="pxl-btn-text">{escape_html(load_more_label(remaining, listing))}</span>
                    <span class="pxl-btn-icon">{PLUS_ICON}</span>
                </button>
            </div>"""


def render_load_more_script(listing: Listing) -> str:
    """Client-side reveal for one listing; hidden items are looked up inside its own container."""
    return f"""
            <script>
            (function() {{
                var btn = document.getElementById('{listing.button_id}');
                var container = document.getElementById('{listing.container_id}');
                if (!btn || !container) return;
                var total = parseInt(btn.dataset.total, 10);
                var loadCount = parseInt(btn.dataset.loadCount, 10);
                btn.addEventListener('click', function() {{
                    var hidden = container.querySelectorAll('.{listing.hidden_class}');
                    var count = Math.min(loadCount, hidden.length);
                    for (var i = 0; i < count; i++) {{
                        hidden[i].style.display = 'block';
                        hidden[i].classList.remove('{listing.hidden_class}');
                        hidden[i].classList.add('fadeInUp');
                    }}
                    var loaded = parseInt(btn.dataset.loaded, 10) + count;
                    btn.dataset.loaded = loaded;
                    var remaining = total - loaded;
                    if (remaining <= 0) {{
                        btn.style.display = 'none';
                    }} else {{
                        btn.querySelector('.pxl-btn-text').textContent = 'Load More (' + remaining + ' more {listing.item_noun})';
                    }}
                }});
                btn.addEventListener('mouseenter', function() {{
                    this.style.backgroundColor = '#121212';
                    this.style.color = '#FF6B35';
                }});
                btn.addEventListener('mouseleave', function() {{
                    this.style.backgroundColor = '#FF6B35';
                    this.style.color = '#121212';
                }});
            }})();
            </script>"""


def render_items(listing: Listing, records) -> str:
    return "\n".join(render_listing_item(listing, record, index) for index, record in enumerate(records))


def _container_open(listing: Listing, total: int) -> str:
    return (
        f'<div id="{listing.container_id}" class="pxl-grid pxl-portfolio-grid pxl-layout-portfolio '
        f'pxl-layout-portfolio3 pxl-post-accordion" data-start-page="1" data-max-pages="1" '
        f'data-total="{total}" data-perpage="{listing.per_page}" data-next-link="" data-loadmore="">'
    )


def render_projects_section(records) -> str:
    """Whole projects container, from its opening tag through its closing ``</div>``."""
    records = list(records)
    total = len(records)
    controls = render_load_more_button(PROJECTS_LISTING, total)
    if controls:
        controls += render_load_more_script(PROJECTS_LISTING)
    return f"""{_container_open(PROJECTS_LISTING, total)}
            <div class="pxl-grid-inner row">
{render_items(PROJECTS_LISTING, records)}
            </div>{controls}
        </div>"""


def render_ai_sectors_section(records) -> str:
    """AI-sector container from its opening tag through the grid loader span."""
    records = list(records)
    total = len(records)
    controls = render_load_more_button(AI_SECTORS_LISTING, total)
    if controls:
        controls += render_load_more_script(AI_SECTORS_LISTING)
    return f"""{_container_open(AI_SECTORS_LISTING, total)}
            <div class="pxl-grid-inner row">
{render_items(AI_SECTORS_LISTING, records)}
            </div>{controls}
            <span class="pxl-grid-loader"></span>"""
