import html


def escape_html(text) -> str:
    """Escape a plain-text value for element content or a quoted attribute."""
    if not text:
        return ""
    return html.escape(str(text), quote=True).replace("&#x27;", "&#039;")
