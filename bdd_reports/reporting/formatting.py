"""
Formatting helpers shared by every report document.
"""

from typing import Optional

# Order matters: "&" must be replaced before the entities below introduce one.
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def format_duration(milliseconds: int) -> str:
    """Format a millisecond count as ``"250ms"`` or ``"1.50s"``."""
    if milliseconds < 1000:
        return f"{milliseconds}ms"
    return f"{milliseconds / 1000.0:.2f}s"


def escape_html(text: Optional[str]) -> str:
    """Escape HTML special characters."""
    if text is None:
        return ""
    text = str(text)
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text
