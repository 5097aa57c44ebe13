"""
Jinja environment for report documents.

Every ``{{ slot }}`` value that is not already ``Markup`` goes through
``escape_html`` via the environment's ``finalize`` hook, so templates never
escape by hand and renderers never pre-escape.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import jinja2
from markupsafe import Markup

from bdd_reports.reporting.formatting import escape_html, format_duration

TEMPLATES_DIR = Path(__file__).parent / "templates"

_JINJA2_ENV_CACHE: Dict[str, jinja2.Environment] = {}


def _escape_slot(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, Markup):
        return value
    return Markup(escape_html(str(value)))


def get_environment(template_dir: Optional[Path] = None) -> jinja2.Environment:
    """Return the Jinja environment for template_dir, cached per directory."""
    key = str(template_dir or TEMPLATES_DIR)
    if key not in _JINJA2_ENV_CACHE:
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(key),
            autoescape=True,
            finalize=_escape_slot,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        env.filters["duration"] = format_duration
        _JINJA2_ENV_CACHE[key] = env
    return _JINJA2_ENV_CACHE[key]


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """Render a packaged template with context."""
    template = get_environment().get_template(template_name)
    return template.render(**context)
