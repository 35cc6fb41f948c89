# helprob/web/templates.py
from pathlib import Path
from typing import Mapping, Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

# helprob/templates/ ligt naast de web/ package
TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

SITE_TITLE = "Friendly space worm"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
# gedeeld door alle decoy-pagina's, los van de per-request context
_env.globals["site_title"] = SITE_TITLE


def render_template(name: str, context: Mapping[str, Any]) -> str:
    """
    Render a decoy page. `context` carries the per-request values
    (current_name, links); site-wide values come from the environment globals.
    """
    template = _env.get_template(name)
    return template.render(**context)
