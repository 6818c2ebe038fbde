"""
HTML rendering for the standalone entry page (`GET /entry`).

Kept apart from data retrieval: the router fetches the entry through
`service.get_entry()` and hands the row to `render_entry()`.
"""

from __future__ import annotations

import base64
import logging
import os
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
DEFAULT_LOGO_PATH = PACKAGE_DIR / "static" / "logo.png"

ENTRY_NOT_FOUND = "Entry not found."


def nl2br(text: str | None) -> Markup:
    """
    Escape `text` and turn newlines into <br> tags.
    """
    lines = escape(text or "").split("\n")
    return Markup("<br>").join(lines)


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["nl2br"] = nl2br
    return env


_env = _environment()


def logo_path() -> Path:
    raw = os.environ.get("LOGO_PATH", "").strip()
    return Path(raw) if raw else DEFAULT_LOGO_PATH


# Successful reads only; a missing logo is retried on the next request.
_logo_cache: dict[Path, str] = {}


def _read_logo(path: Path) -> str | None:
    cached = _logo_cache.get(path)
    if cached is not None:
        return cached
    try:
        encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    except OSError as exc:
        logger.warning("logo_unavailable path=%s error=%s", path, exc)
        return None
    _logo_cache[path] = encoded
    return encoded


def logo_base64() -> str | None:
    return _read_logo(logo_path())


def render_entry(entry: dict[str, Any], *, logo: str | None = None) -> str:
    template = _env.get_template("entry.html")
    return template.render(entry=entry, logo=logo)
