# core/cms.py
"""
Read-only access to the CMS content store.

Pages are JSON documents under ``<CMS_CONTENT_DIR>/pages/``, one file per
page (``homePage.json`` carries the home page subtitle). Nothing here writes.
"""
import json
import logging
from pathlib import Path
from typing import Optional

from django.conf import settings

from core.exceptions import CMSContentError, NotFound

logger = logging.getLogger(__name__)


def _pages_dir() -> Path:
    return Path(settings.CMS_CONTENT_DIR) / "pages"


def get_page(relative_path: str) -> dict:
    """Load one page document, e.g. ``get_page("homePage.json")``."""
    pages_dir = _pages_dir().resolve()
    path = (pages_dir / relative_path).resolve()
    if pages_dir not in path.parents or not path.is_file():
        raise NotFound("Page", relative_path)

    try:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as exc:
        logger.error("CMS page %s could not be read: %s", relative_path, exc)
        raise CMSContentError(f"Page '{relative_path}' could not be read") from exc

    if not isinstance(data, dict):
        raise CMSContentError(f"Page '{relative_path}' is not a JSON object")
    return data


def get_subtitle(relative_path: Optional[str] = None):
    page = get_page(relative_path or settings.CMS_HOME_PAGE)
    return page.get("subtitle")
