# school_portal/schools/landing.py
from __future__ import annotations

from ..errors import NotFound, PortalError
from .content import index_sections, load_content
from .resolver import resolve_school


def build_landing(store, slug) -> dict:
    """
    School + content for the landing page, or NotFound.

    Both lookups must succeed: a school whose content could not be loaded is
    reported as NotFound (cause chained), never rendered half-way.
    """
    school = resolve_school(store, slug)
    try:
        content = load_content(store, school["id"])
    except PortalError as e:
        raise NotFound(f"content for school {slug!r} could not be loaded") from e

    return {
        "school": school,
        "content": content,
        "sections": index_sections(content),
    }
