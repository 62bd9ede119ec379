# school_portal/schools/content.py
# Landing-page content rows: {school_id, section, content}. The payload is
# opaque here; templates pick the keys they know.
from __future__ import annotations

from ..errors import NotFound
from . import CONTENT_COLLECTION


def load_content(store, school_id: str) -> list[dict]:
    """
    All content rows of one school, in store order, without `_id`.

    An empty list is a valid answer (nothing authored yet). Store failures
    propagate as Unavailable; nothing is retried.
    """
    if not school_id:
        raise NotFound("empty school id")

    return store.find(CONTENT_COLLECTION, {"school_id": school_id}, {"_id": 0})


def index_sections(rows: list[dict]) -> dict[str, dict]:
    sections: dict[str, dict] = {}
    for row in rows:
        name = row.get("section")
        if not name or name in sections:
            continue
        payload = row.get("content")
        sections[name] = payload if isinstance(payload, dict) else {}
    return sections


def as_list(value) -> list:
    """Template filter: list-like payload values as a list, anything else as []."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return []
