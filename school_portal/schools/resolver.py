# school_portal/schools/resolver.py
from __future__ import annotations

import logging

from pymongo import ASCENDING

from ..errors import NotFound, Unavailable
from . import SCHOOLS_COLLECTION
from .records import school_from_doc

log = logging.getLogger(__name__)


def resolve_school(store, slug) -> dict:
    """
    Find the one school whose `subdomain` equals `slug` (exact match).

    Raises NotFound when nothing matches, and also when the store could not be
    reached; in that case the Unavailable error is chained so callers and logs
    can still tell the difference (`err.reason`).

    `subdomain` carries a unique index, but if the store ever returns more than
    one match we take the lowest `_id` and say so in the log.
    """
    if not isinstance(slug, str) or not slug:
        raise NotFound("empty school slug")

    try:
        docs = store.find(
            SCHOOLS_COLLECTION,
            {"subdomain": slug},
            sort=[("_id", ASCENDING)],
            limit=2,
        )
    except Unavailable as e:
        log.warning("[resolve_school] store unavailable for slug=%r: %s", slug, e)
        raise NotFound(f"school {slug!r} could not be resolved") from e

    if not docs:
        raise NotFound(f"no school with subdomain {slug!r}")

    if len(docs) > 1:
        log.warning(
            "[resolve_school] subdomain %r matches more than one school; using _id=%s",
            slug, docs[0].get("_id"),
        )

    return school_from_doc(docs[0])
