# school_portal/schools/listing.py
# Whole-collection listing. No pagination and no cache: every call reads all
# schools into memory, which is fine only while the directory stays small.
from __future__ import annotations

import logging

from ..errors import InternalError, Unavailable
from . import SCHOOLS_COLLECTION
from .records import school_from_doc, to_summary

log = logging.getLogger(__name__)

SUMMARY_PROJECTION = {"name": 1, "subdomain": 1, "logoUrl": 1, "bannerUrl": 1}


def list_schools(store) -> list[dict]:
    """Every school as a summary, in whatever order the store yields them."""
    try:
        docs = store.find(SCHOOLS_COLLECTION, {}, SUMMARY_PROJECTION)
    except Unavailable as e:
        raise InternalError("could not list schools") from e

    summaries = []
    for doc in docs:
        summary = to_summary(school_from_doc(doc))
        if not summary["id"]:
            log.warning("[list_schools] skipping school without id: %r", summary.get("subdomain"))
            continue
        summaries.append(summary)
    return summaries
