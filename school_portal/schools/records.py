# school_portal/schools/records.py
# Shapes of a school as handed to templates and JSON responses.


def school_from_doc(doc: dict) -> dict:
    """Raw Mongo document -> school dict. `_id` becomes the string `id`; the rest is untouched."""
    school = dict(doc)
    _id = school.pop("_id", None)
    school["id"] = "" if _id is None else str(_id)
    return school


def to_summary(school: dict) -> dict:
    """Public projection used by the listing and the single-school API."""
    return {
        "id": school.get("id") or "",
        "name": school.get("name"),
        "subdomain": school.get("subdomain"),
        "logoUrl": school.get("logoUrl") or None,
        "bannerUrl": school.get("bannerUrl") or None,
    }
