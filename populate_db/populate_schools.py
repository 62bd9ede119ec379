#!/usr/bin/env python3
"""
Load schools and their landing-page content from a JSON file -> MongoDB

Input shape:
  {
    "schools": [
      {
        "subdomain": "alpha",
        "name": "Alpha High",
        "logoUrl": "https://...",          (optional)
        "bannerUrl": "https://...",        (optional)
        "content": {                       (optional, section -> payload)
          "hero":  {"title": "...", "subtitle": "..."},
          "about": {"description": "..."}
        }
      }
    ]
  }

Mongo:
- schools         upserted by subdomain   (unique index: subdomain)
- school_content  upserted by (school_id, section)  (unique index)

Uses the same env as the app (MONGO_URI, MONGO_DB, ...), .env included.

Usage:
  python populate_db/populate_schools.py --file schools.json [--drop]
"""

import argparse
import json
from pathlib import Path

from dotenv import load_dotenv
from pymongo import ASCENDING, UpdateOne
from pymongo.errors import BulkWriteError
from tqdm import tqdm

from school_portal.config import load_settings
from school_portal.schools import CONTENT_COLLECTION, SCHOOLS_COLLECTION
from school_portal.store import DocumentStore

SCHOOL_FIELDS = ("name", "logoUrl", "bannerUrl")


def ensure_indexes(db):
    print("📚 Ensuring indexes …")
    db[SCHOOLS_COLLECTION].create_index([("subdomain", ASCENDING)], name="subdomain_unique", unique=True)
    db[CONTENT_COLLECTION].create_index(
        [("school_id", ASCENDING), ("section", ASCENDING)],
        name="school_section_unique",
        unique=True,
    )


def read_schools(path: Path) -> list:
    data = json.loads(path.read_text(encoding="utf-8"))
    rows = data.get("schools") if isinstance(data, dict) else data
    if not isinstance(rows, list):
        raise SystemExit(f"{path}: expected a 'schools' list")

    seen = set()
    for row in rows:
        sub = (row.get("subdomain") or "").strip()
        if not sub or not row.get("name"):
            raise SystemExit(f"{path}: every school needs 'subdomain' and 'name' ({row!r})")
        if sub in seen:
            raise SystemExit(f"{path}: duplicate subdomain {sub!r}")
        seen.add(sub)
    return rows


def bulk_upsert(col, ops):
    if not ops:
        return 0
    try:
        res = col.bulk_write(ops, ordered=False)
        return (res.upserted_count or 0) + (res.modified_count or 0)
    except BulkWriteError as e:
        print("⚠️  BulkWriteError:", e.details.get("writeErrors", [])[:3], "…")
        return 0


def populate(db, rows):
    schools = db[SCHOOLS_COLLECTION]
    content = db[CONTENT_COLLECTION]

    ops = []
    for row in rows:
        sub = row["subdomain"].strip()
        doc = {k: row[k] for k in SCHOOL_FIELDS if row.get(k)}
        doc["subdomain"] = sub
        ops.append(UpdateOne({"subdomain": sub}, {"$set": doc}, upsert=True))
    print(f"🏫 Schools: {bulk_upsert(schools, ops)} upserted/updated")

    ids = {
        d["subdomain"]: str(d["_id"])
        for d in schools.find({"subdomain": {"$in": [r["subdomain"].strip() for r in rows]}},
                              {"subdomain": 1})
    }

    ops = []
    for row in tqdm(rows, desc="Populating content", unit="school"):
        school_id = ids.get(row["subdomain"].strip())
        if not school_id:
            continue
        for section, payload in (row.get("content") or {}).items():
            filt = {"school_id": school_id, "section": section}
            ops.append(UpdateOne(filt, {"$set": {**filt, "content": payload}}, upsert=True))
    print(f"🧩 Content: {bulk_upsert(content, ops)} sections upserted/updated")


def main():
    ap = argparse.ArgumentParser(description="Schools + landing content JSON -> MongoDB")
    ap.add_argument("--file", required=True, type=Path, help="JSON file with a 'schools' list")
    ap.add_argument("--drop", action="store_true", help="Drop both collections before loading")
    args = ap.parse_args()

    load_dotenv()
    store = DocumentStore.from_config(load_settings())
    try:
        # validate the whole file before touching the collections
        rows = read_schools(args.file)

        db = store.init()
        store.ping()

        if args.drop:
            print(f"🗑️  Dropping {SCHOOLS_COLLECTION} and {CONTENT_COLLECTION} …")
            db[SCHOOLS_COLLECTION].drop()
            db[CONTENT_COLLECTION].drop()

        ensure_indexes(db)
        populate(db, rows)
        print(f"✅ done: {db[SCHOOLS_COLLECTION].estimated_document_count()} schools in {store.db_name}")
    finally:
        store.close()


if __name__ == "__main__":
    main()
