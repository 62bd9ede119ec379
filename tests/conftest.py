"""Shared fixtures: an in-memory store and a Flask app wired to it."""

import pytest

from school_portal import create_app
from school_portal.errors import Unavailable

TEST_ENV = {"MONGO_URI": "mongodb://localhost:27017/", "MONGO_DB": "school_portal_test"}


def _sort_key(value):
    return (value is None, str(value))


def _project(doc, projection):
    if not projection:
        return dict(doc)
    include = [k for k, v in projection.items() if v and k != "_id"]
    if include:
        out = {k: doc[k] for k in include if k in doc}
        if projection.get("_id", 1) and "_id" in doc:
            out["_id"] = doc["_id"]
        return out
    return {k: v for k, v in doc.items() if projection.get(k, 1)}


class FakeStore:
    """
    Stands in for DocumentStore: equality filters, projection, sort and limit
    over plain lists of dicts. Collections named in `failing` raise Unavailable.
    """

    def __init__(self, collections=None, failing=()):
        self.collections = {name: [dict(d) for d in docs] for name, docs in (collections or {}).items()}
        self.failing = set(failing)
        self.calls = []

    def find(self, collection, query, projection=None, sort=None, limit=0):
        self.calls.append((collection, dict(query)))
        if collection in self.failing:
            raise Unavailable(f"{collection} is down")

        docs = [d for d in self.collections.get(collection, [])
                if all(d.get(k) == v for k, v in query.items())]
        for key, direction in reversed(sort or []):
            docs.sort(key=lambda d: _sort_key(d.get(key)), reverse=direction < 0)
        if limit:
            docs = docs[:limit]
        return [_project(d, projection) for d in docs]

    def ping(self):
        if "ping" in self.failing:
            raise Unavailable("ping failed")

    def close(self):
        pass


ALPHA = {"_id": "a", "subdomain": "alpha", "name": "Alpha High"}
BETA = {"_id": "b", "subdomain": "beta", "name": "Beta High"}


@pytest.fixture
def store():
    return FakeStore({
        "schools": [ALPHA, BETA],
        "school_content": [
            {"_id": "c1", "school_id": "a", "section": "hero",
             "content": {"title": "Welcome to Alpha", "subtitle": "Learn with us"}},
            {"_id": "c2", "school_id": "a", "section": "about",
             "content": {"description": "Founded in 1990."}},
        ],
    })


@pytest.fixture
def make_app():
    def _make(store):
        app = create_app(environ=dict(TEST_ENV), store=store)
        app.config["TESTING"] = True
        return app
    return _make


@pytest.fixture
def app(make_app, store):
    return make_app(store)


@pytest.fixture
def client(app):
    return app.test_client()
