# school_portal/store.py
# The one handle to MongoDB. Created by the app factory and passed explicitly
# to the school lookups (no module-level `db`).
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Mapping

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .errors import Unavailable

log = logging.getLogger(__name__)


class DocumentStore:
    """
    Lazily connected MongoDB database handle.

    `init()` builds the client once, even when several threads hit it first at
    the same time; `close()` drops it and a later `init()` reconnects. Every
    read is bounded by `timeout_ms`; driver errors (timeouts included) come out
    as `Unavailable`.
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        credentials: Mapping[str, str] | None = None,
        timeout_ms: int = 5000,
        client_factory: Callable[..., Any] = MongoClient,
    ):
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self._credentials = dict(credentials or {})
        self._client_factory = client_factory
        self._lock = threading.Lock()
        self._client = None
        self._db = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any], **kwargs) -> "DocumentStore":
        return cls(
            config["MONGO_URI"],
            config["MONGO_DB"],
            credentials=config.get("MONGO_CREDENTIALS"),
            timeout_ms=config.get("STORE_TIMEOUT_MS", 5000),
            **kwargs,
        )

    @property
    def initialized(self) -> bool:
        return self._db is not None

    def init(self):
        db = self._db
        if db is not None:
            return db
        with self._lock:
            if self._db is None:
                try:
                    client = self._client_factory(
                        self.uri,
                        serverSelectionTimeoutMS=self.timeout_ms,
                        connectTimeoutMS=self.timeout_ms,
                        socketTimeoutMS=self.timeout_ms,
                        **self._credentials,
                    )
                except PyMongoError as e:
                    raise Unavailable(f"could not create MongoDB client: {e}") from e
                try:
                    db = client[self.db_name]
                except PyMongoError as e:
                    client.close()
                    raise Unavailable(f"bad database name {self.db_name!r}: {e}") from e
                self._client = client
                self._db = db
                log.info("MongoDB client ready (db=%s)", self.db_name)
            return self._db

    def close(self) -> None:
        with self._lock:
            client, self._client, self._db = self._client, None, None
        if client is not None:
            client.close()
            log.info("MongoDB client closed")

    def find(
        self,
        collection: str,
        query: Mapping[str, Any],
        projection: Mapping[str, Any] | None = None,
        sort: list | None = None,
        limit: int = 0,
    ) -> list[dict]:
        """Run one find and materialize it; all-or-nothing."""
        db = self.init()
        try:
            cursor = db[collection].find(
                dict(query),
                projection,
                sort=sort,
                limit=limit,
                max_time_ms=self.timeout_ms,
            )
            return list(cursor)
        except PyMongoError as e:
            raise Unavailable(f"find on '{collection}' failed: {e}") from e

    def ping(self) -> None:
        db = self.init()
        try:
            db.command("ping")
        except PyMongoError as e:
            raise Unavailable(f"ping failed: {e}") from e
