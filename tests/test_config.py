"""Startup configuration: defaults and fail-fast behaviour."""

import json

import pytest

from school_portal import create_app
from school_portal.config import DEFAULT_DB, DEFAULT_TIMEOUT_MS, load_settings
from school_portal.errors import ConfigError
from school_portal.store import DocumentStore


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings({"MONGO_URI": "mongodb://db:27017/"})
        assert settings == {
            "MONGO_URI": "mongodb://db:27017/",
            "MONGO_DB": DEFAULT_DB,
            "MONGO_CREDENTIALS": None,
            "STORE_TIMEOUT_MS": DEFAULT_TIMEOUT_MS,
        }

    def test_missing_uri(self):
        with pytest.raises(ConfigError, match="MONGO_URI"):
            load_settings({})

    def test_blank_uri(self):
        with pytest.raises(ConfigError, match="MONGO_URI"):
            load_settings({"MONGO_URI": "   "})

    def test_bad_scheme(self):
        with pytest.raises(ConfigError, match="must start with"):
            load_settings({"MONGO_URI": "postgres://db/x"})

    def test_srv_uri_accepted(self):
        assert load_settings({"MONGO_URI": "mongodb+srv://cluster.example.net"})["MONGO_URI"]

    def test_credentials(self):
        raw = json.dumps({"username": "portal", "password": "s3cret", "authSource": "admin"})
        settings = load_settings({"MONGO_URI": "mongodb://db/", "MONGO_CREDENTIALS_JSON": raw})
        assert settings["MONGO_CREDENTIALS"] == {
            "username": "portal", "password": "s3cret", "authSource": "admin",
        }

    def test_malformed_credentials(self):
        with pytest.raises(ConfigError, match="valid JSON"):
            load_settings({"MONGO_URI": "mongodb://db/", "MONGO_CREDENTIALS_JSON": "{not json"})

    def test_credentials_not_an_object(self):
        with pytest.raises(ConfigError, match="JSON object"):
            load_settings({"MONGO_URI": "mongodb://db/", "MONGO_CREDENTIALS_JSON": "[1, 2]"})

    def test_credentials_missing_password(self):
        with pytest.raises(ConfigError, match="password"):
            load_settings({"MONGO_URI": "mongodb://db/", "MONGO_CREDENTIALS_JSON": '{"username": "u"}'})

    @pytest.mark.parametrize("value", ["abc", "0", "-5"])
    def test_bad_timeout(self, value):
        with pytest.raises(ConfigError, match="STORE_TIMEOUT_MS"):
            load_settings({"MONGO_URI": "mongodb://db/", "STORE_TIMEOUT_MS": value})


class TestCreateApp:

    def test_aborts_without_uri(self):
        with pytest.raises(ConfigError, match="MONGO_URI"):
            create_app(environ={})

    def test_builds_document_store_from_settings(self):
        app = create_app(environ={"MONGO_URI": "mongodb://db:27017/", "MONGO_DB": "portal",
                                  "STORE_TIMEOUT_MS": "1500"})
        store = app.extensions["document_store"]
        assert isinstance(store, DocumentStore)
        assert store.db_name == "portal"
        assert store.timeout_ms == 1500
        # nothing is connected until the first query
        assert not store.initialized
