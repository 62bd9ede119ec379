# school_portal/config.py
# Reads the environment into Flask config keys. Anything missing or malformed
# raises ConfigError here, before the app serves a single request.
from __future__ import annotations

import json
import os
from typing import Any, Mapping

from .errors import ConfigError

DEFAULT_DB = "school_portal_db"
DEFAULT_TIMEOUT_MS = 5000
URI_SCHEMES = ("mongodb://", "mongodb+srv://")


def _parse_credentials(raw: str) -> dict:
    try:
        creds = json.loads(raw)
    except ValueError:
        raise ConfigError(
            "Could not parse MONGO_CREDENTIALS_JSON. Make sure it is a valid JSON string."
        ) from None

    if not isinstance(creds, dict):
        raise ConfigError("MONGO_CREDENTIALS_JSON must be a JSON object.")
    missing = [k for k in ("username", "password") if not creds.get(k)]
    if missing:
        raise ConfigError(f"MONGO_CREDENTIALS_JSON is missing: {', '.join(missing)}")

    out = {"username": str(creds["username"]), "password": str(creds["password"])}
    if creds.get("authSource"):
        out["authSource"] = str(creds["authSource"])
    return out


def load_settings(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Build the app settings from `environ` (defaults to os.environ).

    Required: MONGO_URI.
    Optional: MONGO_DB, MONGO_CREDENTIALS_JSON, STORE_TIMEOUT_MS.
    """
    env = os.environ if environ is None else environ

    uri = (env.get("MONGO_URI") or "").strip()
    if not uri:
        raise ConfigError("MONGO_URI environment variable is not set.")
    if not uri.startswith(URI_SCHEMES):
        raise ConfigError(f"MONGO_URI must start with one of {URI_SCHEMES}.")

    raw_timeout = (env.get("STORE_TIMEOUT_MS") or "").strip() or str(DEFAULT_TIMEOUT_MS)
    try:
        timeout_ms = int(raw_timeout)
    except ValueError:
        raise ConfigError(f"STORE_TIMEOUT_MS must be an integer, got {raw_timeout!r}.") from None
    if timeout_ms <= 0:
        raise ConfigError("STORE_TIMEOUT_MS must be positive.")

    raw_creds = (env.get("MONGO_CREDENTIALS_JSON") or "").strip()

    return {
        "MONGO_URI": uri,
        "MONGO_DB": (env.get("MONGO_DB") or "").strip() or DEFAULT_DB,
        "MONGO_CREDENTIALS": _parse_credentials(raw_creds) if raw_creds else None,
        "STORE_TIMEOUT_MS": timeout_ms,
    }
