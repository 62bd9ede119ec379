# school_portal/errors.py
# Error types shared by the store client, the school lookups and the routes.


class ConfigError(RuntimeError):
    """Missing or malformed startup configuration. Always fatal."""


class PortalError(Exception):
    status_code = 500


class NotFound(PortalError):
    """
    No school/content for the request.

    When raised while the store was unreachable, the `Unavailable` error is
    chained as `__cause__` so logs can still tell the two apart.
    """
    status_code = 404

    @property
    def reason(self) -> str:
        return "unavailable" if isinstance(self.__cause__, Unavailable) else "missing"


class Unavailable(PortalError):
    status_code = 503


class InternalError(PortalError):
    status_code = 500
