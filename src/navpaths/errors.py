"""navpaths exception hierarchy.

Lookup misses are not errors: ``get_path`` returns ``None`` and the
extract operations return an empty list. Exceptions are reserved for
invalid configuration and, in strict mode, malformed registrations.
"""


class NavPathsError(Exception):
    """Base for all navpaths-specific errors."""


class ConfigurationError(NavPathsError):
    """Raised when a ``RegistryConfig`` value is invalid."""


class RegistrationError(NavPathsError, ValueError):
    """Raised by a strict registry when ``register()`` gets malformed input.

    Carries the key that was being registered so startup failures point
    at the offending call.
    """

    def __init__(self, key: object, detail: str) -> None:
        self.key = key
        self.detail = detail
        super().__init__(f"Invalid path registration {key!r}: {detail}")
