# /ethnode/core/errors.py
# Exception hierarchy for node connection settings.


class ConfigError(Exception):
    """Base class for every failure raised while resolving node settings."""


class UnsupportedNetworkError(ConfigError):
    pass


class PathNotFoundError(ConfigError, FileNotFoundError):
    """A settings file or a jwt secret file does not exist."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class ConfigParseError(ConfigError):
    pass


class MissingAddressError(ConfigError):
    pass


class MissingSecretError(ConfigError):
    pass


class InvalidSecretError(ConfigError):
    """Wraps the SecretError (or PathNotFoundError) that made the jwt unusable."""

    def __init__(self, message: str, reason: Exception):
        super().__init__(message)
        self.reason = reason


# --- jwt secret resolution failures, surfaced through InvalidSecretError ---

class SecretError(ConfigError):
    pass


class SecretUnresolvableError(SecretError):
    pass


class SecretFileReadError(SecretError):
    pass


class InvalidHexContentError(SecretError):
    pass
