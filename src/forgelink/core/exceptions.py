"""Exception hierarchy for forgelink."""


class ForgeLinkError(Exception):
    """Base exception for all forgelink errors."""


class ConfigurationError(ForgeLinkError):
    """Raised when settings contain an invalid value."""


class RepositoryError(ForgeLinkError):
    """Raised when the local checkout cannot be queried."""


class UnknownForgeError(ForgeLinkError):
    """Raised when a remote matches no registered forge."""

    def __init__(self, remote: str, message: str | None = None) -> None:
        self.remote = remote
        super().__init__(message or f"No forge registered for remote: {remote!r}")


class MalformedRemoteError(UnknownForgeError):
    """Raised when a remote is neither SSH (git@host:) nor HTTPS shaped."""

    def __init__(self, remote: str) -> None:
        super().__init__(remote, f"Unsupported remote format: {remote!r}")


class UnsupportedResourceTypeError(ForgeLinkError):
    """Raised when a forge has no URL for the requested resource type."""

    def __init__(self, forge: str, resource_type: str) -> None:
        self.forge = forge
        self.resource_type = resource_type
        super().__init__(f"{forge} does not support resource type {resource_type!r}")
