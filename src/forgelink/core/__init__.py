"""Core domain models and errors for forgelink."""

from forgelink.core.exceptions import (
    ConfigurationError,
    ForgeLinkError,
    MalformedRemoteError,
    RepositoryError,
    UnknownForgeError,
    UnsupportedResourceTypeError,
)
from forgelink.core.models import Remote, ResourceLocator, ResourceType

__all__ = [
    # Models
    "Remote",
    "ResourceLocator",
    "ResourceType",
    # Exceptions
    "ForgeLinkError",
    "ConfigurationError",
    "RepositoryError",
    "UnknownForgeError",
    "MalformedRemoteError",
    "UnsupportedResourceTypeError",
]
