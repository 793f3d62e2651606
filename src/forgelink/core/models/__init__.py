"""Domain models for forgelink."""

from forgelink.core.models.locator import ResourceLocator, ResourceType
from forgelink.core.models.remote import Remote

__all__ = [
    "Remote",
    "ResourceLocator",
    "ResourceType",
]
