"""forgelink: resolve files in a local checkout to their forge web URLs."""

from forgelink.core.models import Remote, ResourceLocator, ResourceType
from forgelink.resolver import Resolver, resolve_resource_url

__version__ = "0.1.0"

__all__ = [
    "Remote",
    "ResourceLocator",
    "ResourceType",
    "Resolver",
    "resolve_resource_url",
    "__version__",
]
