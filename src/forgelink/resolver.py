"""Resolve a file to its URL on the forge hosting its repository."""

import structlog

from forgelink.core.exceptions import UnknownForgeError
from forgelink.core.models import ResourceLocator, ResourceType
from forgelink.forges.normalizer import parse_remote
from forgelink.forges.registry import Forge, ForgeRegistry, get_registry

logger = structlog.get_logger(__name__)


class Resolver:
    """Resolves (remote, resource type, branch, path) to a forge URL.

    Example:
        >>> Resolver().resolve("git@github.com:octo/cat.git", "log", "main", "README.md")
        'https://github.com/octo/cat/commits/main/README.md'
    """

    def __init__(self, registry: ForgeRegistry | None = None) -> None:
        self._registry = registry if registry is not None else ForgeRegistry.default()

    @property
    def registry(self) -> ForgeRegistry:
        return self._registry

    def forge_for(self, remote: str) -> Forge:
        """Return the forge for ``remote``.

        Raises:
            MalformedRemoteError: If the remote is neither SSH nor HTTPS shaped.
            UnknownForgeError: If no registered forge matches the remote.
        """
        parse_remote(remote)
        forge = self._registry.resolve_forge(remote)
        if forge is None:
            raise UnknownForgeError(remote)
        return forge

    def resolve(
        self,
        remote: str,
        resource_type: ResourceType | str,
        branch: str,
        path: str,
    ) -> str:
        """Build the URL of ``path`` for ``resource_type``.

        The builder receives the remote as configured, not its normalized
        form. UnsupportedResourceTypeError propagates from the builder.
        """
        resource_type = ResourceType(resource_type)
        repo = parse_remote(remote)
        forge = self.forge_for(remote)
        url = forge.builder.build(remote, resource_type, branch, path)
        logger.debug(
            "Resolved resource URL",
            repo=repo.url,
            forge=forge.hostname,
            resource_type=resource_type.value,
            url=url,
        )
        return url

    def resolve_locator(
        self,
        remote: str,
        resource_type: ResourceType | str,
        locator: ResourceLocator,
    ) -> str:
        return self.resolve(remote, resource_type, locator.branch, locator.path)


def resolve_resource_url(
    remote: str,
    resource_type: ResourceType | str,
    branch: str,
    path: str,
    registry: ForgeRegistry | None = None,
) -> str:
    """Resolve a file to its forge URL using the configured registry."""
    if registry is None:
        registry = get_registry()
    return Resolver(registry).resolve(remote, resource_type, branch, path)
