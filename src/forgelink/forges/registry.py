"""Registry of known forges."""

from collections.abc import Iterator, Mapping

import structlog
from pydantic import BaseModel, ConfigDict

from forgelink.core.exceptions import ConfigurationError, MalformedRemoteError
from forgelink.forges.builders import (
    CgitBuilder,
    GiteaBuilder,
    GitHubBuilder,
    GitLabBuilder,
    SourceHutBuilder,
    URLBuilder,
    get_builder,
)
from forgelink.forges.normalizer import HTTPS_PREFIX, normalize

logger = structlog.get_logger(__name__)


class Forge(BaseModel):
    """A registered forge hostname and the builder for its URLs."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    hostname: str
    builder: URLBuilder

    @property
    def family(self) -> str:
        return self.builder.family

    @property
    def origin(self) -> str:
        return f"{HTTPS_PREFIX}{self.hostname}"


DEFAULT_FORGES: tuple[Forge, ...] = (
    Forge(hostname="github.com", builder=GitHubBuilder()),
    Forge(hostname="gitlab.com", builder=GitLabBuilder()),
    Forge(hostname="codeberg.org", builder=GiteaBuilder()),
    Forge(hostname="gitea.com", builder=GiteaBuilder()),
    Forge(hostname="git.savannah.gnu.org", builder=CgitBuilder()),
    Forge(hostname="git.kernel.org", builder=CgitBuilder()),
    Forge(hostname="git.sr.ht", builder=SourceHutBuilder()),
)


class ForgeRegistry:
    """Ordered, read-only mapping of forge hostnames to URL builders.

    A remote matches an entry when its HTTPS form starts with
    ``https://<hostname>``. Every entry is tested and the last match
    wins, so entries added later override earlier ones.
    """

    def __init__(self, forges: tuple[Forge, ...] = DEFAULT_FORGES) -> None:
        self._forges = tuple(forges)

    @classmethod
    def default(cls) -> "ForgeRegistry":
        return cls(DEFAULT_FORGES)

    def __iter__(self) -> Iterator[Forge]:
        return iter(self._forges)

    def __len__(self) -> int:
        return len(self._forges)

    def with_forges(self, forges: Mapping[str, str]) -> "ForgeRegistry":
        """Return a new registry with ``{hostname: family}`` entries appended."""
        extra = []
        for hostname, family in forges.items():
            try:
                builder = get_builder(family)
            except ValueError as e:
                raise ConfigurationError(f"Forge {hostname!r}: {e}") from e
            extra.append(Forge(hostname=hostname, builder=builder))
        return ForgeRegistry(self._forges + tuple(extra))

    def resolve_forge(self, remote: str) -> Forge | None:
        """Find the forge serving ``remote``, or None if no entry matches."""
        try:
            normalized = normalize(remote)
        except MalformedRemoteError:
            logger.debug("Malformed remote", remote=remote)
            return None

        match = None
        for forge in self._forges:
            if normalized.startswith(forge.origin):
                match = forge
        return match


def get_registry() -> ForgeRegistry:
    """Build the registry from the defaults plus configured forges."""
    from forgelink.config.settings import load_settings

    settings = load_settings()
    return ForgeRegistry.default().with_forges(settings.forges)
