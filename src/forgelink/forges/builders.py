"""URL builders, one per forge family.

Each builder maps a resource type to a path segment through a class-level
table and joins the URL parts with ``/``, skipping empty parts.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from forgelink.core.exceptions import UnsupportedResourceTypeError
from forgelink.core.models import Remote, ResourceType
from forgelink.forges.normalizer import parse_remote

PLAIN_QUERY = "?plain=1"


class URLBuilder(ABC):
    """Base class for forge URL builders."""

    family: ClassVar[str] = ""
    segments: ClassVar[dict[ResourceType, str]] = {}
    # Types rendered through the forge's plain-text view
    plain_types: ClassVar[frozenset[ResourceType]] = frozenset()

    @property
    def supported_types(self) -> list[ResourceType]:
        return list(self.segments)

    def supports(self, resource_type: ResourceType | str) -> bool:
        return ResourceType(resource_type) in self.segments

    def build(
        self,
        remote: str,
        resource_type: ResourceType | str,
        branch: str,
        path: str,
    ) -> str:
        """Build the URL of ``path`` on ``branch`` for ``resource_type``."""
        resource_type = ResourceType(resource_type)
        if resource_type not in self.segments:
            raise UnsupportedResourceTypeError(self.family, resource_type.value)

        parts = self.parts(parse_remote(remote), resource_type, branch, path)
        url = "/".join(part for part in parts if part)
        if resource_type in self.plain_types:
            url += PLAIN_QUERY
        return url

    @abstractmethod
    def parts(
        self,
        remote: Remote,
        resource_type: ResourceType,
        branch: str,
        path: str,
    ) -> list[str]:
        """Return the URL parts in order; empty parts are dropped."""
        raise NotImplementedError


class CgitBuilder(URLBuilder):
    """cgit: ``<origin>/<segment>/branch/<branch>/<path>``."""

    family = "cgit"
    segments = {
        ResourceType.LOG: "log",
        ResourceType.TREE: "src",
        ResourceType.BLOB: "plain",
    }

    def parts(
        self,
        remote: Remote,
        resource_type: ResourceType,
        branch: str,
        path: str,
    ) -> list[str]:
        return [remote.origin, self.segments[resource_type], "branch", branch, path]


class GiteaBuilder(URLBuilder):
    """Gitea and Forgejo: ``<origin>/<slug>/<segment>/branch/<branch>/<path>``."""

    family = "gitea"
    segments = {
        ResourceType.LOG: "commits",
        ResourceType.TREE: "src",
        ResourceType.BLOB: "raw",
        ResourceType.BLAME: "blame",
    }

    def parts(
        self,
        remote: Remote,
        resource_type: ResourceType,
        branch: str,
        path: str,
    ) -> list[str]:
        return [
            remote.origin,
            remote.repo_slug,
            self.segments[resource_type],
            "branch",
            branch,
            path,
        ]


class GitHubBuilder(URLBuilder):
    """GitHub: ``<origin>/<slug>/<segment>/<branch>/<path>``.

    Blobs are served from the raw content host instead of the web origin.
    """

    family = "github"
    raw_origin: ClassVar[str] = "https://raw.githubusercontent.com"
    segments = {
        ResourceType.LOG: "commits",
        ResourceType.EDIT: "edit",
        ResourceType.BLOB: "",
        ResourceType.PLAIN: "blob",
        ResourceType.BLAME: "blame",
        ResourceType.TREE: "blob",
    }
    plain_types = frozenset({ResourceType.PLAIN})

    def parts(
        self,
        remote: Remote,
        resource_type: ResourceType,
        branch: str,
        path: str,
    ) -> list[str]:
        origin = self.raw_origin if resource_type is ResourceType.BLOB else remote.origin
        return [origin, remote.repo_slug, self.segments[resource_type], branch, path]


class GitLabBuilder(URLBuilder):
    """GitLab: ``<origin>/<slug>/-/<segment>/<branch>/<path>``."""

    family = "gitlab"
    segments = {
        ResourceType.LOG: "commits",
        ResourceType.TREE: "blob",
        ResourceType.BLOB: "raw",
        ResourceType.BLAME: "blame",
        ResourceType.PLAIN: "blob",
    }
    plain_types = frozenset({ResourceType.PLAIN})

    def parts(
        self,
        remote: Remote,
        resource_type: ResourceType,
        branch: str,
        path: str,
    ) -> list[str]:
        return [remote.origin, remote.repo_slug, "-", self.segments[resource_type], branch, path]


class SourceHutBuilder(URLBuilder):
    """SourceHut: ``<origin>/<slug>/<type>/<branch>/item/<path>``.

    Blobs omit the ``item`` component.
    """

    family = "sourcehut"
    segments = {
        ResourceType.LOG: "log",
        ResourceType.TREE: "tree",
        ResourceType.BLOB: "blob",
        ResourceType.BLAME: "blame",
    }

    def parts(
        self,
        remote: Remote,
        resource_type: ResourceType,
        branch: str,
        path: str,
    ) -> list[str]:
        suffix = "" if resource_type is ResourceType.BLOB else "item"
        return [remote.origin, remote.repo_slug, self.segments[resource_type], branch, suffix, path]


BUILDERS: dict[str, type[URLBuilder]] = {
    builder.family: builder
    for builder in (CgitBuilder, GiteaBuilder, GitHubBuilder, GitLabBuilder, SourceHutBuilder)
}


def get_builder(family: str) -> URLBuilder:
    """Return a builder instance for a forge family name."""
    try:
        return BUILDERS[family.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown forge family: {family!r} (expected one of {', '.join(BUILDERS)})"
        ) from None
