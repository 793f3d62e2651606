"""Forge registry, remote normalization and URL builders."""

from forgelink.forges.builders import (
    BUILDERS,
    CgitBuilder,
    GiteaBuilder,
    GitHubBuilder,
    GitLabBuilder,
    SourceHutBuilder,
    URLBuilder,
    get_builder,
)
from forgelink.forges.normalizer import extract_repo_slug, normalize, parse_remote
from forgelink.forges.registry import DEFAULT_FORGES, Forge, ForgeRegistry, get_registry

__all__ = [
    "BUILDERS",
    "DEFAULT_FORGES",
    "CgitBuilder",
    "Forge",
    "ForgeRegistry",
    "GiteaBuilder",
    "GitHubBuilder",
    "GitLabBuilder",
    "SourceHutBuilder",
    "URLBuilder",
    "extract_repo_slug",
    "get_builder",
    "get_registry",
    "normalize",
    "parse_remote",
]
