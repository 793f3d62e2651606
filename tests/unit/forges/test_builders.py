"""Tests for forge URL builders."""

import pytest

from forgelink.core.exceptions import UnsupportedResourceTypeError
from forgelink.core.models import ResourceType
from forgelink.forges.builders import (
    BUILDERS,
    CgitBuilder,
    GiteaBuilder,
    GitHubBuilder,
    GitLabBuilder,
    SourceHutBuilder,
    get_builder,
)


@pytest.mark.unit
class TestGitHubBuilder:
    """Tests for GitHubBuilder."""

    REMOTE = "git@github.com:octo/cat.git"

    @pytest.mark.parametrize(
        "resource_type,expected",
        [
            ("log", "https://github.com/octo/cat/commits/main/src/main.c"),
            ("edit", "https://github.com/octo/cat/edit/main/src/main.c"),
            ("blob", "https://raw.githubusercontent.com/octo/cat/main/src/main.c"),
            ("plain", "https://github.com/octo/cat/blob/main/src/main.c?plain=1"),
            ("blame", "https://github.com/octo/cat/blame/main/src/main.c"),
            ("tree", "https://github.com/octo/cat/blob/main/src/main.c"),
        ],
    )
    def test_build(self, resource_type: str, expected: str) -> None:
        assert GitHubBuilder().build(self.REMOTE, resource_type, "main", "src/main.c") == expected

    def test_plain_from_https_remote(self) -> None:
        url = GitHubBuilder().build("https://github.com/octo/cat", ResourceType.PLAIN, "main", "README.md")
        assert url == "https://github.com/octo/cat/blob/main/README.md?plain=1"


@pytest.mark.unit
class TestGitLabBuilder:
    """Tests for GitLabBuilder."""

    REMOTE = "git@gitlab.com:octo/cat.git"

    @pytest.mark.parametrize(
        "resource_type,expected",
        [
            ("log", "https://gitlab.com/octo/cat/-/commits/dev/lib/x.rb"),
            ("tree", "https://gitlab.com/octo/cat/-/blob/dev/lib/x.rb"),
            ("blob", "https://gitlab.com/octo/cat/-/raw/dev/lib/x.rb"),
            ("blame", "https://gitlab.com/octo/cat/-/blame/dev/lib/x.rb"),
            ("plain", "https://gitlab.com/octo/cat/-/blob/dev/lib/x.rb?plain=1"),
        ],
    )
    def test_build(self, resource_type: str, expected: str) -> None:
        assert GitLabBuilder().build(self.REMOTE, resource_type, "dev", "lib/x.rb") == expected

    def test_edit_unsupported(self) -> None:
        with pytest.raises(UnsupportedResourceTypeError):
            GitLabBuilder().build(self.REMOTE, "edit", "dev", "lib/x.rb")


@pytest.mark.unit
class TestGiteaBuilder:
    """Tests for GiteaBuilder."""

    REMOTE = "https://codeberg.org/octo/cat.git"

    @pytest.mark.parametrize(
        "resource_type,expected",
        [
            ("log", "https://codeberg.org/octo/cat/commits/branch/main/x.go"),
            ("tree", "https://codeberg.org/octo/cat/src/branch/main/x.go"),
            ("blob", "https://codeberg.org/octo/cat/raw/branch/main/x.go"),
            ("blame", "https://codeberg.org/octo/cat/blame/branch/main/x.go"),
        ],
    )
    def test_build(self, resource_type: str, expected: str) -> None:
        assert GiteaBuilder().build(self.REMOTE, resource_type, "main", "x.go") == expected

    @pytest.mark.parametrize("resource_type", ["edit", "plain"])
    def test_unsupported(self, resource_type: str) -> None:
        with pytest.raises(UnsupportedResourceTypeError):
            GiteaBuilder().build(self.REMOTE, resource_type, "main", "x.go")


@pytest.mark.unit
class TestCgitBuilder:
    """Tests for CgitBuilder."""

    REMOTE = "https://git.savannah.gnu.org/emacs.git"

    @pytest.mark.parametrize(
        "resource_type,expected",
        [
            ("log", "https://git.savannah.gnu.org/log/branch/master/lisp/vc/vc.el"),
            ("tree", "https://git.savannah.gnu.org/src/branch/master/lisp/vc/vc.el"),
            ("blob", "https://git.savannah.gnu.org/plain/branch/master/lisp/vc/vc.el"),
        ],
    )
    def test_build(self, resource_type: str, expected: str) -> None:
        assert CgitBuilder().build(self.REMOTE, resource_type, "master", "lisp/vc/vc.el") == expected

    @pytest.mark.parametrize("resource_type", ["blame", "edit", "plain"])
    def test_unsupported(self, resource_type: str) -> None:
        with pytest.raises(UnsupportedResourceTypeError):
            CgitBuilder().build(self.REMOTE, resource_type, "master", "README")


@pytest.mark.unit
class TestSourceHutBuilder:
    """Tests for SourceHutBuilder."""

    REMOTE = "https://git.sr.ht/~octo/cat"

    @pytest.mark.parametrize(
        "resource_type,expected",
        [
            ("log", "https://git.sr.ht/~octo/cat/log/master/item/a/b.py"),
            ("tree", "https://git.sr.ht/~octo/cat/tree/master/item/a/b.py"),
            ("blob", "https://git.sr.ht/~octo/cat/blob/master/a/b.py"),
            ("blame", "https://git.sr.ht/~octo/cat/blame/master/item/a/b.py"),
        ],
    )
    def test_build(self, resource_type: str, expected: str) -> None:
        assert SourceHutBuilder().build(self.REMOTE, resource_type, "master", "a/b.py") == expected

    def test_edit_unsupported(self) -> None:
        with pytest.raises(UnsupportedResourceTypeError) as exc_info:
            SourceHutBuilder().build(self.REMOTE, "edit", "master", "a/b.py")
        assert exc_info.value.forge == "sourcehut"
        assert exc_info.value.resource_type == "edit"


@pytest.mark.unit
class TestBuilderCommon:
    """Behavior shared by all builders."""

    def test_empty_branch_skipped(self) -> None:
        url = GitHubBuilder().build("git@github.com:octo/cat.git", "log", "", "README.md")
        assert url == "https://github.com/octo/cat/commits/README.md"

    def test_empty_path_skipped(self) -> None:
        url = GitLabBuilder().build("git@gitlab.com:octo/cat.git", "tree", "main", "")
        assert url == "https://gitlab.com/octo/cat/-/blob/main"

    @pytest.mark.parametrize("family", sorted(BUILDERS))
    def test_repeatable(self, family: str) -> None:
        builder = get_builder(family)
        resource_type = builder.supported_types[0]
        first = builder.build("git@example.org:octo/cat.git", resource_type, "main", "a.txt")
        second = builder.build("git@example.org:octo/cat.git", resource_type, "main", "a.txt")
        assert first == second

    def test_supports(self) -> None:
        assert GitHubBuilder().supports("edit")
        assert not SourceHutBuilder().supports(ResourceType.EDIT)

    def test_get_builder_unknown(self) -> None:
        with pytest.raises(ValueError, match="bitbucket"):
            get_builder("bitbucket")

    def test_get_builder_case_insensitive(self) -> None:
        assert isinstance(get_builder("GitLab"), GitLabBuilder)
