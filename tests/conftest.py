"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest

from forgelink.config.settings import get_settings
from forgelink.forges.registry import ForgeRegistry


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from FORGELINK_* variables and cached settings."""
    monkeypatch.delenv("FORGELINK_FORGES", raising=False)
    monkeypatch.delenv("FORGELINK_DEFAULT_REMOTE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry() -> ForgeRegistry:
    """The default forge registry."""
    return ForgeRegistry.default()


def _git(repo_path: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo_path, capture_output=True, check=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository tracking origin/main."""
    repo_path = tmp_path / "cat"
    repo_path.mkdir()

    _git(repo_path, "init")
    _git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo_path, "config", "user.email", "test@test.com")
    _git(repo_path, "config", "user.name", "Test")

    (repo_path / "src").mkdir()
    (repo_path / "src" / "main.c").write_text("int main(void) { return 0; }\n")
    (repo_path / "README.md").write_text("# cat\n")

    _git(repo_path, "add", ".")
    _git(repo_path, "commit", "-m", "Initial commit")

    _git(repo_path, "remote", "add", "origin", "git@github.com:octo/cat.git")
    _git(repo_path, "config", "branch.main.remote", "origin")
    _git(repo_path, "config", "branch.main.merge", "refs/heads/main")

    return repo_path
