"""Git checkout queries using subprocess."""

import subprocess
from pathlib import Path

import structlog

from forgelink.core.exceptions import RepositoryError
from forgelink.core.models import ResourceLocator

logger = structlog.get_logger(__name__)

HEADS_PREFIX = "refs/heads/"


class GitRepoScanner:
    """Reads the remote, upstream branch and file paths of a checkout.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(self, path: str | Path, default_remote: str = "origin") -> None:
        path = Path(path).resolve()
        self._cwd = path if path.is_dir() else path.parent
        self._default_remote = default_remote
        self._root: Path | None = None

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        result = subprocess.run(
            ["git", *args],
            cwd=self._cwd,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def _config(self, key: str) -> str | None:
        try:
            value = self._run_git("config", "--get", key)
        except subprocess.CalledProcessError:
            return None
        return value or None

    def is_git_repo(self) -> bool:
        """Check if the path is inside a git working tree."""
        try:
            self._run_git("rev-parse", "--git-dir")
            return True
        except (subprocess.CalledProcessError, FileNotFoundError):
            return False

    @property
    def repo_root(self) -> Path:
        """Top-level directory of the working tree."""
        if self._root is None:
            try:
                self._root = Path(self._run_git("rev-parse", "--show-toplevel")).resolve()
            except (subprocess.CalledProcessError, FileNotFoundError) as e:
                raise RepositoryError(f"Not a git repository: {self._cwd}") from e
        return self._root

    def get_current_branch(self) -> str | None:
        """Get the current branch name, or None when HEAD is detached."""
        try:
            branch = self._run_git("symbolic-ref", "--quiet", "--short", "HEAD")
        except subprocess.CalledProcessError:
            return None
        return branch or None

    def get_remote_name(self) -> str:
        """Remote of the current branch's upstream, else the default remote."""
        branch = self.get_current_branch()
        if branch:
            remote = self._config(f"branch.{branch}.remote")
            if remote and remote != ".":
                return remote
        return self._default_remote

    def get_remote_url(self, name: str | None = None) -> str | None:
        """Get the URL of a remote, if available."""
        name = name or self.get_remote_name()
        try:
            url = self._run_git("remote", "get-url", name)
        except subprocess.CalledProcessError:
            logger.debug("Remote not found", remote=name, repo=str(self._cwd))
            return None
        return url or None

    def get_upstream_branch(self) -> str:
        """Name of the upstream tracking branch on its remote.

        Returns an empty string when the current branch tracks nothing.
        """
        branch = self.get_current_branch()
        if not branch:
            return ""
        merge = self._config(f"branch.{branch}.merge")
        if not merge:
            return ""
        return merge.removeprefix(HEADS_PREFIX)

    def relative_path(self, file: str | Path) -> str:
        """Path of ``file`` relative to the repository root, POSIX separators."""
        absolute = Path(file).resolve()
        try:
            relative = absolute.relative_to(self.repo_root)
        except ValueError as e:
            raise RepositoryError(f"{absolute} is outside {self.repo_root}") from e
        return relative.as_posix().lstrip("/") if relative.parts else ""

    def locate(self, file: str | Path) -> ResourceLocator:
        """Build the locator of ``file`` on the upstream branch."""
        return ResourceLocator(
            branch=self.get_upstream_branch(),
            path=self.relative_path(file),
        )
