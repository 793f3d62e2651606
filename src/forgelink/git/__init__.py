"""Git integration module for forgelink."""

from forgelink.git.scanner import GitRepoScanner

__all__ = ["GitRepoScanner"]
