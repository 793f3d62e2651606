"""Remote models."""

from pydantic import BaseModel, ConfigDict


class Remote(BaseModel):
    """A parsed repository remote.

    Built from the raw string configured in version control, e.g.
    ``git@github.com:octo/cat.git`` or ``https://github.com/octo/cat``.
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    host: str
    repo_slug: str  # owner/repo, without .git

    @property
    def origin(self) -> str:
        return f"https://{self.host}"

    @property
    def url(self) -> str:
        return f"{self.origin}/{self.repo_slug}"
