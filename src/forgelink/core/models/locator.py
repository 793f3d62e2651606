"""Resource models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class ResourceType(str, Enum):
    """Kind of web view requested for a file."""

    LOG = "log"
    TREE = "tree"
    BLOB = "blob"
    BLAME = "blame"
    EDIT = "edit"
    PLAIN = "plain"


class ResourceLocator(BaseModel):
    """Branch and repository-relative path of a file.

    Supplied by the host environment and interpolated into URLs verbatim.
    """

    model_config = ConfigDict(frozen=True)

    branch: str = ""
    path: str = ""

    @field_validator("path")
    @classmethod
    def _strip_leading_separator(cls, value: str) -> str:
        return value.lstrip("/")
