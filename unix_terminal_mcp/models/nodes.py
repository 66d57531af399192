from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class FileNode(BaseModel):
    """A regular file held entirely in memory."""

    model_config = ConfigDict(frozen=True)

    type: Literal["file"] = "file"
    content: str = ""
    permissions: str | None = None
    owner: str | None = None
    group: str | None = None
    size: int | None = None


class DirectoryNode(BaseModel):
    """A directory; children are keyed by entry name."""

    model_config = ConfigDict(frozen=True)

    type: Literal["directory"] = "directory"
    children: dict[str, "Node"] = Field(default_factory=dict)
    permissions: str | None = None
    owner: str | None = None
    group: str | None = None
    size: int | None = None


Node = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="type")]

DirectoryNode.model_rebuild()
