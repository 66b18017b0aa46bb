"""Pydantic models for documentation blocks handed over by a driver."""

from pydantic import BaseModel, ConfigDict, Field


class Tag(BaseModel):
    """A block tag attached to a documentation comment.

    `name` is written back verbatim, so drivers that need the result to be
    re-parsed by the host tool keep the leading `@` (e.g. `@param`).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    text: str = ""


class DocumentationBlock(BaseModel):
    """A symbol's description plus its ordered block tags."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    tags: list[Tag] = Field(default_factory=list)
