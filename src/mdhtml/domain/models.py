from __future__ import annotations

from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DomainModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class Paragraph(DomainModel):
    pass


class Heading(DomainModel):
    level: Annotated[int, Field(ge=1)]


TagKind = Paragraph | Heading


def tag_name(kind: TagKind) -> str:
    if isinstance(kind, Heading):
        return f"h{kind.level}"
    return "p"


class TagState(DomainModel):
    """Which element, if any, is open between two lines."""

    is_open: bool = False
    current_tag: TagKind | None = None

    @model_validator(mode="after")
    def _validate_open_tag(self) -> Self:
        if self.is_open and self.current_tag is None:
            raise ValueError("current_tag is required while a tag is open")
        if not self.is_open and self.current_tag is not None:
            raise ValueError("current_tag must be None when no tag is open")
        return self

    @classmethod
    def closed(cls) -> TagState:
        return cls()

    @classmethod
    def opened(cls, kind: TagKind) -> TagState:
        """State for resuming output that stopped inside an open `kind` element."""
        return cls(is_open=True, current_tag=kind)
