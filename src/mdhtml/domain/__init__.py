"""Tag model for the line tagger."""

from mdhtml.domain.models import Heading, Paragraph, TagKind, TagState, tag_name

__all__ = [
    "Heading",
    "Paragraph",
    "TagKind",
    "TagState",
    "tag_name",
]
