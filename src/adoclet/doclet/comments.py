"""Extraction and splitting of doc comments.

Mirrors what the javadoc tool does with a `/** ... */` comment: leading
whitespace and asterisks are stripped from every line after the first (the
space following the asterisk stays, which is the continuation artifact the
sanitizer removes), and block tags start at the beginning of a line.
"""

import re

from pydantic import BaseModel, ConfigDict

from adoclet.models import DocumentationBlock, Tag

_DOC_COMMENT = re.compile(r"/\*\*(?!/)(.*?)\*/", re.DOTALL)
_BLOCK_TAG = re.compile(r"^[ \t]*@([A-Za-z][\w.:-]*)(?:[ \t]+|$)")


class DocComment(BaseModel):
    """A doc comment found in a source file."""

    model_config = ConfigDict(frozen=True)

    line: int
    symbol: str = ""
    raw: str


def strip_comment_markers(body: str) -> str:
    """Strip the leading ` *` decoration from a comment body.

    The body is the text between `/**` and `*/`.
    """
    lines = body.split("\n")
    stripped = [lines[0]]
    for line in lines[1:]:
        stripped.append(line.lstrip().lstrip("*"))
    return "\n".join(stripped)


def _following_symbol(source: str, position: int) -> str:
    """Return the first non-blank line after `position`, stripped."""
    for line in source[position:].split("\n"):
        if line.strip():
            return line.strip()
    return ""


def extract_doc_comments(source: str) -> list[DocComment]:
    """Find every doc comment in `source`, in order of appearance.

    Returns:
        DocComment list with 1-based start lines and the raw comment text
    """
    comments = []
    for match in _DOC_COMMENT.finditer(source):
        comments.append(
            DocComment(
                line=source.count("\n", 0, match.start()) + 1,
                symbol=_following_symbol(source, match.end()),
                raw=strip_comment_markers(match.group(1)),
            )
        )
    return comments


def split_comment(raw: str) -> DocumentationBlock:
    """Split a raw comment into its description and block tags.

    A tag runs from its `@name` to the next tag or the end of the comment.
    Tag names keep their `@` so the rendered buffer can be parsed again.
    """
    description: list[str] = []
    tags: list[Tag] = []
    current_name: str | None = None
    current_lines: list[str] = []

    for line in raw.split("\n"):
        match = _BLOCK_TAG.match(line)
        if match:
            if current_name is not None:
                tags.append(Tag(name=current_name, text="\n".join(current_lines).rstrip()))
            current_name = "@" + match.group(1)
            current_lines = [line[match.end():]]
        elif current_name is not None:
            current_lines.append(line)
        else:
            description.append(line)

    if current_name is not None:
        tags.append(Tag(name=current_name, text="\n".join(current_lines).rstrip()))

    return DocumentationBlock(description="\n".join(description).rstrip(), tags=tags)
