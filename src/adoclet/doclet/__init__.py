"""Reference driver: doc comment extraction and per-comment rendering."""

from adoclet.doclet.comments import (
    DocComment,
    extract_doc_comments,
    split_comment,
    strip_comment_markers,
)

__all__ = [
    "DocComment",
    "extract_doc_comments",
    "split_comment",
    "strip_comment_markers",
]
