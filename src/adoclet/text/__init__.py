"""Text transformations applied around the markup engine.

- Escaping of annotation-like tokens before the host parses tags
- Ordered sanitizer steps undoing host comment artifacts
"""

from adoclet.text.escape import (
    LITERAL_AT,
    escape_tag_like_tokens,
    looks_like_annotation,
)
from adoclet.text.sanitize import (
    AT_ENTITY,
    SANITIZE_STEPS,
    join_continuation_lines,
    replace_at_token,
    replace_slash_token,
    restore_comment_terminator,
    sanitize,
    trim,
    unwrap_literals,
)

__all__ = [
    # Escaping
    "LITERAL_AT",
    "escape_tag_like_tokens",
    "looks_like_annotation",
    # Sanitizing
    "AT_ENTITY",
    "SANITIZE_STEPS",
    "sanitize",
    "trim",
    "join_continuation_lines",
    "replace_at_token",
    "replace_slash_token",
    "restore_comment_terminator",
    "unwrap_literals",
]
