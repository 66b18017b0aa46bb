"""Cleanup of comment text before it reaches the markup engine.

The host comment parser leaves a few artifacts behind (re-indentation
spaces, placeholder tokens for characters that cannot appear in a comment
body, literal wrappers added by the escaper). Each artifact is undone by a
small named step; `sanitize` runs them in the order of SANITIZE_STEPS.

The order is part of the contract: placeholder replacement must run after
continuation spaces are removed, and literal wrappers are unwrapped last.
"""

import re
from collections.abc import Callable

AT_ENTITY = "&#64;"

# Space and the C0 control characters; Unicode spaces such as U+00A0 are content.
_TRIM_CHARS = "".join(chr(code) for code in range(0x21))

_COMMENT_TERMINATOR = re.compile(r"^( *)\*\\/$", re.MULTILINE)
_LITERAL_WRAPPER = re.compile(r"\{@literal (.*?)\}")


def trim(text: str) -> str:
    """Strip leading and trailing characters up to and including space."""
    return text.strip(_TRIM_CHARS)


def join_continuation_lines(text: str) -> str:
    """Remove the single space the host leaves after each newline.

    Only one space is removed; deeper indentation keeps its extra spaces.
    """
    return text.replace("\n ", "\n")


def replace_at_token(text: str) -> str:
    """`{at}` is translated into the HTML entity for @."""
    return text.replace("{at}", AT_ENTITY)


def replace_slash_token(text: str) -> str:
    """`{slash}` is translated into /."""
    return text.replace("{slash}", "/")


def restore_comment_terminator(text: str) -> str:
    r"""A line holding only `*\/` (after indentation) becomes `*/`."""
    return _COMMENT_TERMINATOR.sub(r"\1*/", text)


def unwrap_literals(text: str) -> str:
    """`{@literal X}` is translated into X.

    Each wrapper is matched non-greedily. An unterminated wrapper is left
    untouched.
    """
    return _LITERAL_WRAPPER.sub(r"\1", text)


SANITIZE_STEPS: tuple[Callable[[str], str], ...] = (
    trim,
    join_continuation_lines,
    replace_at_token,
    replace_slash_token,
    restore_comment_terminator,
    unwrap_literals,
)


def sanitize(text: str) -> str:
    """Apply every sanitizer step in order.

    Args:
        text: Comment text as returned by the host parser

    Returns:
        AsciiDoc source ready for the markup engine
    """
    for step in SANITIZE_STEPS:
        text = step(text)
    return text
