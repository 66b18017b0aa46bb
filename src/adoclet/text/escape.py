"""Escaping of annotation-like tokens in raw comment text."""

import re
import string

LITERAL_AT = "{@literal @}"

_AT_SIGN = re.compile(r"@(?=(.))", re.DOTALL)


def looks_like_annotation(char: str) -> bool:
    """Return True if an `@` followed by `char` should be protected.

    Block tag names in the host format start with a lowercase letter, so an
    uppercase letter after `@` is taken to be an annotation (`@Override`).
    This is a heuristic: a custom tag whose name starts with an uppercase
    letter is escaped too, and is then no longer recognized as a tag.
    """
    return char in string.ascii_uppercase


def escape_tag_like_tokens(raw: str) -> str:
    """Hide annotation-like tokens from the host tag parser.

    `@Override` becomes `{@literal @}Override`. The wrapper is removed
    again by `adoclet.text.sanitize.unwrap_literals`, so the token reaches
    the output unchanged. `@param` and other lowercase tokens are untouched.
    """

    def _replace(match: re.Match[str]) -> str:
        if looks_like_annotation(match.group(1)):
            return LITERAL_AT
        return match.group(0)

    return _AT_SIGN.sub(_replace, raw)
