"""Assembly of the attribute table and render options.

Attributes are layered: the fixed defaults first, then user overrides in
the order given. A later write to a key replaces the earlier one, and
overrides may introduce new keys.
"""

from collections.abc import Iterable
from pathlib import Path

from adoclet.exceptions import InvalidAttributeError
from adoclet.engine.protocols import AttributeTable, AttributeValue, RenderOptions
from adoclet.text.sanitize import AT_ENTITY


def default_attributes() -> AttributeTable:
    """Return a fresh copy of the default attribute table."""
    return {
        "at": AT_ENTITY,
        "slash": "/",
        "icons": False,
        "idprefix": "",
        "javadoc": "",
        "notitle": True,
        "source-highlighter": "coderay",
        "coderay-css": "class",
    }


def parse_attribute(token: str) -> tuple[str, AttributeValue]:
    """Parse a single attribute override token.

    Accepted forms:
        name          -> flag set, no value
        name=value    -> value (split on the first `=`, may be empty)
        name! / !name -> attribute unset

    Raises:
        InvalidAttributeError: If the attribute name is empty
    """
    if "=" in token:
        key, value = token.split("=", 1)
        key = key.strip()
        if not key:
            raise InvalidAttributeError(token, "attribute name is empty")
        return key, value

    key = token.strip()
    unset = False
    if key.startswith("!"):
        key, unset = key[1:].strip(), True
    elif key.endswith("!"):
        key, unset = key[:-1].strip(), True

    if not key:
        raise InvalidAttributeError(token, "attribute name is empty")
    return key, not unset


def build_attributes(overrides: Iterable[str] = ()) -> AttributeTable:
    """Apply override tokens, in order, on top of the defaults."""
    attributes = default_attributes()
    for token in overrides:
        key, value = parse_attribute(token)
        attributes[key] = value
    return attributes


def build_options(
    base_dir: Path | None = None,
    template_dir: Path | None = None,
    attribute_overrides: Iterable[str] = (),
) -> RenderOptions:
    """Build the render options shared by every render call of a run.

    The safety level, backend and template engine are fixed; no argument
    can change them.

    Args:
        base_dir: Directory for resolving include directives, if any
        template_dir: Directory of custom output templates, if any
        attribute_overrides: Ordered `name` / `name=value` tokens

    Returns:
        RenderOptions in block mode

    Raises:
        InvalidAttributeError: If an override token is malformed
    """
    return RenderOptions(
        base_dir=base_dir,
        template_dir=template_dir,
        attributes=build_attributes(attribute_overrides),
    )
