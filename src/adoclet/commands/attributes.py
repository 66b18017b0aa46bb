"""Attributes command implementation."""

from pathlib import Path

from adoclet.config import load_doclet_config, merge_cli_overrides
from adoclet.display import print_attribute_table, print_error
from adoclet.engine.options import build_attributes
from adoclet.exceptions import ConfigurationError


def attributes_command(
    project_root: Path | None,
    attributes: list[str] | None,
    attributes_file: Path | None,
) -> None:
    """Show the attribute table a render run would use.

    This function contains the business logic for the attributes command.
    """
    try:
        config = load_doclet_config(project_root)
        config = merge_cli_overrides(
            config, attributes=attributes, attributes_file=attributes_file
        )
        table = build_attributes(config.attribute_tokens())
    except ConfigurationError as e:
        print_error(e.message)
        raise SystemExit(1) from e

    print_attribute_table(table)
