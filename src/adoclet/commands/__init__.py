"""adoclet CLI commands.

Each command module contains the business logic for a CLI command.
The cli.py module handles typer decorators and argument parsing,
then delegates to these command functions.
"""

from adoclet.commands.attributes import attributes_command
from adoclet.commands.render import render_command

__all__ = [
    "attributes_command",
    "render_command",
]
