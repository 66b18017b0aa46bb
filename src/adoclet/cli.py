"""adoclet CLI - Main entry point.

Commands:
- render: Render the doc comments of a source file
- attributes: Show the effective attribute table
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from adoclet import __version__
from adoclet.commands import attributes_command, render_command
from adoclet.display import console

app = typer.Typer(
    help="adoclet - AsciiDoc doc comments rendered to HTML.",
    no_args_is_help=True,
)

AttributeOption = Annotated[
    Optional[list[str]],
    typer.Option("--attribute", "-a", help="Attribute override (name, name=value or name!)"),
]
AttributesFileOption = Annotated[
    Optional[Path],
    typer.Option("--attributes-file", help="AsciiDoc file with attribute entries"),
]
ProjectOption = Annotated[
    Optional[Path],
    typer.Option("--project", "-p", help="Directory containing adoclet.yaml (default: cwd)"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"adoclet {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Enable debug logging.")
    ] = False,
) -> None:
    """adoclet - AsciiDoc doc comments rendered to HTML."""
    configure_logging(verbose)


@app.command()
def render(
    path: Annotated[
        Path,
        typer.Argument(help="Source file with /** */ doc comments", exists=True, dir_okay=False),
    ],
    attribute: AttributeOption = None,
    attributes_file: AttributesFileOption = None,
    project: ProjectOption = None,
    base_dir: Annotated[
        Optional[Path],
        typer.Option("--base-dir", "-B", help="Base directory for include directives"),
    ] = None,
    timeout: Annotated[
        Optional[float],
        typer.Option("--timeout", help="Time limit in seconds for each render call"),
    ] = None,
    templates: Annotated[
        Optional[bool],
        typer.Option("--templates/--no-templates", help="Use the bundled output templates"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write results as JSON instead of printing"),
    ] = None,
    keep_going: Annotated[
        bool, typer.Option("--keep-going", help="Continue after a comment fails to render")
    ] = False,
) -> None:
    """Render the doc comments of a source file.

    Examples:
        adoclet render Foo.java
        adoclet render Foo.java -a toc -a project=demo
        adoclet render Foo.java --no-templates -o foo.json
    """
    render_command(
        path,
        project_root=project,
        attributes=attribute,
        base_dir=base_dir,
        attributes_file=attributes_file,
        timeout_seconds=timeout,
        templates=templates,
        output=output,
        keep_going=keep_going,
    )


@app.command()
def attributes(
    attribute: AttributeOption = None,
    attributes_file: AttributesFileOption = None,
    project: ProjectOption = None,
) -> None:
    """Show the attribute table passed to asciidoctor.

    Examples:
        adoclet attributes
        adoclet attributes -a source-highlighter=rouge
    """
    attributes_command(project, attribute, attributes_file)


if __name__ == "__main__":
    app()
