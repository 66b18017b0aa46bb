"""Rich display utilities for the adoclet CLI."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adoclet.doclet.driver import RenderedComment
from adoclet.engine.protocols import AttributeTable

console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]✓[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]✗[/] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]⚠[/] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[bold blue]ℹ[/] {message}")


def format_attribute_value(value: str | bool) -> str:
    if value is True:
        return "(set)"
    if value is False:
        return "(unset)"
    return repr(value)


def print_attribute_table(attributes: AttributeTable) -> None:
    """Print the effective attribute table."""
    table = Table(title="Attributes")
    table.add_column("Name", style="cyan")
    table.add_column("Value")

    for name, value in attributes.items():
        table.add_row(escape(name), escape(format_attribute_value(value)))

    console.print(table)


def print_rendered_comments(results: list[RenderedComment]) -> None:
    """Print one panel per rendered comment."""
    if not results:
        print_info("No doc comments found")
        return

    for result in results:
        title = f"[bold]line {result.line}[/] [dim]{escape(result.symbol)}[/]"
        if result.ok:
            console.print(Panel(Text(result.html), title=title, border_style="green"))
        else:
            console.print(Panel(f"[red]{escape(result.error or '')}[/]", title=title, border_style="red"))
