"""labelforge CLI - browse and register label templates."""

from datetime import UTC, datetime
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from labelforge import __version__
from labelforge.config import settings
from labelforge.templates.files import read_templates_from_file
from labelforge.templates.registry import NoTemplatesError, TemplateRegistry, get_registry

app = typer.Typer(
    name="labelforge",
    help="Label and card template registry with sheet geometry",
    no_args_is_help=True,
)
console = Console()


def _load_registry() -> TemplateRegistry:
    """Return the shared registry, exiting if no templates can be found."""
    registry = get_registry()
    try:
        registry.ensure_initialized()
    except NoTemplatesError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    return registry


@app.command("list")
def list_templates(
    page_size: Annotated[
        str | None,
        typer.Option("--page-size", "-p", help="Only templates for this page size"),
    ] = None,
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Only templates in this category"),
    ] = None,
    all_names: Annotated[
        bool, typer.Option("--all", "-a", help="Include every alias, not just primary names")
    ] = False,
):
    """List known template names."""
    registry = _load_registry()
    page_size = page_size or settings.default_page_size

    if all_names:
        names = registry.list_names_all(page_size, category)
    else:
        names = registry.list_names_unique(page_size, category)

    if not names:
        console.print("[yellow]No templates match.[/yellow]")
        return

    for name in names:
        console.print(f"  {name}")
    console.print(f"\n[dim]{len(names)} template name(s)[/dim]")


@app.command()
def show(
    name: Annotated[str, typer.Argument(help="Template name or alias")],
    strict: Annotated[
        bool, typer.Option("--strict", help="Fail instead of showing the default template")
    ] = False,
):
    """Show a template and the position of every label on the sheet."""
    registry = _load_registry()
    result = registry.lookup(name)

    if not result.exact:
        console.print(f"[yellow]No template named '{name}'.[/yellow]")
        if strict:
            raise typer.Exit(1)
        console.print("[dim]Showing the default template instead.[/dim]\n")

    template = result.template
    page_w, page_h = template.page_dimensions(registry.papers)

    console.print(Panel(f"[green]Template:[/green] {template.name}"))
    console.print(f"[dim]Description:[/dim] {template.description}")
    console.print(f"[dim]Page size:[/dim] {template.page_size} ({page_w:.2f} x {page_h:.2f} pt)")
    if len(template.aliases) > 1:
        console.print(f"[dim]Aliases:[/dim] {', '.join(template.aliases[1:])}")
    if template.categories:
        console.print(f"[dim]Categories:[/dim] {', '.join(template.categories)}")
    console.print()

    frame = template.first_frame
    if frame is None:
        console.print("[yellow]Template has no frame.[/yellow]")
        return

    w, h = frame.size()
    console.print(f"[bold]Frame:[/bold] {frame.shape} {w:.2f} x {h:.2f} pt")
    console.print(f"[bold]Labels per sheet:[/bold] {frame.label_count()}\n")

    table = Table(title="Label Origins", show_header=True)
    table.add_column("#", justify="right")
    table.add_column("x (pt)", justify="right")
    table.add_column("y (pt)", justify="right")
    for i, origin in enumerate(frame.origins(), 1):
        table.add_row(str(i), f"{origin.x:.2f}", f"{origin.y:.2f}")
    console.print(table)


@app.command()
def papers():
    """List known page sizes."""
    registry = get_registry()

    table = Table(title="Page Sizes", show_header=True)
    table.add_column("Id", style="bold")
    table.add_column("Name")
    table.add_column("Width (pt)", justify="right")
    table.add_column("Height (pt)", justify="right")

    for page_size in registry.papers.id_list():
        paper = registry.papers.lookup(page_size)
        if registry.papers.is_other(page_size):
            table.add_row(paper.id, paper.name, "[dim]custom[/dim]", "[dim]custom[/dim]")
        else:
            table.add_row(paper.id, paper.name, f"{paper.width:.2f}", f"{paper.height:.2f}")

    console.print(table)


@app.command()
def register(
    file: Annotated[Path, typer.Argument(help="Template file to register")],
    debug: Annotated[
        bool, typer.Option("--debug", help="Save registry event log JSON to the user directory")
    ] = False,
):
    """Register the templates in a file as user templates."""
    if not file.exists():
        console.print(f"[red]File not found:[/red] {file}")
        raise typer.Exit(1)

    templates = read_templates_from_file(file)
    if not templates:
        console.print(f"[red]No templates could be read from[/red] {file}")
        raise typer.Exit(1)

    registry = get_registry()
    registry_logger = None
    if debug:
        from labelforge.core.logging import RegistryLogger

        registry_logger = RegistryLogger(name="register")
        registry.logger = registry_logger

    try:
        for template in templates:
            if registry.register(template):
                console.print(f"  [green]✓[/green] Registered {template.name}")
            else:
                console.print(f"  [yellow]○[/yellow] Skipped {template.name}")
    except NoTemplatesError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    finally:
        if registry_logger is not None:
            registry.logger = None
            timestamp = datetime.now(tz=UTC).strftime("%Y%m%d_%H%M%S")
            log_path = registry.user_dir / "logs" / f"register_{timestamp}.json"
            registry_logger.save(log_path)
            console.print(f"\n[dim]Debug log: {log_path}[/dim]")


@app.command()
def version():
    """Show version information."""
    console.print(f"labelforge v{__version__}")


if __name__ == "__main__":
    app()
