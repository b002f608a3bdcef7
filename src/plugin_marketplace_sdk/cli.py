"""plugin-marketplace: validate, list, search and render marketplace manifests."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .catalog import Catalog
from .config import Settings
from .errors import FetchError, LoadError, PluginNotFoundError
from .fetchers import fetch_marketplace, fetch_plugin, open_marketplace
from .loaders.marketplace import resolve_marketplace_file
from .render import (
    describe_source,
    marketplace_json_schema,
    plugin_json_schema,
    render_marketplace,
    render_plugin,
)
from .validation import (
    ValidationResult,
    validate_marketplace_dir,
    validate_marketplace_file,
    validate_plugin_dir,
    validate_plugin_file,
)

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="plugin-marketplace",
    help="Validate, list, search and render plugin marketplace manifests",
    add_completion=False,
    no_args_is_help=True,
)


class SchemaKind(str, Enum):
    marketplace = "marketplace"
    plugin = "plugin"


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Validate, list, search and render plugin marketplace manifests."""
    settings = Settings.from_env()
    level = "DEBUG" if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def validate(
    path: Path = typer.Argument(..., help="marketplace.json, plugin.json, or a directory"),
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as errors"),
):
    """Validate a marketplace or plugin and report every issue found."""
    result = _validate_path(path)
    if not result.issues:
        console.print(f"[green]✓[/green] {path} is valid")
        return

    table = Table(title=f"Validation issues for {path}", header_style="bold cyan")
    table.add_column("Level")
    table.add_column("Path", style="dim")
    table.add_column("Message")
    for issue in result.issues:
        style = "red" if issue.level == "error" else "yellow"
        level = f"[{style}]{issue.level}[/{style}]"
        table.add_row(level, escape(issue.path), escape(issue.message))
    console.print(table)
    console.print(f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)")

    if not result.valid or (strict and result.warnings):
        raise typer.Exit(1)


@app.command("list")
def list_plugins(
    source: str = typer.Argument(..., help="Path, git URL, owner/repo, or marketplace.json URL"),
    show_all: bool = typer.Option(False, "--all", help="Include disabled plugins"),
):
    """List the plugins a marketplace offers."""
    manifest = _run(lambda: fetch_marketplace(source))
    catalog = Catalog.from_manifest(manifest, include_disabled=show_all)

    table = Table(title=manifest.name, header_style="bold cyan")
    table.add_column("Plugin", style="cyan")
    table.add_column("Description")
    table.add_column("Source", style="dim")
    for entry in catalog.entries():
        name = escape(entry.name)
        if not entry.enabled:
            name += " [dim](disabled)[/dim]"
        source_text = escape(describe_source(entry.source))
        table.add_row(name, escape(entry.description or ""), source_text)
    console.print(table)


@app.command()
def search(
    source: str = typer.Argument(..., help="Path, git URL, owner/repo, or marketplace.json URL"),
    query: str = typer.Argument(..., help="Free-text query"),
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Maximum results"),
):
    """Search a marketplace's plugins by name, description and tags."""
    manifest = _run(lambda: fetch_marketplace(source))
    matches = Catalog.from_manifest(manifest).search(query, limit=limit)
    if not matches:
        console.print(f"[yellow]No plugins match {query!r}[/yellow]")
        return
    for match in matches:
        desc = escape(match.plugin.description or "")
        name = escape(match.plugin.name)
        console.print(f"[cyan]{name}[/cyan] [dim]{match.score:.2f}[/dim]  {desc}")


@app.command()
def render(
    source: str = typer.Argument(..., help="Path, git URL, owner/repo, or marketplace.json URL"),
    show_all: bool = typer.Option(False, "--all", help="Include disabled plugins"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to this file"),
):
    """Render a marketplace as markdown."""
    manifest = _run(lambda: fetch_marketplace(source))
    text = render_marketplace(manifest, include_disabled=show_all)
    if output is None:
        typer.echo(text, nl=False)
        return
    output.write_text(text, encoding="utf-8")
    console.print(f"[green]✓[/green] Wrote {output}")


@app.command()
def inspect(
    source: str = typer.Argument(..., help="Path, git URL, or owner/repo of the marketplace"),
    plugin: str = typer.Argument(..., help="Plugin name as listed in the marketplace"),
):
    """Resolve one plugin's source and render what it contains."""

    def _load():
        with open_marketplace(source) as (manifest, root):
            entry = manifest.get_plugin(plugin)
            if root is None:
                root = Path.cwd()
                logger.warning("Marketplace has no local root; resolving against %s", root)
            return fetch_plugin(entry, root)

    typer.echo(render_plugin(_run(_load)), nl=False)


@app.command()
def schema(kind: SchemaKind = typer.Argument(..., help="Which manifest schema to print")):
    """Print the JSON Schema for marketplace.json or plugin.json."""
    data = marketplace_json_schema() if kind is SchemaKind.marketplace else plugin_json_schema()
    typer.echo(json.dumps(data, indent=2))


# --- internal helpers ---


def _validate_path(path: Path) -> ValidationResult:
    if path.is_dir():
        try:
            resolve_marketplace_file(path)
        except LoadError:
            return validate_plugin_dir(path)
        return validate_marketplace_dir(path)
    if "marketplace" in path.name:
        return validate_marketplace_file(path)
    return validate_plugin_file(path)


def _run(fn):
    """Call fn, turning library errors into a message and exit code 1."""
    try:
        return fn()
    except (LoadError, FetchError, PluginNotFoundError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except ValidationError as e:
        err_console.print(f"[red]Invalid manifest:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


def main() -> None:
    app()


if __name__ == "__main__":
    main()
