"""Document commands: show, archive and restore single files."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from docs_client.cli.app import RootOption, app
from docs_client.client import DocsClient
from docs_client.entities import IndexEntity, MdEntity
from docs_client.exceptions import DocsClientError
from docs_client.references.base import BaseFileReference
from docs_client.storage.local import LocalStorage

console = Console()

FileArgument = Annotated[str, typer.Argument(help="File path relative to the root")]


def _reference(ctx: typer.Context, root: Path, path: str) -> BaseFileReference:
    return DocsClient(LocalStorage(root), ctx.obj).file(path)


def _fail(error: DocsClientError) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


@app.command()
def show(ctx: typer.Context, path: FileArgument, root: RootOption = Path(".")) -> None:
    """Show the title, description and front matter of a document."""
    document = asyncio.run(_reference(ctx, root, path).read())
    if isinstance(document, DocsClientError):
        _fail(document)

    table = Table(title=document.path.path)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("type", document.type)
    table.add_row("archived", str(document.is_archived))

    if isinstance(document, (MdEntity, IndexEntity)):
        table.add_row("title", document.content.title or "")
        table.add_row("description", document.content.description or "")
    if isinstance(document, MdEntity):
        for key, value in document.content.meta.to_dict().items():
            table.add_row(key, str(value))
    elif isinstance(document, IndexEntity):
        table.add_row("icon", document.content.meta.icon or "")
        table.add_row("schema", ", ".join(document.content.meta.index_schema.field_names))

    console.print(table)


@app.command()
def archive(ctx: typer.Context, path: FileArgument, root: RootOption = Path(".")) -> None:
    """Move a file into its directory's archive."""
    result = asyncio.run(_reference(ctx, root, path).archive())
    if isinstance(result, DocsClientError):
        _fail(result)
    console.print(f"[green]Archived[/green] {path} -> {result.path}")


@app.command()
def restore(ctx: typer.Context, path: FileArgument, root: RootOption = Path(".")) -> None:
    """Move an archived file back next to its siblings."""
    try:
        result = asyncio.run(_reference(ctx, root, path).restore())
    except DocsClientError as e:
        _fail(e)
    if isinstance(result, DocsClientError):
        _fail(result)
    console.print(f"[green]Restored[/green] {path} -> {result.path}")
