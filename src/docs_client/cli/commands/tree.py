"""Tree command: print the document tree of a directory."""

import asyncio
from pathlib import Path
from typing import Annotated, List

import typer
from rich.console import Console
from rich.tree import Tree

from docs_client.cli.app import RootOption, app
from docs_client.exceptions import DocsClientError
from docs_client.storage.local import LocalStorage
from docs_client.tree.file_tree import FileTreeBuilder
from docs_client.values.tree import TreeDirectoryNode, TreeNode

console = Console()


def _add_nodes(branch: Tree, nodes: List[TreeNode]) -> None:
    for node in nodes:
        label = f"{node.icon} {node.title}"
        if node.title != node.name:
            label += f" [dim]({node.name})[/dim]"
        child = branch.add(label)
        if isinstance(node, TreeDirectoryNode):
            _add_nodes(child, node.children)


@app.command()
def tree(
    ctx: typer.Context,
    directory: Annotated[str, typer.Argument(help="Directory relative to the root")] = "",
    root: RootOption = Path("."),
    dirs_only: Annotated[bool, typer.Option("--dirs-only", help="Show directories only")] = False,
) -> None:
    """Show the file tree below DIRECTORY."""
    builder = FileTreeBuilder(LocalStorage(root), ctx.obj)
    if dirs_only:
        result = asyncio.run(builder.build_directory_tree(directory))
    else:
        result = asyncio.run(builder.build_file_tree(directory))

    if isinstance(result, DocsClientError):
        typer.echo(f"Error: {result}", err=True)
        raise typer.Exit(1)

    branch = Tree(f"[bold]{directory or str(root)}[/bold]")
    _add_nodes(branch, list(result))
    console.print(branch)
