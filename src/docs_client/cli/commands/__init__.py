"""CLI commands for docs-client."""

from docs_client.cli.commands import document, tree

__all__ = ["document", "tree"]
