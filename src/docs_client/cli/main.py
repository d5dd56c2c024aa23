"""Main CLI entry point for docs-client."""

from docs_client.cli.app import app

# Register commands
from docs_client.cli.commands import document, tree  # noqa: F401  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    app()
