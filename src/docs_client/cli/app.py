from pathlib import Path
from typing import Annotated, Optional

import typer

from docs_client.config import ConfigManager, DocsClientConfig, init_logging

app = typer.Typer(name="docs-client", help="Browse and manage a directory of Markdown documents")

RootOption = Annotated[
    Path,
    typer.Option("--root", "-r", help="Directory that holds the documents", file_okay=False),
]


def load_config(config_file: Optional[Path] = None) -> DocsClientConfig:
    return ConfigManager(config_file).load_config()


@app.callback()
def app_callback(
    ctx: typer.Context,
    config_file: Annotated[
        Optional[Path], typer.Option("--config", help="Path to a docs-client.json file")
    ] = None,
) -> None:
    """Load configuration and set up logging before any command runs."""
    config = load_config(config_file)
    init_logging(config)
    ctx.obj = config
