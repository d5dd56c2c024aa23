"""Tests for the docs-client command line."""

import pytest
from loguru import logger
from typer.testing import CliRunner

from docs_client.cli.main import app as cli_app

runner = CliRunner()


@pytest.fixture(autouse=True)
def detach_logging():
    """The CLI binds a loguru sink to the runner's stderr, which closes after each invoke."""
    yield
    logger.remove()


@pytest.fixture
def root(local_storage, tmp_path):
    return tmp_path


def test_tree(root):
    result = runner.invoke(cli_app, ["tree", "docs", "--root", str(root)])
    assert result.exit_code == 0, result.output
    assert "Guide" in result.output
    assert "Getting Started" in result.output
    assert "Alice Smith" in result.output


def test_tree_dirs_only(root):
    result = runner.invoke(cli_app, ["tree", "--root", str(root), "--dirs-only"])
    assert result.exit_code == 0, result.output
    assert "Documentation" in result.output
    assert "Getting Started" not in result.output


def test_tree_missing_directory(root):
    result = runner.invoke(cli_app, ["tree", "missing", "--root", str(root)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_show_markdown(root):
    result = runner.invoke(cli_app, ["show", "docs/guide/getting-started.md", "-r", str(root)])
    assert result.exit_code == 0, result.output
    assert "Getting Started" in result.output
    assert "beginner" in result.output


def test_show_index(root):
    result = runner.invoke(cli_app, ["show", "docs/guide/index.md", "-r", str(root)])
    assert result.exit_code == 0, result.output
    assert "🧭" in result.output
    assert "level" in result.output


def test_show_missing(root):
    result = runner.invoke(cli_app, ["show", "docs/nope.md", "-r", str(root)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_archive_and_restore(root):
    result = runner.invoke(cli_app, ["archive", "docs/guide/advanced.md", "-r", str(root)])
    assert result.exit_code == 0, result.output
    assert (root / "docs" / "guide" / "_" / "advanced.md").exists()
    assert not (root / "docs" / "guide" / "advanced.md").exists()

    result = runner.invoke(cli_app, ["restore", "docs/guide/_/advanced.md", "-r", str(root)])
    assert result.exit_code == 0, result.output
    assert (root / "docs" / "guide" / "advanced.md").exists()


def test_restore_requires_archived_path(root):
    result = runner.invoke(cli_app, ["restore", "docs/guide/advanced.md", "-r", str(root)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_config_option(root, tmp_path):
    config_file = tmp_path / "custom.json"
    config_file.write_text('{"default_index_icon": "🗃️"}')
    result = runner.invoke(cli_app, ["--config", str(config_file), "tree", "docs", "-r", str(root)])
    assert result.exit_code == 0, result.output
    assert "🗃" in result.output
    assert "📃" not in result.output
