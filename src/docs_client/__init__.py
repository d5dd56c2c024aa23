"""docs-client - typed, schema-validated access to a directory tree of Markdown files."""

__version__ = "0.1.0"
