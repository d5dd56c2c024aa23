"""Command line interface for docs-client."""
