"""Utility functions for docs-client."""

import posixpath
import sys
from typing import Optional

from loguru import logger


def normalize_path(path: str) -> str:
    """Normalize a backend-relative path.

    Leading slashes and "./" prefixes are dropped, ".." segments are collapsed,
    and the root is represented by the empty string.

    >>> normalize_path("./docs/guide/../api/")
    'docs/api'
    >>> normalize_path("/")
    ''
    """
    if not path:
        return ""
    normalized = posixpath.normpath(path.replace("\\", "/")).lstrip("/")
    return "" if normalized == "." else normalized


def join_path(*parts: Optional[str]) -> str:
    """Join path segments, skipping empty ones."""
    segments = [part for part in parts if part]
    if not segments:
        return ""
    return normalize_path(posixpath.join(*segments))


def dirname(path: str) -> str:
    return normalize_path(posixpath.dirname(normalize_path(path)))


def basename(path: str) -> str:
    return posixpath.basename(normalize_path(path))


def extname(path: str) -> str:
    """Extension including the leading dot, or an empty string."""
    return posixpath.splitext(basename(path))[1]


def stem(path: str) -> str:
    return posixpath.splitext(basename(path))[0]


def setup_logging(log_level: str = "INFO", log_to_stderr: bool = True) -> None:  # pragma: no cover
    """Configure loguru sinks.

    Args:
        log_level: Minimum level for emitted records
        log_to_stderr: Whether to attach a stderr sink
    """
    logger.remove()
    if log_to_stderr:
        logger.add(
            sys.stderr,
            level=log_level,
            backtrace=True,
            diagnose=False,
            colorize=True,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan> - <level>{message}</level>",
        )
    logger.debug(f"Logging initialized at level {log_level}")
