"""Front-matter (YAML) parsing and serialization."""

from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

import frontmatter
import yaml
from loguru import logger


def normalize_front_matter_value(value: Any) -> Any:
    """Normalize YAML-native values that have no schema field type.

    PyYAML turns unquoted ISO dates into ``date``/``datetime`` objects. Those are
    converted back to ISO strings so a read/write cycle leaves the text unchanged
    and text fields accept them. Lists and dicts are normalized recursively;
    everything else is kept as-is.

    >>> normalize_front_matter_value(date(2025, 10, 24))
    '2025-10-24'
    >>> normalize_front_matter_value([date(2025, 10, 24), 3])
    ['2025-10-24', 3]
    """
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, list):
        return [normalize_front_matter_value(item) for item in value]
    if isinstance(value, dict):
        return {key: normalize_front_matter_value(val) for key, val in value.items()}
    return value


def parse_front_matter(text: Optional[str]) -> Dict[str, Any]:
    """Parse front-matter text into a record.

    Missing text, a non-mapping document and malformed YAML all yield an empty
    record; malformed YAML is logged.
    """
    if not text:
        return {}

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse YAML front matter: {e}")
        return {}

    if not isinstance(data, dict):
        if data is not None:
            logger.warning(f"Front matter is not a mapping, ignoring: {type(data).__name__}")
        return {}

    return {str(key): normalize_front_matter_value(value) for key, value in data.items()}


def dump_yaml(metadata: Mapping[str, Any]) -> str:
    """Serialize a record as block-style YAML, preserving key order."""
    return yaml.safe_dump(
        dict(metadata), sort_keys=False, allow_unicode=True, default_flow_style=False
    ).strip()


def dump_front_matter(metadata: Mapping[str, Any], body: str) -> str:
    """Render ``---`` delimited front matter followed by a blank line and the body."""
    post = frontmatter.Post(body)
    post.metadata.update(metadata)
    return frontmatter.dumps(post, sort_keys=False)
