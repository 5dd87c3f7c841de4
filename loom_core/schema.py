"""Schema documents and the shape checks applied before rules run."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from loom_core.errors import MalformedSchemaError

logger = logging.getLogger(__name__)


@dataclass
class Schema:
    """A parsed schema document (or sub-schema) handed to the rules."""

    content: dict[str, Any]
    source: Optional[str] = None
    parent: Optional["Schema"] = None

    def get(self, keyword: str, default: Any = None) -> Any:
        return self.content.get(keyword, default)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self.content

    @property
    def title(self) -> Optional[str]:
        title = self.content.get("title")
        return title if isinstance(title, str) else None


def load_schema(path: str | Path) -> Schema:
    """Load a JSON schema file.

    Raises:
        MalformedSchemaError: If the file cannot be read, is not valid JSON,
            or its root is not an object
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedSchemaError(f"cannot read schema: {e}", source=str(path)) from e

    try:
        content = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedSchemaError(f"invalid JSON: {e}", source=str(path)) from e

    if not isinstance(content, dict):
        raise MalformedSchemaError("schema root must be an object", source=str(path))

    logger.debug(f"Loaded schema {path} with keywords {sorted(content)}")
    return Schema(content=content, source=str(path))


def required_names(node: Any, source: Optional[str] = None) -> list[str]:
    """Validate a ``required`` keyword value and return its entries.

    Duplicates are kept; resolving them is the rule's concern.

    Raises:
        MalformedSchemaError: If the value is not an array of strings
    """
    if not isinstance(node, list):
        raise MalformedSchemaError(
            f"'required' must be an array of strings, got {type(node).__name__}",
            source=source,
        )
    for index, item in enumerate(node):
        if not isinstance(item, str):
            raise MalformedSchemaError(
                f"'required'[{index}] must be a string, got {type(item).__name__}",
                source=source,
            )
    return list(node)


def properties_of(schema: Schema) -> Optional[dict[str, Any]]:
    """Return the ``properties`` map of a schema, or None when absent.

    Raises:
        MalformedSchemaError: If ``properties`` is present but not an object
    """
    properties = schema.get("properties")
    if properties is None:
        return None
    if not isinstance(properties, dict):
        raise MalformedSchemaError(
            f"'properties' must be an object, got {type(properties).__name__}",
            source=schema.source,
        )
    return properties
