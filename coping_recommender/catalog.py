"""
Coping tool catalog loading.

The catalog is configuration data: a JSON array of tool objects. The engine
takes the loaded tuple as an argument and never reads files itself.
"""

import json
import logging
from importlib import resources
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .errors import CatalogError
from .models import CopingTool

logger = logging.getLogger(__name__)

DEFAULT_CATALOG = "coping_tools.json"

_catalog_adapter = TypeAdapter(tuple[CopingTool, ...])


def _read_source(path: str | Path | None) -> tuple[str, str]:
    if path is None:
        source = f"{__package__}/data/{DEFAULT_CATALOG}"
        resource = resources.files(__package__).joinpath("data", DEFAULT_CATALOG)
        return source, resource.read_text(encoding="utf-8")

    try:
        return str(path), Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Could not read catalog {path}: {e}") from e


def parse_catalog(raw: str, source: str = "<string>") -> tuple[CopingTool, ...]:
    """
    Parse and validate a JSON catalog.

    Args:
        raw: JSON text holding an array of tool objects
        source: Name used in error messages

    Returns:
        The tools in file order

    Raises:
        CatalogError: If the JSON is malformed, an entry is invalid, or ids repeat
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog {source} is not valid JSON: {e}") from e

    try:
        tools = _catalog_adapter.validate_python(data)
    except ValidationError as e:
        raise CatalogError(f"Catalog {source} has invalid entries: {e}") from e

    seen: set[str] = set()
    for tool in tools:
        if tool.id in seen:
            raise CatalogError(f"Catalog {source} repeats tool id {tool.id!r}")
        seen.add(tool.id)

    return tools


def load_catalog(path: str | Path | None = None) -> tuple[CopingTool, ...]:
    """
    Load a coping tool catalog.

    Args:
        path: JSON file to read; the packaged default catalog when None

    Returns:
        The tools in file order

    Raises:
        CatalogError: If the catalog cannot be read or validated
    """
    source, raw = _read_source(path)
    tools = parse_catalog(raw, source)
    logger.info("Loaded %d coping tools from %s", len(tools), source)
    return tools
