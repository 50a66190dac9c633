"""Loading of kind/filename mapping catalogs.

The built-in catalog ships with the package as ``default_mappings.yaml`` and
has the shape ``{kind: [token, ...]}``. User mapping files use a list form so
that they read like the upsert input::

    mappings:
      - kind: Foo
        tokens: [foo, fo]
      - kind: Bar
        tokens: "bar, br"
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

import yaml
from pydantic import ValidationError

from kubefrag.core.errors import ConfigurationError
from kubefrag.core.models import MappingEntry

logger = logging.getLogger(__name__)

_DEFAULT_CATALOG_PACKAGE = "kubefrag.mappings"
_DEFAULT_CATALOG_RESOURCE = "default_mappings.yaml"


def load_default_mappings() -> list[MappingEntry]:
    """Load the mapping catalog bundled with the package."""
    text = (
        resources.files(_DEFAULT_CATALOG_PACKAGE)
        .joinpath(_DEFAULT_CATALOG_RESOURCE)
        .read_text(encoding="utf-8")
    )
    data = yaml.safe_load(text) or {}
    entries = [MappingEntry(kind=kind, tokens=tokens) for kind, tokens in data.items()]
    logger.debug(f"Loaded {len(entries)} built-in kind mappings")
    return entries


def _coerce_entry(raw: object, source: Path) -> MappingEntry:
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Each mapping in {source} must be a mapping with 'kind' and 'tokens'",
            file_name=source.name,
        )
    try:
        return MappingEntry.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid mapping in {source}: {raw}",
            file_name=source.name,
            details=str(e),
        ) from e


def load_mappings_file(path: Path) -> list[MappingEntry]:
    """Load additional mappings from a YAML file.

    Entries are returned as-is; well-formedness is checked on upsert.

    Raises:
        ConfigurationError: If the file cannot be read or has the wrong shape.
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"Cannot load mappings file {path}",
            file_name=path.name,
            details=str(e),
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Mappings file {path} must contain a 'mappings' section",
            file_name=path.name,
        )
    raw_entries = data.get("mappings", [])
    if not isinstance(raw_entries, list):
        raise ConfigurationError(
            f"'mappings' in {path} must be a list of mappings",
            file_name=path.name,
        )
    entries = [_coerce_entry(raw, path) for raw in raw_entries]
    logger.debug(f"Loaded {len(entries)} kind mappings from {path}")
    return entries
