"""Kind <-> filename token mappings."""

from kubefrag.mappings.catalog import load_default_mappings, load_mappings_file
from kubefrag.mappings.registry import (
    DEFAULT_SUFFIX_TOKEN,
    MappingRegistry,
    get_default_registry,
    reset_default_registry,
    suffix_for_kind,
    upsert_mappings,
)

__all__ = [
    "DEFAULT_SUFFIX_TOKEN",
    "MappingRegistry",
    "get_default_registry",
    "load_default_mappings",
    "load_mappings_file",
    "reset_default_registry",
    "suffix_for_kind",
    "upsert_mappings",
]
