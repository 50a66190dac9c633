"""metadata.name enrichment."""

from __future__ import annotations

from typing import Any

from kubefrag.core.errors import InvalidMetadataTypeError
from kubefrag.core.models import Fragment
from kubefrag.enrichers.base import EnrichmentContext, FragmentEnricher


def get_metadata(fragment: Fragment, file_name: str | None = None) -> dict[str, Any]:
    """Return the fragment's metadata mapping, creating an empty one if missing.

    Raises:
        InvalidMetadataTypeError: If ``metadata`` is present but not a mapping.
    """
    metadata = fragment.get("metadata")
    if metadata is None:
        metadata = {}
        fragment["metadata"] = metadata
    elif not isinstance(metadata, dict):
        raise InvalidMetadataTypeError(type(metadata).__name__, file_name)
    return metadata


class NameEnricher(FragmentEnricher):
    """Set ``metadata.name`` from the file name, or the app name when blank."""

    @property
    def name(self) -> str:
        return "name"

    def enrich(self, fragment: Fragment, context: EnrichmentContext) -> None:
        metadata = get_metadata(fragment, context.file_name)
        # No name means the app name is the resource name
        value = context.name if context.name and context.name.strip() else context.app_name
        if metadata.get("name") is None:
            metadata["name"] = value
