"""Base interface for fragment enrichers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from kubefrag.core.models import Fragment, ParsedFilename
from kubefrag.core.versioning import ApiVersionResolver
from kubefrag.mappings.registry import MappingRegistry


@dataclass
class EnrichmentContext:
    """Per-file state shared by the enrichers of one fragment.

    ``name`` starts as the name parsed from the file name and may be cleared
    when it turns out to be a type token.
    """

    file_name: str
    name: str | None
    type_token: str | None
    app_name: str
    api_versions: ApiVersionResolver
    registry: MappingRegistry

    @classmethod
    def from_parsed(
        cls,
        parsed: ParsedFilename,
        app_name: str,
        api_versions: ApiVersionResolver,
        registry: MappingRegistry,
    ) -> EnrichmentContext:
        return cls(
            file_name=parsed.file_name,
            name=parsed.name,
            type_token=parsed.type_token,
            app_name=app_name,
            api_versions=api_versions,
            registry=registry,
        )


class FragmentEnricher(ABC):
    """Fill in one missing identity field of a fragment."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique enricher name."""

    @abstractmethod
    def enrich(self, fragment: Fragment, context: EnrichmentContext) -> None:
        """Mutate the fragment in-place. Existing values are never overwritten."""
