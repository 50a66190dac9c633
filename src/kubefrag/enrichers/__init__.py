"""Fragment enrichers.

Enrichers run after a fragment file is decoded, filling in the identity fields
(kind, apiVersion, metadata.name) that the fragment leaves out, based on the
file name and the kind/token mappings.
"""

from kubefrag.enrichers.api_version import ApiVersionEnricher
from kubefrag.enrichers.base import EnrichmentContext, FragmentEnricher
from kubefrag.enrichers.kind import KindEnricher
from kubefrag.enrichers.name import NameEnricher, get_metadata
from kubefrag.enrichers.registry import enrich_fragment, get_default_enrichers

__all__ = [
    "ApiVersionEnricher",
    "EnrichmentContext",
    "FragmentEnricher",
    "KindEnricher",
    "NameEnricher",
    "enrich_fragment",
    "get_default_enrichers",
    "get_metadata",
]
