"""Enricher registry and orchestration."""

from __future__ import annotations

from kubefrag.core.models import Fragment, ParsedFilename
from kubefrag.core.versioning import ApiVersionResolver
from kubefrag.enrichers.api_version import ApiVersionEnricher
from kubefrag.enrichers.base import EnrichmentContext, FragmentEnricher
from kubefrag.enrichers.kind import KindEnricher
from kubefrag.enrichers.name import NameEnricher
from kubefrag.mappings.registry import MappingRegistry, get_default_registry


def get_default_enrichers() -> list[FragmentEnricher]:
    """Return built-in enrichers in application order.

    The api version enricher reads the kind settled by the kind enricher.
    """
    return [
        KindEnricher(),
        ApiVersionEnricher(),
        NameEnricher(),
    ]


def enrich_fragment(
    fragment: Fragment,
    parsed: ParsedFilename,
    api_versions: ApiVersionResolver,
    app_name: str,
    registry: MappingRegistry | None = None,
) -> Fragment:
    """Fill in kind, apiVersion and metadata.name of a fragment.

    Args:
        fragment: Decoded fragment, mutated in-place.
        parsed: Name and type token parsed from the fragment's file name.
        api_versions: Resolver for the apiVersion of a kind.
        app_name: Resource name used when the file name gives none.
        registry: Kind/token registry; defaults to the process-wide one.

    Returns:
        The same fragment, enriched.

    Raises:
        UnknownTypeError: If the file name's type token is not registered.
        MissingKindError: If no kind can be determined.
        InvalidMetadataTypeError: If ``metadata`` is not a mapping.
    """
    if registry is None:
        registry = get_default_registry()
    context = EnrichmentContext.from_parsed(parsed, app_name, api_versions, registry)
    for enricher in get_default_enrichers():
        enricher.enrich(fragment, context)
    return fragment
