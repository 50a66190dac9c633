"""apiVersion enrichment."""

from __future__ import annotations

import logging

from kubefrag.core.models import Fragment
from kubefrag.enrichers.base import EnrichmentContext, FragmentEnricher

logger = logging.getLogger(__name__)


class ApiVersionEnricher(FragmentEnricher):
    """Set ``apiVersion`` from the resolver for the fragment's kind, if absent."""

    @property
    def name(self) -> str:
        return "api-version"

    def enrich(self, fragment: Fragment, context: EnrichmentContext) -> None:
        if fragment.get("apiVersion") is not None:
            return
        kind = fragment.get("kind")
        # Malformed kinds are rejected when the resource is validated
        if not isinstance(kind, str):
            return
        api_version = context.api_versions.for_kind(kind)
        if api_version is None:
            logger.debug(f"{context.file_name}: no apiVersion known for {kind}")
            return
        fragment["apiVersion"] = api_version
