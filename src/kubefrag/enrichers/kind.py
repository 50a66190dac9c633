"""Kind enrichment from the fragment's file name.

Precedence: an explicit ``-<type>`` segment, then the whole name read as a
token (``dc.yaml``), then the ``kind`` declared in the fragment. Reading the
name as a token means a resource literally named ``service`` cannot be given
through ``service.yaml``; it needs ``service-svc.yaml``.
"""

from __future__ import annotations

import logging

from kubefrag.core.errors import MissingKindError, UnknownTypeError
from kubefrag.core.models import Fragment
from kubefrag.enrichers.base import EnrichmentContext, FragmentEnricher

logger = logging.getLogger(__name__)


class KindEnricher(FragmentEnricher):
    """Set ``kind`` from the file name unless the fragment declares one."""

    @property
    def name(self) -> str:
        return "kind"

    def enrich(self, fragment: Fragment, context: EnrichmentContext) -> None:
        kind = self._kind_from_filename(context)

        if kind is None and fragment.get("kind") is None:
            raise MissingKindError(context.file_name)
        if fragment.get("kind") is None:
            fragment["kind"] = kind
        elif kind is not None and fragment["kind"] != kind:
            logger.debug(
                f"{context.file_name}: declared kind {fragment['kind']!r} "
                f"takes precedence over {kind!r} from file name"
            )

    def _kind_from_filename(self, context: EnrichmentContext) -> str | None:
        registry = context.registry
        if context.type_token is not None:
            kind = registry.resolve_kind_by_token(context.type_token)
            if kind is None:
                raise UnknownTypeError(
                    context.type_token, context.file_name, registry.known_tokens()
                )
            return kind

        kind = registry.resolve_kind_by_token(context.name)
        if kind is not None:
            # The name was in fact the type, so there is no explicit name
            logger.debug(f"{context.file_name}: name {context.name!r} read as type {kind}")
            context.name = None
        return kind
