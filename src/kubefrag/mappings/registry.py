"""Kind/filename token registry.

The registry keeps two indices: token -> kind (every token of every upsert) and
kind -> token (only the last token of the most recent upsert for that kind).
It is seeded once from a catalog and then only grows.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping, Sequence
from functools import lru_cache
from typing import Any, Union

from pydantic import ValidationError

from kubefrag.core.config import get_config
from kubefrag.core.errors import ConfigurationError
from kubefrag.core.models import MappingEntry
from kubefrag.mappings.catalog import load_default_mappings, load_mappings_file

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX_TOKEN = "cr"

MappingInput = Union[MappingEntry, Mapping[str, Any], Sequence[Any]]


def _coerce_entry(raw: MappingInput) -> MappingEntry:
    if isinstance(raw, MappingEntry):
        return raw
    try:
        if isinstance(raw, Mapping):
            return MappingEntry.model_validate(dict(raw))
        if isinstance(raw, str):
            raise ValueError("expected a (kind, tokens) pair")
        kind, tokens = raw
        return MappingEntry(kind=kind, tokens=tokens)
    except (ValidationError, TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Invalid mapping entry {raw!r}",
            details=str(e),
        ) from e


class MappingRegistry:
    """Thread-safe bidirectional kind <-> filename token table.

    Token lookups are case-insensitive; tokens are indexed lower-cased. Both
    indices are guarded by a single lock so readers never see a partially
    applied upsert.

    Example:
        >>> registry = MappingRegistry([MappingEntry(kind="DeploymentConfig", tokens=["dc"])])
        >>> registry.resolve_kind_by_token("DC")
        'DeploymentConfig'
    """

    def __init__(self, seed: Iterable[MappingInput] | None = None) -> None:
        """Create a registry.

        Args:
            seed: Initial mappings, applied before any lookup.
        """
        self._lock = threading.RLock()
        self._token_to_kind: dict[str, str] = {}
        self._kind_to_token: dict[str, str] = {}
        self._kind_to_tokens: dict[str, list[str]] = {}
        if seed is not None:
            self.upsert(seed)

    @classmethod
    def with_defaults(cls) -> MappingRegistry:
        """Create a registry seeded from the built-in catalog."""
        return cls(load_default_mappings())

    def upsert(self, entries: Iterable[MappingInput] | None) -> None:
        """Add or replace mappings.

        The whole batch is validated before anything is applied. For each
        entry every token is mapped to the kind, and the kind is mapped to the
        entry's last token.

        Raises:
            ConfigurationError: If any entry has a blank kind or no tokens.
        """
        if entries is None:
            return
        batch = [_coerce_entry(raw) for raw in entries]
        for entry in batch:
            if not entry.is_valid():
                raise ConfigurationError(
                    f"Invalid mapping for Kind {entry.kind or None} "
                    f"and Filename Types {entry.tokens or None}"
                )

        with self._lock:
            for entry in batch:
                for token in entry.tokens:
                    self._token_to_kind[token.lower()] = entry.kind
                # Last token wins for the kind -> token direction
                self._kind_to_token[entry.kind] = entry.tokens[-1]
                self._kind_to_tokens[entry.kind] = list(entry.tokens)
        logger.debug(f"Upserted {len(batch)} kind mappings")

    def resolve_kind_by_token(self, token: str | None) -> str | None:
        """Return the kind registered for ``token`` (case-insensitive)."""
        if token is None:
            return None
        with self._lock:
            return self._token_to_kind.get(token.lower())

    def resolve_token_by_kind(self, kind: str | None) -> str | None:
        """Return the suffix token registered for ``kind``."""
        if kind is None:
            return None
        with self._lock:
            return self._kind_to_token.get(kind)

    def suffix_for_kind(self, name: str, kind: str) -> str:
        """Build ``<name>-<token>``, using ``cr`` for unmapped kinds."""
        token = self.resolve_token_by_kind(kind)
        return f"{name}-{token if token is not None else DEFAULT_SUFFIX_TOKEN}"

    def known_tokens(self) -> list[str]:
        """Return all registered tokens, sorted."""
        with self._lock:
            return sorted(self._token_to_kind)

    def mappings(self) -> dict[str, list[str]]:
        """Return a snapshot of kind -> tokens of the latest upsert per kind.

        Tokens since reassigned to another kind are left out, as are kinds
        left with no tokens.
        """
        with self._lock:
            snapshot = {}
            for kind, tokens in sorted(self._kind_to_tokens.items()):
                live = [token for token in tokens if self._token_to_kind.get(token.lower()) == kind]
                if live:
                    snapshot[kind] = live
            return snapshot

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.resolve_kind_by_token(token) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._token_to_kind)


@lru_cache
def get_default_registry() -> MappingRegistry:
    """Get the process-wide registry.

    Seeded from the built-in catalog and, when configured, the file named by
    ``KUBEFRAG_MAPPINGS_FILE``.
    """
    registry = MappingRegistry.with_defaults()
    mappings_file = get_config().mappings_file
    if mappings_file is not None:
        registry.upsert(load_mappings_file(mappings_file))
    return registry


def reset_default_registry() -> None:
    """Drop the process-wide registry; the next access re-seeds it."""
    get_default_registry.cache_clear()


def upsert_mappings(
    entries: Iterable[MappingInput] | None,
    registry: MappingRegistry | None = None,
) -> None:
    """Upsert mappings into ``registry`` or the process-wide registry."""
    if registry is None:
        registry = get_default_registry()
    registry.upsert(entries)


def suffix_for_kind(name: str, kind: str, registry: MappingRegistry | None = None) -> str:
    """Build ``<name>-<token>`` from ``registry`` or the process-wide registry."""
    if registry is None:
        registry = get_default_registry()
    return registry.suffix_for_kind(name, kind)
