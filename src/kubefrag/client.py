"""Public client interface for kubefrag.

kubefrag already exposes lower-level building blocks (mappings/, enrichers/
and services/). This module provides a stable, ergonomic entrypoint for
external callers.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from kubefrag.core.config import KubefragConfig, get_config
from kubefrag.core.models import ResourceList
from kubefrag.core.serializer import serialize
from kubefrag.core.versioning import ApiVersionResolver, ResourceVersioning
from kubefrag.mappings.catalog import load_mappings_file
from kubefrag.mappings.registry import MappingInput, MappingRegistry
from kubefrag.services.resource_list_service import ResourceListService


class KubefragClient:
    """High-level client that owns a mapping registry and API versions."""

    def __init__(
        self,
        registry: MappingRegistry | None = None,
        *,
        config: KubefragConfig | None = None,
        api_versions: ApiVersionResolver | None = None,
    ) -> None:
        """Create a kubefrag client.

        Args:
            registry: Optional pre-built registry. When omitted, a private
                registry seeded from the built-in catalog and the configured
                mappings file is created.
            config: Optional configuration (defaults to the cached global one).
            api_versions: Optional resolver (defaults to versions from config).
        """
        self._config = config or get_config()
        if registry is None:
            registry = MappingRegistry.with_defaults()
            if self._config.mappings_file is not None:
                registry.upsert(load_mappings_file(self._config.mappings_file))
        self._registry = registry
        self._api_versions = api_versions or ResourceVersioning.from_config(self._config)
        self._service = ResourceListService(self._registry)

    @property
    def registry(self) -> MappingRegistry:
        """Kind/token registry used by this client."""
        return self._registry

    @property
    def api_versions(self) -> ApiVersionResolver:
        return self._api_versions

    @property
    def config(self) -> KubefragConfig:
        return self._config

    def upsert_mappings(self, entries: Iterable[MappingInput] | None) -> None:
        """Add or replace kind/token mappings."""
        self._registry.upsert(entries)

    def suffix_for_kind(self, name: str, kind: str) -> str:
        """Build ``<name>-<token>`` for a kind."""
        return self._registry.suffix_for_kind(name, kind)

    def build_resource_list(
        self,
        files: Iterable[Path | str] | None,
        default_name: str | None = None,
    ) -> ResourceList:
        """Build a resource list from fragment files.

        Args:
            files: Fragment files in processing order.
            default_name: Name for fragments without one; defaults to
                ``default_app_name`` from the configuration.
        """
        return self._service.build(
            self._api_versions,
            default_name or self._config.default_app_name,
            files,
        )

    def render(self, resources: ResourceList, output_format: str | None = None) -> str:
        """Serialize a resource list in the configured or given format."""
        return serialize(resources, output_format or self._config.output_format)
