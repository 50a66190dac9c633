"""Resource list building from fragment files.

This module provides the ResourceListService, which turns a sequence of
fragment files into an ordered list of typed resources: excluded files are
skipped, every other file is parsed, enriched and converted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from kubefrag.core.filename import is_excluded, parse_filename
from kubefrag.core.models import KubernetesResource, ResourceList
from kubefrag.core.serializer import read_fragment, to_resource
from kubefrag.core.versioning import ApiVersionResolver
from kubefrag.enrichers import enrich_fragment
from kubefrag.mappings.registry import MappingRegistry, get_default_registry

logger = logging.getLogger(__name__)


class ResourceListService:
    """Service for building resource lists from fragment files.

    Processing stops at the first failing file; no partial list is returned.
    """

    def __init__(self, registry: MappingRegistry | None = None) -> None:
        """Initialize the service.

        Args:
            registry: Kind/token registry. Defaults to the process-wide one.
        """
        self._registry = registry if registry is not None else get_default_registry()

    @property
    def registry(self) -> MappingRegistry:
        return self._registry

    def build(
        self,
        api_versions: ApiVersionResolver,
        default_name: str,
        files: Iterable[Path | str] | None,
    ) -> ResourceList:
        """Read, enrich and convert fragment files.

        Args:
            api_versions: Resolver for the apiVersion of a kind.
            default_name: Resource name for fragments whose file name gives none.
            files: Fragment files, processed in the given order. May be None.

        Returns:
            ResourceList holding one resource per non-excluded file.

        Raises:
            KubefragError: The first error raised for any file.
        """
        resources = ResourceList()
        if files is None:
            return resources

        for file in files:
            path = Path(file)
            if is_excluded(path.name):
                logger.debug(f"Skipping excluded fragment {path}")
                continue
            resources.items.append(self.read_resource(api_versions, path, default_name))

        logger.info(f"Built {len(resources.items)} resources")
        return resources

    def read_resource(
        self,
        api_versions: ApiVersionResolver,
        path: Path,
        app_name: str,
    ) -> KubernetesResource:
        """Read a single fragment file into a typed resource."""
        parsed = parse_filename(path.name)
        fragment = read_fragment(path, parsed.extension)
        enrich_fragment(fragment, parsed, api_versions, app_name, self._registry)
        resource = to_resource(fragment, str(path))
        logger.debug(f"Read {resource.kind} {resource.name} from {path.name}")
        return resource


def build_resource_list(
    api_versions: ApiVersionResolver,
    default_name: str,
    files: Iterable[Path | str] | None,
    registry: MappingRegistry | None = None,
) -> ResourceList:
    """Build a resource list using ``registry`` or the process-wide registry."""
    return ResourceListService(registry).build(api_versions, default_name, files)
