"""kubefrag - enrich Kubernetes resource fragments from file naming conventions."""

from kubefrag.client import KubefragClient
from kubefrag.core import (
    ConfigurationError,
    FragmentReadError,
    InvalidFragmentSyntaxError,
    InvalidMetadataTypeError,
    KubefragError,
    KubernetesResource,
    MappingEntry,
    MissingKindError,
    NameFormatError,
    ResourceList,
    ResourceVersioning,
    UnknownTypeError,
)
from kubefrag.mappings import MappingRegistry, suffix_for_kind, upsert_mappings
from kubefrag.services import build_resource_list

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "FragmentReadError",
    "InvalidFragmentSyntaxError",
    "InvalidMetadataTypeError",
    "KubefragClient",
    "KubefragError",
    "KubernetesResource",
    "MappingEntry",
    "MappingRegistry",
    "MissingKindError",
    "NameFormatError",
    "ResourceList",
    "ResourceVersioning",
    "UnknownTypeError",
    "build_resource_list",
    "suffix_for_kind",
    "upsert_mappings",
]
