"""Core module containing models, errors, configuration and serialization."""

from kubefrag.core.errors import (
    ConfigurationError,
    FragmentReadError,
    InvalidFragmentSyntaxError,
    InvalidMetadataTypeError,
    KubefragError,
    MissingKindError,
    NameFormatError,
    UnknownTypeError,
)
from kubefrag.core.filename import (
    EXCLUDED_RESOURCE_FILENAME_SUFFIXES,
    is_excluded,
    parse_filename,
)
from kubefrag.core.models import (
    Fragment,
    KubernetesResource,
    MappingEntry,
    ObjectMeta,
    ParsedFilename,
    ResourceList,
)
from kubefrag.core.serializer import read_fragment, serialize, to_resource
from kubefrag.core.versioning import ApiVersionResolver, ResourceVersioning

__all__ = [
    "ApiVersionResolver",
    "ConfigurationError",
    "EXCLUDED_RESOURCE_FILENAME_SUFFIXES",
    "Fragment",
    "FragmentReadError",
    "InvalidFragmentSyntaxError",
    "InvalidMetadataTypeError",
    "KubefragError",
    "KubernetesResource",
    "MappingEntry",
    "MissingKindError",
    "NameFormatError",
    "ObjectMeta",
    "ParsedFilename",
    "ResourceList",
    "ResourceVersioning",
    "UnknownTypeError",
    "is_excluded",
    "parse_filename",
    "read_fragment",
    "serialize",
    "to_resource",
]
