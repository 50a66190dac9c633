"""Fragment file name parsing.

A fragment file name has the shape ``<name>[-<type>].<ext>`` where ``<ext>`` is
one of ``yaml``, ``yml`` or ``json`` (matched case-insensitively). The type
segment is whatever follows the last dash. No registry lookups happen here.
"""

from __future__ import annotations

import re
from pathlib import Path

from kubefrag.core.errors import NameFormatError
from kubefrag.core.models import ParsedFilename

FILENAME_PATTERN = re.compile(
    r"^(?P<name>.*?)(-(?P<type>[^-]+))?\.(?P<ext>yaml|yml|json)$",
    re.IGNORECASE,
)

# Suffixes of files that are never resource fragments (templated helm sources)
EXCLUDED_RESOURCE_FILENAME_SUFFIXES: frozenset[str] = frozenset({".helm.yaml", ".helm.yml"})


def is_excluded(file_name: str) -> bool:
    """Check whether a file is excluded from fragment processing."""
    lowered = file_name.lower()
    return any(lowered.endswith(suffix) for suffix in EXCLUDED_RESOURCE_FILENAME_SUFFIXES)


def parse_filename(file_name: str | Path) -> ParsedFilename:
    """Split a fragment file name into resource name and type token.

    Args:
        file_name: Base name or path of the fragment file.

    Returns:
        ParsedFilename with ``type_token`` set only if a ``-<type>`` segment exists.

    Raises:
        NameFormatError: If the name does not match the fragment grammar.
    """
    base_name = Path(file_name).name
    match = FILENAME_PATTERN.match(base_name)
    if match is None:
        raise NameFormatError(base_name)
    return ParsedFilename(
        file_name=base_name,
        name=match.group("name"),
        type_token=match.group("type"),
        extension=match.group("ext").lower(),
    )
