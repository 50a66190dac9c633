"""Fragment decoding and resource list serialization.

Fragments are read from YAML or JSON files into plain dictionaries, and built
resource lists are written back out as YAML or JSON documents.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubefrag.core.errors import FragmentReadError, InvalidFragmentSyntaxError
from kubefrag.core.models import Fragment, KubernetesResource, ResourceList


def read_fragment(path: Path, extension: str | None = None) -> Fragment:
    """Decode a fragment file into a dictionary.

    JSON fragments are parsed as JSON, everything else as YAML. An empty
    document yields an empty fragment.

    Args:
        path: Fragment file.
        extension: Extension parsed from the file name (``yaml``, ``yml`` or
            ``json``). Taken from ``path`` when omitted.

    Returns:
        The decoded fragment.

    Raises:
        FragmentReadError: If the file cannot be read, is not UTF-8, cannot be
            decoded, or does not hold a mapping.
    """
    if extension is None:
        extension = path.suffix.lstrip(".")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FragmentReadError(
            f"Cannot read resource fragment {path}",
            file_name=path.name,
            details=str(e),
        ) from e
    except UnicodeDecodeError as e:
        raise FragmentReadError(
            f"Resource fragment {path.name} is not valid UTF-8",
            file_name=path.name,
            details=str(e),
        ) from e

    try:
        if extension.lower() == "json":
            data = json.loads(text) if text.strip() else None
        else:
            data = yaml.safe_load(text)
    except json.JSONDecodeError as e:
        raise FragmentReadError(
            f"Invalid JSON in resource fragment {path.name}",
            file_name=path.name,
            details=f"Line {e.lineno}, column {e.colno}: {e.msg}",
        ) from e
    except yaml.YAMLError as e:
        raise FragmentReadError(
            f"Invalid YAML in resource fragment {path.name}",
            file_name=path.name,
            details=str(e),
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FragmentReadError(
            f"Resource fragment {path.name} must contain a mapping, not a {type(data).__name__}",
            file_name=path.name,
        )
    return data


def _format_validation_error(error: ValidationError) -> str:
    error_details = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"])
        error_details.append(f"{loc}: {err['msg']}")
    return "; ".join(error_details)


def to_resource(fragment: Fragment, file_name: str) -> KubernetesResource:
    """Convert an enriched fragment into a typed resource.

    Raises:
        InvalidFragmentSyntaxError: If the fragment's shape is rejected.
    """
    try:
        return KubernetesResource.model_validate(fragment)
    except ValidationError as e:
        raise InvalidFragmentSyntaxError(file_name, _format_validation_error(e)) from e


def serialize(resources: ResourceList, output_format: str = "yaml") -> str:
    """Serialize a resource list to YAML or JSON text.

    Raises:
        ValueError: If ``output_format`` is not ``yaml`` or ``json``.
    """
    data: dict[str, Any] = resources.to_dict()
    if output_format == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    if output_format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unsupported output format: {output_format}")
