"""Data models for kubefrag.

This module defines the mapping entries fed into the kind/filename registry,
the lexical result of parsing a fragment file name, and the typed resource
objects produced from enriched fragments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

Fragment = dict[str, Any]


class MappingEntry(BaseModel):
    """Association between a kind and the filename tokens that denote it.

    Tokens may be given as a list or as a comma-separated string
    (``"dc, deploymentconfig"``).
    """

    kind: str = Field("", description="Resource kind, e.g. Deployment")
    tokens: list[str] = Field(default_factory=list, description="Filename tokens, e.g. deploy")

    @field_validator("kind", mode="before")
    @classmethod
    def _coerce_kind(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()

    @field_validator("tokens", mode="before")
    @classmethod
    def _split_tokens(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        elif not isinstance(value, (list, tuple)):
            raise ValueError("tokens must be a list or a comma-separated string")
        return [str(token).strip() for token in value if str(token).strip()]

    def is_valid(self) -> bool:
        """Check that the entry has a kind and at least one token."""
        return bool(self.kind) and bool(self.tokens)


@dataclass(frozen=True)
class ParsedFilename:
    """Name and optional type token extracted from a fragment file name."""

    file_name: str
    name: str | None
    type_token: str | None = None
    extension: str = "yaml"


class ObjectMeta(BaseModel):
    """Resource metadata. Unknown keys are preserved."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    name: str | None = None
    namespace: str | None = None
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None


class KubernetesResource(BaseModel):
    """Typed resource object built from an enriched fragment.

    Only the identity fields are typed; everything else (spec, data, ...) is
    carried through as-is.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_version: str | None = Field(None, alias="apiVersion")
    kind: str
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)

    @property
    def name(self) -> str | None:
        return self.metadata.name

    def to_dict(self) -> dict[str, Any]:
        """Dump the resource using wire field names.

        Typed fields left empty (apiVersion, metadata.namespace, ...) are
        omitted; everything carried through from the fragment is kept.
        """
        data = self.model_dump(mode="json", by_alias=True)
        if data.get("apiVersion") is None:
            data.pop("apiVersion", None)
        data["metadata"] = {
            key: value
            for key, value in data["metadata"].items()
            if not (key in ObjectMeta.model_fields and value is None)
        }
        return data


class ResourceList(BaseModel):
    """Ordered collection of resources, in the order fragments were supplied."""

    model_config = ConfigDict(populate_by_name=True)

    api_version: str = Field("v1", alias="apiVersion")
    kind: str = "List"
    items: list[KubernetesResource] = Field(default_factory=list)

    def kinds(self) -> list[str]:
        return [item.kind for item in self.items]

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "items": [item.to_dict() for item in self.items],
        }
