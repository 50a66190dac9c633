"""Error hierarchy for kubefrag.

Every error aborts the processing of the current fragment and propagates to the
caller unchanged. Messages name the originating file where one is known.
"""

from __future__ import annotations

from collections.abc import Iterable


class KubefragError(Exception):
    """Base class for all kubefrag errors."""

    def __init__(
        self,
        message: str,
        file_name: str | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.file_name = file_name
        self.details = details


class ConfigurationError(KubefragError):
    """Raised when kind/filename mapping input is malformed."""


class NameFormatError(KubefragError):
    """Raised when a file name does not match ``<name>[-<type>].(yaml|yml|json)``."""

    def __init__(self, file_name: str) -> None:
        super().__init__(
            f"Resource file name '{file_name}' does not match pattern "
            "<name>-<type>.(yaml|yml|json)",
            file_name=file_name,
        )


class UnknownTypeError(KubefragError):
    """Raised when the type segment of a file name is not a registered token."""

    def __init__(self, type_token: str, file_name: str, known_tokens: Iterable[str]) -> None:
        self.type_token = type_token
        self.known_tokens = list(known_tokens)
        super().__init__(
            f"Unknown type '{type_token}' for file {file_name}. "
            f"Must be one of : {', '.join(self.known_tokens)}",
            file_name=file_name,
        )


class MissingKindError(KubefragError):
    """Raised when no kind can be derived from the file name or the fragment."""

    def __init__(self, file_name: str) -> None:
        super().__init__(
            "No type given as part of the file name (e.g. 'app-rc.yml') "
            f"and no 'Kind' defined in resource descriptor {file_name}",
            file_name=file_name,
        )


class InvalidMetadataTypeError(KubefragError):
    """Raised when a fragment's ``metadata`` is present but not a mapping."""

    def __init__(self, observed_type: str, file_name: str | None = None) -> None:
        self.observed_type = observed_type
        location = f" in resource descriptor {file_name}" if file_name else ""
        super().__init__(
            f"Metadata is expected to be a Map, not a {observed_type}{location}",
            file_name=file_name,
        )


class InvalidFragmentSyntaxError(KubefragError):
    """Raised when an enriched fragment cannot be converted to a typed resource."""

    def __init__(self, file_name: str, cause: str) -> None:
        super().__init__(
            f"Resource fragment {file_name} has an invalid syntax ({cause})",
            file_name=file_name,
            details=cause,
        )


class FragmentReadError(KubefragError):
    """Raised when a fragment file cannot be read or decoded into a mapping."""
