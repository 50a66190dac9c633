"""Shared pytest fixtures for kubefrag tests."""

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml
from hypothesis import settings

from kubefrag.core.config import reload_config
from kubefrag.core.versioning import ResourceVersioning
from kubefrag.mappings import MappingRegistry, reset_default_registry

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")


@pytest.fixture(autouse=True)
def _isolate_globals(monkeypatch):
    """Keep config and the process-wide registry independent between tests."""
    monkeypatch.delenv("KUBEFRAG_MAPPINGS_FILE", raising=False)
    monkeypatch.delenv("KUBEFRAG_DEFAULT_APP_NAME", raising=False)
    reload_config()
    reset_default_registry()
    yield
    reload_config()
    reset_default_registry()


@pytest.fixture
def registry() -> MappingRegistry:
    """Provide a registry seeded from the built-in catalog."""
    return MappingRegistry.with_defaults()


@pytest.fixture
def api_versions() -> ResourceVersioning:
    """Provide default API versions."""
    return ResourceVersioning()


@pytest.fixture
def fragment_dir(tmp_path: Path) -> Path:
    """Provide an empty directory for fragment files."""
    directory = tmp_path / "fragments"
    directory.mkdir()
    return directory


@pytest.fixture
def write_fragment(fragment_dir: Path) -> Callable[..., Path]:
    """Write a fragment file and return its path.

    Dictionaries are dumped as YAML (or JSON for ``.json`` names); strings are
    written verbatim.
    """

    def _write(file_name: str, content: Any = None) -> Path:
        import json

        path = fragment_dir / file_name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        elif file_name.lower().endswith(".json"):
            path.write_text(json.dumps(content or {}), encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(content or {}), encoding="utf-8")
        return path

    return _write
