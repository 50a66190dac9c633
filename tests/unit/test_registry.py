"""Unit tests for the kind/filename mapping registry."""

import threading
from pathlib import Path

import pytest

from kubefrag.core.errors import ConfigurationError
from kubefrag.core.models import MappingEntry
from kubefrag.mappings import (
    MappingRegistry,
    get_default_registry,
    reset_default_registry,
    suffix_for_kind,
    upsert_mappings,
)


class TestUpsert:
    """Tests for MappingRegistry.upsert."""

    def test_tokens_map_to_kind(self) -> None:
        registry = MappingRegistry()
        registry.upsert([MappingEntry(kind="Foo", tokens=["foo", "fo"])])
        assert registry.resolve_kind_by_token("foo") == "Foo"
        assert registry.resolve_kind_by_token("fo") == "Foo"

    def test_kind_maps_to_last_token(self) -> None:
        registry = MappingRegistry()
        registry.upsert([MappingEntry(kind="Foo", tokens=["foo", "fo"])])
        assert registry.resolve_token_by_kind("Foo") == "fo"

    def test_repeated_upsert_keeps_previous_tokens(self) -> None:
        registry = MappingRegistry()
        registry.upsert([("Foo", ["foo", "fo"])])
        registry.upsert([("Foo", ["f"])])
        assert registry.resolve_kind_by_token("foo") == "Foo"
        assert registry.resolve_kind_by_token("f") == "Foo"
        assert registry.resolve_token_by_kind("Foo") == "f"

    def test_token_reassigned_to_new_kind(self) -> None:
        registry = MappingRegistry()
        registry.upsert([("Foo", ["x"])])
        registry.upsert([("Bar", ["x"])])
        assert registry.resolve_kind_by_token("x") == "Bar"

    def test_mappings_omit_reassigned_tokens(self) -> None:
        registry = MappingRegistry()
        registry.upsert([("Foo", ["x", "y"]), ("Baz", ["z"])])
        registry.upsert([("Bar", ["X"]), ("Qux", ["z"])])
        assert registry.mappings() == {"Bar": ["X"], "Foo": ["y"], "Qux": ["z"]}

    def test_accepts_dicts_and_comma_separated_tokens(self) -> None:
        registry = MappingRegistry()
        registry.upsert([{"kind": "Foo", "tokens": "foo, fo ,"}])
        assert registry.resolve_kind_by_token("fo") == "Foo"
        assert registry.resolve_token_by_kind("Foo") == "fo"

    def test_none_is_noop(self) -> None:
        registry = MappingRegistry()
        registry.upsert(None)
        assert len(registry) == 0

    @pytest.mark.parametrize(
        "entry",
        [
            MappingEntry(kind="", tokens=["foo"]),
            MappingEntry(kind="Foo", tokens=[]),
            {"kind": "Foo"},
            {"tokens": ["foo"]},
            ("Foo", " , "),
        ],
    )
    def test_invalid_entry_rejected(self, entry) -> None:
        registry = MappingRegistry()
        with pytest.raises(ConfigurationError) as exc_info:
            registry.upsert([entry])
        assert "Invalid mapping" in str(exc_info.value)

    def test_invalid_entry_names_kind(self) -> None:
        registry = MappingRegistry()
        with pytest.raises(ConfigurationError, match="Kind Foo"):
            registry.upsert([("Foo", [])])

    def test_malformed_input_rejected(self) -> None:
        registry = MappingRegistry()
        with pytest.raises(ConfigurationError):
            registry.upsert(["Foo"])

    def test_batch_applied_all_or_nothing(self) -> None:
        registry = MappingRegistry()
        with pytest.raises(ConfigurationError):
            registry.upsert([("Good", ["good"]), ("", ["bad"])])
        assert registry.resolve_kind_by_token("good") is None


class TestLookups:
    """Tests for lookups and suffixes."""

    def test_lookup_case_insensitive(self, registry: MappingRegistry) -> None:
        assert registry.resolve_kind_by_token("DC") == "DeploymentConfig"
        assert registry.resolve_kind_by_token("Svc") == "Service"

    def test_uppercase_tokens_indexed_case_insensitive(self) -> None:
        registry = MappingRegistry([("Foo", ["FOO"])])
        assert registry.resolve_kind_by_token("foo") == "Foo"
        assert registry.resolve_kind_by_token("FoO") == "Foo"

    def test_unknown_token(self, registry: MappingRegistry) -> None:
        assert registry.resolve_kind_by_token("nope") is None
        assert registry.resolve_kind_by_token(None) is None

    def test_suffix_for_mapped_kind(self, registry: MappingRegistry) -> None:
        assert registry.suffix_for_kind("app", "DeploymentConfig") == "app-deploymentconfig"
        assert registry.suffix_for_kind("app", "Service") == "app-service"

    def test_suffix_for_unmapped_kind(self, registry: MappingRegistry) -> None:
        assert registry.suffix_for_kind("app", "CustomThing") == "app-cr"

    def test_known_tokens_sorted(self, registry: MappingRegistry) -> None:
        tokens = registry.known_tokens()
        assert tokens == sorted(tokens)
        assert "dc" in tokens
        assert "svc" in tokens

    def test_contains(self, registry: MappingRegistry) -> None:
        assert "dc" in registry
        assert "nope" not in registry
        assert 42 not in registry

    def test_mappings_snapshot(self, registry: MappingRegistry) -> None:
        snapshot = registry.mappings()
        assert snapshot["DeploymentConfig"] == ["dc", "deploymentconfig"]
        snapshot["DeploymentConfig"].append("changed")
        assert registry.mappings()["DeploymentConfig"] == ["dc", "deploymentconfig"]


class TestConcurrency:
    """Readers never see a half-applied entry."""

    def test_concurrent_upserts_and_reads(self) -> None:
        registry = MappingRegistry()
        errors: list[str] = []

        def writer(index: int) -> None:
            registry.upsert([(f"Kind{index}", [f"a{index}", f"b{index}"])])

        def reader(index: int) -> None:
            kind = registry.resolve_kind_by_token(f"b{index}")
            if kind is not None and registry.resolve_kind_by_token(f"a{index}") != kind:
                errors.append(f"partial entry for Kind{index}")

        threads = []
        for i in range(50):
            threads.append(threading.Thread(target=writer, args=(i,)))
            threads.append(threading.Thread(target=reader, args=(i,)))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(registry) == 100


class TestDefaultRegistry:
    """Tests for the process-wide registry."""

    def test_cached(self) -> None:
        assert get_default_registry() is get_default_registry()

    def test_reset(self) -> None:
        first = get_default_registry()
        reset_default_registry()
        assert get_default_registry() is not first

    def test_module_level_helpers(self) -> None:
        upsert_mappings([("Widget", ["widget", "wd"])])
        assert get_default_registry().resolve_kind_by_token("wd") == "Widget"
        assert suffix_for_kind("app", "Widget") == "app-wd"

    def test_explicit_registry_preferred(self) -> None:
        registry = MappingRegistry()
        upsert_mappings([("Widget", ["wd"])], registry=registry)
        assert suffix_for_kind("app", "Widget", registry=registry) == "app-wd"
        assert get_default_registry().resolve_kind_by_token("wd") is None

    def test_seeded_from_mappings_file(self, tmp_path: Path, monkeypatch) -> None:
        from kubefrag.core.config import reload_config

        mappings_file = tmp_path / "mappings.yaml"
        mappings_file.write_text("mappings:\n  - kind: Widget\n    tokens: [wd]\n")
        monkeypatch.setenv("KUBEFRAG_MAPPINGS_FILE", str(mappings_file))
        reload_config()
        reset_default_registry()

        assert get_default_registry().resolve_kind_by_token("wd") == "Widget"
        assert get_default_registry().resolve_kind_by_token("dc") == "DeploymentConfig"
