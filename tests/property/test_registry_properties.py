"""Property tests for the kind/filename mapping registry.

For any sequence of valid upserts:
- every upserted token resolves back to its kind, whatever its case
- the kind -> token direction keeps only the last token of the latest upsert
- kinds never upserted get the ``cr`` suffix
"""

from hypothesis import given, strategies as st

from kubefrag.mappings import DEFAULT_SUFFIX_TOKEN, MappingRegistry

kind_names = st.from_regex(r"[A-Z][a-zA-Z]{0,12}", fullmatch=True)
tokens = st.from_regex(r"[a-z][a-z0-9]{0,6}", fullmatch=True)
resource_names = st.from_regex(r"[a-z][a-z0-9-]{0,15}", fullmatch=True)
entries = st.tuples(kind_names, st.lists(tokens, min_size=1, max_size=4))


def mixed_case(token: str, flips: list[bool]) -> str:
    return "".join(
        char.upper() if flip else char for char, flip in zip(token, flips + [False] * len(token))
    )


@given(st.lists(entries, min_size=1, max_size=8))
def test_lookup_inverts_upsert(batch) -> None:
    """Every token resolves to the kind of the last upsert that named it."""
    registry = MappingRegistry()
    registry.upsert(batch)

    expected: dict[str, str] = {}
    for kind, kind_tokens in batch:
        for token in kind_tokens:
            expected[token] = kind

    for token, kind in expected.items():
        assert registry.resolve_kind_by_token(token) == kind


@given(entries, st.lists(st.booleans(), max_size=8))
def test_lookup_case_insensitive(entry, flips) -> None:
    """Token lookups ignore case."""
    kind, kind_tokens = entry
    registry = MappingRegistry([entry])
    for token in kind_tokens:
        assert registry.resolve_kind_by_token(mixed_case(token, flips)) == kind
        assert registry.resolve_kind_by_token(token.upper()) == kind


@given(kind_names, st.lists(st.lists(tokens, min_size=1, max_size=4), min_size=1, max_size=4))
def test_kind_keeps_last_token_of_latest_upsert(kind, upserts) -> None:
    """Repeated upserts of one kind keep only the final token for suffixes."""
    registry = MappingRegistry()
    for kind_tokens in upserts:
        registry.upsert([(kind, kind_tokens)])

    assert registry.resolve_token_by_kind(kind) == upserts[-1][-1]
    # Earlier tokens still resolve unless reassigned
    for kind_tokens in upserts:
        for token in kind_tokens:
            assert registry.resolve_kind_by_token(token) == kind


@given(resource_names, kind_names)
def test_unmapped_kind_suffix(name, kind) -> None:
    """Kinds with no mapping get the ``cr`` suffix."""
    registry = MappingRegistry()
    assert registry.suffix_for_kind(name, kind) == f"{name}-{DEFAULT_SUFFIX_TOKEN}"


@given(resource_names, entries)
def test_mapped_kind_suffix(name, entry) -> None:
    kind, kind_tokens = entry
    registry = MappingRegistry([entry])
    assert registry.suffix_for_kind(name, kind) == f"{name}-{kind_tokens[-1]}"
