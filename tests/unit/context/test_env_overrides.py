from __future__ import annotations

import pytest

from strata.core.context import ContextStore, apply_env_overrides, coerce_value
from strata.core.context.env import parse_env_key
from strata.core.exceptions import InvalidContextError


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("true", True),
        (" False ", False),
        ("42", 42),
        ("-7", -7),
        ("1.5", 1.5),
        ('["a", "b"]', ["a", "b"]),
        ('{"k": 1}', {"k": 1}),
        ("[not json", "[not json"),
        ("  eu-west-1 ", "eu-west-1"),
    ],
)
def test_coerce_value(raw: str, expected) -> None:
    assert coerce_value(raw) == expected


def test_top_level_and_nested_overrides_merge_into_store() -> None:
    store = ContextStore({"api": {"timeout": 30, "retries": 3}, "stage": "dev"})
    environ = {
        "STRATA_CONTEXT_stage": "prd",
        "STRATA_CONTEXT_api__timeout": "60",
        "UNRELATED": "ignored",
    }

    applied = apply_env_overrides(store, environ)

    assert store.get("stage") == "prd"
    assert store.get("api") == {"timeout": 60, "retries": 3}
    assert sorted(applied) == ["api", "stage"]


def test_override_matches_existing_key_case_insensitively() -> None:
    store = ContextStore({"domainName": "example.com"})

    apply_env_overrides(store, {"STRATA_CONTEXT_DOMAINNAME": "example.org"})

    assert store.to_dict() == {"domainName": "example.org"}


def test_reads_process_environment_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRATA_CONTEXT_region", "us-east-1")
    store = ContextStore()

    apply_env_overrides(store)

    assert store.get("region") == "us-east-1"


def test_custom_prefix() -> None:
    store = ContextStore()
    apply_env_overrides(store, {"CDK_CTX_stage": "uat"}, prefix="CDK_CTX_")
    assert store.get("stage") == "uat"


@pytest.mark.parametrize("raw", ["api____timeout", "api__", "__api"])
def test_empty_segments_are_rejected(raw: str) -> None:
    with pytest.raises(InvalidContextError):
        parse_env_key(raw)


def test_bare_prefix_is_rejected() -> None:
    with pytest.raises(InvalidContextError):
        apply_env_overrides(ContextStore(), {"STRATA_CONTEXT_": "x"})
