from __future__ import annotations

from pathlib import Path

import pytest

from helpers.io_utils import write_json
from strata.core.context import ContextStore
from strata.core.exceptions import MalformedDocumentError, MissingDocumentError
from strata.core.utils.merge import MISSING


def test_get_and_set() -> None:
    store = ContextStore({"stage": "dev"})
    store.set("region", "eu-west-1")
    store["domainName"] = "example.com"

    assert store.get("stage") == "dev"
    assert store["region"] == "eu-west-1"
    assert store.get("domainName") == "example.com"
    assert store.get("missing") is None
    assert store.get("missing", "fallback") == "fallback"
    assert store.lookup("missing") is MISSING
    with pytest.raises(KeyError):
        store["missing"]


def test_null_value_is_present_but_none() -> None:
    store = ContextStore({"subDomain": None})
    assert "subDomain" in store
    assert store.get("subDomain", "fallback") is None


def test_seed_mapping_is_copied() -> None:
    seed = {"stage": "dev"}
    store = ContextStore(seed)
    store.set("stage", "prd")
    assert seed == {"stage": "dev"}


def test_child_reads_fall_back_to_parent_and_writes_stay_local() -> None:
    parent = ContextStore({"region": "eu-west-1", "stage": "dev"})
    child = ContextStore({"stage": "tst"}, parent=parent)

    child.set("domainName", "example.com")

    assert child.get("region") == "eu-west-1"
    assert child.get("stage") == "tst"
    assert parent.get("stage") == "dev"
    assert "domainName" not in parent
    assert child.keys() == ["region", "stage", "domainName"]
    assert len(child) == 3
    assert child.to_dict() == {"region": "eu-west-1", "stage": "tst", "domainName": "example.com"}


def test_stores_compare_by_visible_content() -> None:
    assert ContextStore({"a": {"b": 1}}) == ContextStore({"a": {"b": 1}})
    assert ContextStore({"a": 1}) != ContextStore({"a": 2})


def test_from_manifest_reads_nested_context(tmp_path: Path) -> None:
    write_json(tmp_path / "cdk.json", {"app": "npx ts-node app.ts", "context": {"stage": "dev"}})

    store = ContextStore.from_manifest("cdk.json", project_root=tmp_path)

    assert store.to_dict() == {"stage": "dev"}


def test_from_manifest_reads_flat_document(tmp_path: Path) -> None:
    write_json(tmp_path / "pulumi.json", {"stage": "dev", "accountId": "123"})

    store = ContextStore.from_manifest("pulumi.json", project_root=tmp_path)

    assert store.to_dict() == {"stage": "dev", "accountId": "123"}


def test_from_manifest_missing_raises(tmp_path: Path) -> None:
    with pytest.raises(MissingDocumentError):
        ContextStore.from_manifest("cdk.json", project_root=tmp_path)


def test_from_manifest_non_mapping_raises(tmp_path: Path) -> None:
    write_json(tmp_path / "cdk.json", ["not", "a", "mapping"])
    with pytest.raises(MalformedDocumentError):
        ContextStore.from_manifest("cdk.json", project_root=tmp_path)
