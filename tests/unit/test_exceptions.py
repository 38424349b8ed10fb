from __future__ import annotations

from pathlib import Path

from strata.core.exceptions import (
    InvalidContextError,
    MalformedDocumentError,
    MissingDocumentError,
    StrataError,
)


def test_context_is_copied() -> None:
    ctx = {"stage": "prd"}
    err = StrataError("boom", context=ctx)
    ctx["stage"] = "dev"

    assert err.context == {"stage": "prd"}
    assert err.to_json_error() == {
        "message": "boom",
        "code": "StrataError",
        "context": {"stage": "prd"},
    }


def test_document_errors_carry_path_and_builtin_bases() -> None:
    missing = MissingDocumentError("gone", path=Path("/x/extra.json"))
    malformed = MalformedDocumentError("bad", path=Path("/x/bad.json"), context={"line": 3})

    assert isinstance(missing, FileNotFoundError) and isinstance(missing, StrataError)
    assert isinstance(malformed, ValueError)
    assert str(missing) == "gone"
    assert missing.context == {"path": "/x/extra.json"}
    assert malformed.context == {"line": 3, "path": "/x/bad.json"}


def test_invalid_context_is_value_error() -> None:
    err = InvalidContextError("wrong shape")
    assert isinstance(err, ValueError)
    assert err.context == {}
