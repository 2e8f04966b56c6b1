from __future__ import annotations

from ledger_asset.core.exceptions import MalformedRecord


def test_malformed_record_message() -> None:
    err = MalformedRecord("missing required keys", ["Owner", "OwnerOrg"])

    assert isinstance(err, ValueError)
    assert str(err) == "missing required keys: Owner, OwnerOrg"
    assert err.fields == ("Owner", "OwnerOrg")
    assert err.reason == "missing required keys"


def test_malformed_record_without_fields() -> None:
    err = MalformedRecord("record is not valid JSON")

    assert str(err) == "record is not valid JSON"
    assert err.fields == ()
