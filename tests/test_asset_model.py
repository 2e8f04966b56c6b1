from __future__ import annotations

import pytest
from pydantic import ValidationError

from ledger_asset.models.asset import ASSET_FIELDS, Asset


def test_construct_keeps_arguments_verbatim() -> None:
    asset = Asset.of(" asset1 ", "100", "alice", "ORG1")

    assert asset.id == " asset1 "
    assert asset.value == "100"
    assert asset.owner == "alice"
    assert asset.owner_org == "ORG1"


def test_construct_by_wire_name_and_by_attribute_name_agree() -> None:
    by_alias = Asset(ID="asset1", Value="100", Owner="Alice", OwnerOrg="Org1")
    by_name = Asset(id="asset1", value="100", owner="Alice", owner_org="Org1")

    assert by_alias == by_name
    assert by_alias == Asset.of("asset1", "100", "Alice", "Org1")


@pytest.mark.parametrize("field", ["ID", "Value", "Owner", "OwnerOrg"])
def test_construct_rejects_empty_field(field: str) -> None:
    kwargs = {"ID": "asset1", "Value": "100", "Owner": "Alice", "OwnerOrg": "Org1", field: ""}

    with pytest.raises(ValidationError):
        Asset(**kwargs)


def test_construct_rejects_non_string_and_extra_fields() -> None:
    with pytest.raises(ValidationError):
        Asset(ID="asset1", Value=100, Owner="Alice", OwnerOrg="Org1")
    with pytest.raises(ValidationError):
        Asset(ID="asset1", Value="100", Owner="Alice", OwnerOrg="Org1", Color="blue")


def test_asset_is_immutable() -> None:
    asset = Asset.of("asset1", "100", "Alice", "Org1")

    with pytest.raises(ValidationError):
        asset.owner = "Mallory"
    assert asset.owner == "Alice"


def test_transfer_replaces_owner_and_org_together() -> None:
    before = Asset.of("asset3", "10", "Carol", "Org2")
    after = before.transferred_to("Dave", "Org3")

    assert (after.id, after.value, after.owner, after.owner_org) == ("asset3", "10", "Dave", "Org3")
    assert before.owner == "Carol"
    assert before.owner_org == "Org2"
    assert after != before


def test_with_value_keeps_identity_and_ownership() -> None:
    before = Asset.of("asset1", "100", "Alice", "Org1")
    after = before.with_value("250")

    assert after.key == before.key == "asset1"
    assert (after.owner, after.owner_org, after.value) == ("Alice", "Org1", "250")
    with pytest.raises(ValidationError):
        before.with_value("")


def test_equal_records_hash_equally() -> None:
    a = Asset.of("asset1", "100", "Alice", "Org1")
    b = Asset.of("asset1", "100", "Alice", "Org1")

    assert a == b
    assert len({a, b}) == 1


def test_wire_field_names() -> None:
    assert ASSET_FIELDS == ("ID", "Value", "Owner", "OwnerOrg")
