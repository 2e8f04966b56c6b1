"""
Assets service.

This module defines the operations the chaincode transaction layer uses to
move `Asset` records in and out of world state: canonical serialization,
strict deserialization of single records, query results and key history,
and the comparisons used by history and audit code.

All functions are pure. The only error raised is `MalformedRecord`, always
propagated to the caller.
"""

from typing import Dict, List, Tuple
from pydantic import ValidationError

from ledger_asset.core.config import IGNORE, REJECT, UNKNOWN_FIELD_POLICIES, get_logger
from ledger_asset.core.exceptions import MalformedRecord
from ledger_asset.models.asset import ASSET_FIELDS, Asset
from ledger_asset.schemas.history import AssetHistoryEntry
from ledger_asset.util.ledger_helpers import (
    RawRecord,
    canonical_json_bytes,
    load_json_array,
    load_json_object,
)

logger = get_logger(__name__)

HISTORY_FIELDS = ("TxId", "Timestamp", "IsDelete", "Record")


def serialize_asset(asset: Asset) -> bytes:
    """
    Serializes an asset to its canonical world-state encoding.

    Equal field values always produce byte-identical output.

    Args:
        asset (Asset): Record to encode.

    Returns:
        bytes: Canonical JSON with keys `ID`, `Owner`, `OwnerOrg`, `Value`.

    Example:
        >>> serialize_asset(Asset.of("asset1", "100", "Alice", "Org1"))
        b'{"ID":"asset1","Owner":"Alice","OwnerOrg":"Org1","Value":"100"}'
    """

    return canonical_json_bytes(asset.model_dump(by_alias=True))


def deserialize_asset(data: RawRecord, *, unknown_fields: str = REJECT) -> Asset:
    """
    Decodes world-state bytes into an `Asset`.

    Args:
        data (bytes | bytearray | str): Stored record.
        unknown_fields (str): `"reject"` (default) or `"ignore"`.

    Raises:
        MalformedRecord: If the bytes are not a JSON object holding exactly
            the four asset keys with non-empty string values (extra keys are
            tolerated only under the `"ignore"` policy).

    Returns:
        Asset: The decoded record.
    """

    return asset_from_mapping(load_json_object(data), unknown_fields=unknown_fields)


def asset_from_mapping(payload: dict, *, unknown_fields: str = REJECT) -> Asset:
    """
    Validates an already decoded JSON object as an asset record.

    Raises:
        MalformedRecord: On any schema violation.
    """

    payload = _apply_key_policy(payload, ASSET_FIELDS, _resolve_policy(unknown_fields), "asset")

    missing = [name for name in ASSET_FIELDS if name not in payload]
    if missing:
        _reject("missing required keys", missing)

    bad = [name for name in ASSET_FIELDS if not isinstance(payload[name], str) or not payload[name]]
    if bad:
        _reject("keys must hold non-empty strings", bad)

    try:
        return Asset.model_validate(payload)
    except ValidationError as e:
        raise MalformedRecord("asset record failed validation", _error_fields(e)) from e


def deserialize_asset_list(data: RawRecord, *, unknown_fields: str = REJECT) -> List[Asset]:
    """
    Decodes a JSON array of asset records, as returned by range and rich queries.

    Raises:
        MalformedRecord: If the document is not an array or any element is
            malformed; the reason names the failing index.

    Returns:
        list[Asset]: Records in the order they were returned.
    """

    assets = []
    for index, item in enumerate(load_json_array(data)):
        assets.append(_element(index, item, unknown_fields, asset_from_mapping))
    return assets


def deserialize_history(data: RawRecord, *, unknown_fields: str = REJECT) -> List[AssetHistoryEntry]:
    """
    Decodes the result of a key history query.

    The document is a JSON array of entries shaped as
    `{"TxId": ..., "Timestamp": ..., "IsDelete": ..., "Record": {...}}`.
    `Record` is validated with the same rules as `deserialize_asset` and may
    be missing or null only on delete entries.

    Raises:
        MalformedRecord: If the document or any entry is malformed.

    Returns:
        list[AssetHistoryEntry]: Entries in ledger order.
    """

    entries = []
    for index, item in enumerate(load_json_array(data)):
        entries.append(_element(index, item, unknown_fields, _history_entry_from_mapping))
    return entries


def assets_equal(a: Asset, b: Asset) -> bool:
    """Field-wise equality of two records, used for history and audit comparison."""
    return all(getattr(a, name) == getattr(b, name) for name in Asset.model_fields)


def same_asset(a: Asset, b: Asset) -> bool:
    """Whether two records describe the same asset, i.e. share an `ID`."""
    return a.id == b.id


def changed_fields(before: Asset, after: Asset) -> Dict[str, Tuple[str, str]]:
    """
    Lists the fields that differ between two versions of a record.

    Returns:
        dict[str, tuple[str, str]]: Wire name mapped to `(old, new)`.

    Example:
        >>> a = Asset.of("asset3", "10", "Carol", "Org2")
        >>> changed_fields(a, a.transferred_to("Dave", "Org3"))
        {'Owner': ('Carol', 'Dave'), 'OwnerOrg': ('Org2', 'Org3')}
    """

    old = before.model_dump(by_alias=True)
    new = after.model_dump(by_alias=True)
    return {name: (old[name], new[name]) for name in ASSET_FIELDS if old[name] != new[name]}

# ------------------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------------------

def _resolve_policy(unknown_fields: str) -> str:
    if unknown_fields not in UNKNOWN_FIELD_POLICIES:
        raise ValueError(f"Invalid unknown_fields policy {unknown_fields!r}, expected one of {UNKNOWN_FIELD_POLICIES}")
    return unknown_fields


def _apply_key_policy(payload: dict, allowed: Tuple[str, ...], policy: str, what: str) -> dict:
    unknown = [name for name in payload if name not in allowed]
    if not unknown:
        return payload
    if policy == IGNORE:
        logger.debug("Ignoring unknown %s keys: %s", what, unknown)
        return {name: payload[name] for name in allowed if name in payload}
    _reject(f"unexpected {what} keys", unknown)


def _history_entry_from_mapping(payload: dict, *, unknown_fields: str = REJECT) -> AssetHistoryEntry:
    payload = _apply_key_policy(payload, HISTORY_FIELDS, _resolve_policy(unknown_fields), "history entry")

    record = payload.get("Record")
    if record is not None:
        if not isinstance(record, dict):
            _reject("history Record must be a JSON object", ["Record"])
        payload = {**payload, "Record": asset_from_mapping(record, unknown_fields=unknown_fields)}

    try:
        return AssetHistoryEntry.model_validate(payload)
    except ValidationError as e:
        raise MalformedRecord("history entry failed validation", _error_fields(e)) from e


def _element(index: int, item, unknown_fields: str, parse):
    if not isinstance(item, dict):
        _reject(f"element {index} must be a JSON object, got {type(item).__name__}")
    try:
        return parse(item, unknown_fields=unknown_fields)
    except MalformedRecord as e:
        raise MalformedRecord(f"element {index}: {e.reason}", e.fields) from e


def _error_fields(error: ValidationError) -> List[str]:
    return [str(err["loc"][0]) for err in error.errors() if err["loc"]]


def _reject(reason: str, fields=()) -> None:
    logger.debug("Rejecting record: %s %s", reason, list(fields))
    raise MalformedRecord(reason, fields)
