"""
Ledger helpers.

Utility functions to encode and decode the JSON documents exchanged with
the ledger's world state.

Responsibilities:
    - Produce canonical, byte-for-byte reproducible JSON encodings.
    - Decode raw state bytes into a JSON object, rejecting anything that is
      not a single well-formed object with unique keys.
"""

import json
from typing import Any, Union

from ledger_asset.core.exceptions import MalformedRecord

RawRecord = Union[bytes, bytearray, str]


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Serializes an object to canonical JSON bytes.

    Keys are sorted lexicographically, no whitespace is emitted and the
    result is UTF-8 encoded with non-ASCII characters kept verbatim. Floats
    are rejected because their textual form is not stable across encoders.

    Args:
        obj (Any): JSON-compatible object made of dicts, lists, strings,
            integers, booleans and None.

    Raises:
        ValueError: If a float is found anywhere in `obj`.

    Returns:
        bytes: Canonical encoding of `obj`.
    """

    _reject_floats(obj, "$")
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    ).encode("utf-8")


def _reject_floats(obj: Any, path: str) -> None:
    if isinstance(obj, float):
        raise ValueError(f"Float not allowed in canonical JSON at {path}")
    if isinstance(obj, dict):
        for k, v in obj.items():
            _reject_floats(v, f"{path}.{k}")
    elif isinstance(obj, list):
        for i, v in enumerate(obj):
            _reject_floats(v, f"{path}[{i}]")


def _unique_keys(pairs: list) -> dict:
    seen = {}
    for k, v in pairs:
        if k in seen:
            raise MalformedRecord("duplicate key", [k])
        seen[k] = v
    return seen


def load_json(data: RawRecord) -> Any:
    """
    Decodes raw ledger bytes into a JSON value.

    Args:
        data (bytes | bytearray | str): Raw bytes read from the ledger.

    Raises:
        MalformedRecord: If the input is not UTF-8, not valid JSON, nests too
            deeply, or an object in it repeats a key.

    Returns:
        Any: The decoded JSON value.
    """

    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedRecord(f"record is not valid UTF-8 ({e.reason})") from e
    elif not isinstance(data, str):
        raise MalformedRecord(f"expected bytes or str, got {type(data).__name__}")

    try:
        return json.loads(data, object_pairs_hook=_unique_keys)
    except json.JSONDecodeError as e:
        raise MalformedRecord(f"record is not valid JSON ({e.msg} at position {e.pos})") from e
    except RecursionError as e:
        raise MalformedRecord("record is nested too deeply") from e


def load_json_object(data: RawRecord) -> dict:
    """
    Decodes raw ledger bytes that must hold a single JSON object.

    Raises:
        MalformedRecord: If decoding fails or the document is not an object.
    """

    obj = load_json(data)
    if not isinstance(obj, dict):
        raise MalformedRecord(f"record must be a JSON object, got {type(obj).__name__}")
    return obj


def load_json_array(data: RawRecord) -> list:
    """
    Decodes raw ledger bytes that must hold a JSON array.

    Raises:
        MalformedRecord: If decoding fails or the document is not an array.
    """

    obj = load_json(data)
    if not isinstance(obj, list):
        raise MalformedRecord(f"query result must be a JSON array, got {type(obj).__name__}")
    return obj
