"""
Ledger asset exceptions.

The package defines a single runtime error kind, `MalformedRecord`, raised
when bytes read from world state (or returned by a history/rich query) do not
encode a valid asset record. Callers (the chaincode transaction layer) decide
whether to abort the transaction or report the error to the client.
"""

from typing import Iterable, Tuple


class MalformedRecord(ValueError):
    """
    Raised when a serialized asset record does not match the schema.

    Attributes:
        reason (str): Human-readable description of the failure.
        fields (tuple[str, ...]): Wire names of the offending keys, if any.

    Example:
        >>> raise MalformedRecord("missing required keys", ["OwnerOrg"])
        Traceback (most recent call last):
        ...
        MalformedRecord: missing required keys: OwnerOrg
    """

    def __init__(self, reason: str, fields: Iterable[str] = ()):
        self.reason = reason
        self.fields: Tuple[str, ...] = tuple(fields)
        message = f"{reason}: {', '.join(self.fields)}" if self.fields else reason
        super().__init__(message)
