"""
History schemas.

This module defines the Pydantic schema for one entry of a key history query.
The ledger returns, for every transaction that touched a key, the transaction
id, its timestamp, whether it deleted the key, and the record as written by
that transaction.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ledger_asset.models.asset import Asset


class AssetHistoryEntry(BaseModel):
    """
    Represents one historical version of an asset key.

    Example:
        >>> entry = AssetHistoryEntry(
        ...     TxId="3f2a...",
        ...     Timestamp="2024-05-01T10:00:00Z",
        ...     IsDelete=False,
        ...     Record=Asset.of("asset1", "100", "Alice", "Org1"),
        ... )
        >>> entry.record.owner
        'Alice'
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    tx_id: str = Field(..., alias="TxId", min_length=1, strict=True)
    """Identifier of the transaction that produced this version."""

    timestamp: datetime = Field(..., alias="Timestamp")
    """Time at which the transaction was committed."""

    is_delete: bool = Field(False, alias="IsDelete", strict=True)
    """Whether the transaction deleted the key."""

    record: Optional[Asset] = Field(None, alias="Record")
    """The record as written, absent for delete entries."""

    @field_validator("timestamp", mode="before")
    @classmethod
    def parse_timestamp(cls, v):
        # ISO-8601 text only; epoch numbers are not accepted
        if isinstance(v, datetime):
            return v
        if not isinstance(v, str):
            raise ValueError("Timestamp must be an ISO-8601 string")
        return datetime.fromisoformat(v.replace("Z", "+00:00"))

    @model_validator(mode="after")
    def require_record_unless_deleted(self):
        if not self.is_delete and self.record is None:
            raise ValueError("Record is required for non-delete history entries")
        return self
