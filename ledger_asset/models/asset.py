"""
Asset model definition.

This module defines the `Asset` record stored in the ledger's world state.
An asset is a transferable, ownable item identified by `ID`, carrying an
opaque `Value` and owned by a principal (`Owner`) of an organization
(`OwnerOrg`).

The model is implemented using Pydantic and is frozen: an "update" or
"transfer" never mutates an existing instance, it builds a new record that
the transaction layer writes over the stored one under the same key.
"""

from pydantic import BaseModel, ConfigDict, Field


class Asset(BaseModel):
    """
    Represents one asset record in world state.

    All four fields are required non-empty strings and are stored exactly as
    given: no trimming or case-folding is applied. On the wire the fields are
    named `ID`, `Value`, `Owner` and `OwnerOrg`.

    Example:
        >>> asset = Asset(ID="asset1", Value="100", Owner="Alice", OwnerOrg="Org1")
        >>> asset.owner_org
        'Org1'
        >>> asset.transferred_to("Bob", "Org2").owner
        'Bob'
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
    )

    id: str = Field(..., alias="ID", min_length=1)
    """Unique key of the asset within world state. Never changes."""

    value: str = Field(..., alias="Value", min_length=1)
    """Opaque application-defined value payload."""

    owner: str = Field(..., alias="Owner", min_length=1)
    """Identifier of the current owning principal."""

    owner_org: str = Field(..., alias="OwnerOrg", min_length=1)
    """Organization the current owner belongs to. Changes only with `owner`."""

    @classmethod
    def of(cls, asset_id: str, value: str, owner: str, owner_org: str) -> "Asset":
        """Build an asset from positional arguments."""
        return cls(ID=asset_id, Value=value, Owner=owner, OwnerOrg=owner_org)

    @property
    def key(self) -> str:
        """World-state key under which this record is stored."""
        return self.id

    def with_value(self, value: str) -> "Asset":
        """
        Returns a new record with `value` replaced.

        Args:
            value (str): New value payload.

        Returns:
            Asset: A validated copy; `self` is left untouched.
        """

        return Asset.of(self.id, value, self.owner, self.owner_org)

    def transferred_to(self, owner: str, owner_org: str) -> "Asset":
        """
        Returns a new record owned by `owner` of `owner_org`.

        Both ownership fields are replaced together so a reader can never
        observe a new owner paired with the previous organization.

        Args:
            owner (str): Identifier of the new owning principal.
            owner_org (str): Organization of the new owner.

        Returns:
            Asset: A validated copy with the same `ID` and `Value`.
        """

        return Asset.of(self.id, self.value, owner, owner_org)


# Wire names, in declaration order.
ASSET_FIELDS = tuple(field.alias for field in Asset.model_fields.values())
