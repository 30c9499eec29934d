"""
Common domain model building blocks.

EntityModel is the base for every stored kind. Fields left out of the
constructor stay out of model_fields_set, which is what the ad hoc query
engine uses to tell "not specified" from a legitimate zero or empty value.

Dependencies: pydantic
System role: Shared base for domain entities
"""

import enum

from pydantic import BaseModel, ConfigDict


class SourceKind(str, enum.Enum):
    """
    External catalog sources.

    BGG: BoardGameGeek game catalog
    CSI: CoolStuffInc price feed
    MM: Miniature Market price feed
    """

    BGG = "bgg"
    CSI = "csi"
    MM = "mm"


class EntityModel(BaseModel):
    """Base class for all persisted domain entities."""

    model_config = ConfigDict(from_attributes=True)

    def populated_fields(self) -> dict:
        """Return only the fields the caller explicitly set, keyed by name."""
        return self.model_dump(exclude_unset=True)
