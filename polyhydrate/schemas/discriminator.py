"""Discriminator Schemas — per-base-type polymorphism descriptor.

Invariants:
    - Descriptor is immutable and attached to a base type, never to instances
    - Empty discriminator_field is representable; it is rejected at resolution
      time (DiscriminatorConfigError), not at class definition
    - map values are partial type names or fully qualified registry ids

Design Decisions:
    - Pydantic model over TypedDict: camelCase keys accepted via aliases, so a
      descriptor can be declared from the same dict shape the payloads use
    - Protocol over ABC for Discriminated: non-polymorphic bases simply do not
      define discriminator_descriptor()
"""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DiscriminatorDescriptor(BaseModel):
    """Selects a concrete subtype from a field of the incoming data.

    Example:
        DiscriminatorDescriptor(discriminator_field="type", subclass_suffix="Item",
                                map={"discount": "PromoItem"})
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel,
    )

    discriminator_field: str = ""
    subclass_namespace: str | None = None
    subclass_suffix: str | None = None
    map: dict[str, str] = Field(default_factory=dict)


class Discriminated(Protocol):
    """Structural contract for polymorphic base types."""

    @classmethod
    def discriminator_descriptor(cls) -> DiscriminatorDescriptor: ...
