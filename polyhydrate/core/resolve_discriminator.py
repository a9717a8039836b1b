"""Discriminator Resolution — picks the concrete subtype for a polymorphic base.

Invariants:
    - A base type without discriminator_descriptor() resolves to itself
    - Checks run in order: config (field named) → data (value present) → lookup
    - Candidate name: map[value] if mapped, else studly caps of value + suffix
    - Lookup tries the bare candidate, then '<namespace><sep><candidate>' where
      namespace defaults to the base type's module
    - Failure raises; there is no fallback to the base type

Design Decisions:
    - Registry lookup over dynamic import: resolution never executes module code
    - Descriptor may be returned as a plain dict; it is validated into a
      DiscriminatorDescriptor so camelCase keys keep working
"""

import logging
from collections.abc import Mapping
from typing import Any

from polyhydrate.core.errors import (
    DiscriminatorConfigError, DiscriminatorDataError, TypeNotFoundError,
)
from polyhydrate.core.naming import to_studly_caps
from polyhydrate.core.registry import TypeRegistry, default_registry
from polyhydrate.schemas.discriminator import DiscriminatorDescriptor

logger = logging.getLogger(__name__)


def get_descriptor(base_type: type) -> DiscriminatorDescriptor | None:
    """Return the base type's descriptor, or None when it is monomorphic."""
    factory = getattr(base_type, "discriminator_descriptor", None)
    if factory is None:
        return None
    descriptor = factory()
    if descriptor is None:
        return None
    if isinstance(descriptor, DiscriminatorDescriptor):
        return descriptor
    return DiscriminatorDescriptor.model_validate(descriptor)


def candidate_name(descriptor: DiscriminatorDescriptor, value: Any) -> str:
    """Map lookup first, then studly-caps(value + suffix)."""
    key = str(value)
    mapped = descriptor.map.get(key)
    if mapped:
        return mapped
    return to_studly_caps(key + (descriptor.subclass_suffix or ""))


def resolve_discriminator(
    base_type: type,
    data: Mapping[str, Any],
    *,
    registry: TypeRegistry = default_registry,
) -> type:
    """Resolve the concrete class to instantiate for `data`."""
    descriptor = get_descriptor(base_type)
    if descriptor is None:
        return base_type

    base_name = registry.qualified_name(base_type)
    field = descriptor.discriminator_field
    if not field:
        raise DiscriminatorConfigError(base_name)

    value = data.get(field)
    if not value:
        raise DiscriminatorDataError(field, base_name)

    candidate = candidate_name(descriptor, value)
    concrete = registry.lookup(candidate)
    tried = [candidate]
    if concrete is None:
        namespace = descriptor.subclass_namespace or registry.namespace_of(base_type)
        qualified = registry.join(namespace, candidate)
        tried.append(qualified)
        concrete = registry.lookup(qualified)

    if concrete is None:
        raise TypeNotFoundError(tried, base_name, discriminator_value=str(value))

    logger.debug(
        f"Discriminated {base_name} → {registry.qualified_name(concrete)}",
        extra={
            "type_name": base_name,
            "field": field,
            "discriminator_value": str(value),
        },
    )
    return concrete
