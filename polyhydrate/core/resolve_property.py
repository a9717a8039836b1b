"""Property Resolution — binds an input key to a setter, collection setter, or field.

Invariants:
    - Setter wins over direct field; direct field wins over nothing
    - COLLECTION_SETTER requires a composite value, a collection-shaped setter
      parameter, and an add_<field> adder; element type comes from the adder
    - DIRECT_FIELD is scalar passthrough only (no element type, no discrimination)
    - Unbound keys return None — never an error here

Design Decisions:
    - Pure lookup against the cached capability table: no reflection per key
    - Name conversion injected: external key conventions are the caller's concern
"""

from collections.abc import Mapping
from typing import Any, Callable

from polyhydrate.core.domain_types import BindingKind, FieldBinding
from polyhydrate.core.naming import to_snake_case
from polyhydrate.core.registry import TypeRegistry, default_registry


def is_composite(value: Any) -> bool:
    """Mappings and list/tuple sequences; strings and bytes are scalars."""
    return isinstance(value, (Mapping, list, tuple))


def resolve_property(
    instance: object,
    key: str,
    value: Any,
    *,
    registry: TypeRegistry = default_registry,
    name_converter: Callable[[str], str] = to_snake_case,
) -> FieldBinding | None:
    """Resolve how `key` binds on `instance` given the incoming `value`."""
    caps = registry.capabilities(type(instance))
    field_name = name_converter(key)

    setter = caps.setters.get(field_name)
    if setter is not None:
        if is_composite(value) and setter.accepts_collection:
            adder = caps.adders.get(field_name)
            if adder is not None:
                return FieldBinding(
                    key, field_name, BindingKind.COLLECTION_SETTER, adder.element_type,
                )
        return FieldBinding(key, field_name, BindingKind.SETTER, setter.element_type)

    if caps.has_field(field_name):
        return FieldBinding(key, field_name, BindingKind.DIRECT_FIELD)

    return None
