"""Dehydrator — instance graph back to an untyped record.

Invariants:
    - Output key order = declared field order of the instance's class
    - Only fields with a get_<field> getter are emitted; raw fields are never read
    - Registered models are dehydrated recursively with the same registry and
      key_converter; other values exposing to_dict() use their own conversion
    - Sequences and mappings: each dehydratable element converted, others untouched
"""

from collections.abc import Mapping
from typing import Any, Callable

from polyhydrate.core.registry import TypeRegistry, default_registry


def dehydrate(
    instance: object,
    *,
    registry: TypeRegistry = default_registry,
    key_converter: Callable[[str], str] | None = None,
) -> dict[str, Any]:
    caps = registry.capabilities(type(instance))
    data: dict[str, Any] = {}
    for field in caps.fields:
        getter = caps.getters.get(field)
        if getter is None:
            continue
        value = getattr(instance, getter)()
        key = key_converter(field) if key_converter else field
        data[key] = _value_data(value, registry, key_converter)
    return data


def _value_data(
    value: Any, registry: TypeRegistry, key_converter: Callable[[str], str] | None,
) -> Any:
    if isinstance(value, (list, tuple)):
        return [_element_data(v, registry, key_converter) for v in value]
    if isinstance(value, Mapping):
        return {k: _element_data(v, registry, key_converter) for k, v in value.items()}
    return _element_data(value, registry, key_converter)


def _element_data(
    value: Any, registry: TypeRegistry, key_converter: Callable[[str], str] | None,
) -> Any:
    if registry.is_registered(type(value)):
        return dehydrate(value, registry=registry, key_converter=key_converter)
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict) and not isinstance(value, type):
        return to_dict()
    return value
