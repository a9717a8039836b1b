"""Hydrator — recursive load/update of model instances from untyped records.

Invariants:
    - Keys processed in the data's own order; each binding mutates at most once
    - INITIAL mode skips None values; UPDATE mode applies them
    - Object-valued bindings construct new instances: discriminate, then call
      concrete(element, *parent.model_constructor_args)
    - UPDATE + collection not marked for replacement → add_<field> per element;
      everything else → a single set_<field> call (or setattr for DIRECT_FIELD)
    - update() is a complete no-op when instance.model_can_be_updated is false
    - Errors unwind the whole call; earlier keys stay applied (no rollback)

Design Decisions:
    - Stateless between calls: one Hydrator can serve every model in a process
    - Unbound keys dropped by default, UnboundKeyError in strict mode
    - HydrationContext carries forwarded constructor args and this Hydrator, never
      the instance itself; nested Model constructors load through the same Hydrator
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable

from polyhydrate.config import get_settings
from polyhydrate.core.capabilities import ADDER_PREFIX, SETTER_PREFIX
from polyhydrate.core.domain_types import (
    BindingKind, FieldBinding, HydrationContext, LoadMode, active_context,
)
from polyhydrate.core.errors import UnboundKeyError
from polyhydrate.core.naming import to_snake_case
from polyhydrate.core.registry import TypeRegistry, default_registry
from polyhydrate.core.resolve_discriminator import resolve_discriminator
from polyhydrate.core.resolve_property import is_composite, resolve_property

logger = logging.getLogger(__name__)

ReplaceCollections = bool | Mapping[str, bool] | None


class Hydrator:
    """Drives property binding, discrimination and merge policy."""

    def __init__(
        self,
        registry: TypeRegistry | None = None,
        name_converter: Callable[[str], str] = to_snake_case,
        strict_keys: bool | None = None,
    ):
        self.registry = registry or default_registry
        self.name_converter = name_converter
        self.strict_keys = (
            get_settings().strict_keys if strict_keys is None else strict_keys
        )

    def load(
        self,
        instance: object,
        data: Mapping[str, Any],
        mode: LoadMode = LoadMode.INITIAL,
        replace_collections: ReplaceCollections = None,
    ) -> None:
        """Bind every key of `data` onto `instance`."""
        context = HydrationContext.for_instance(instance, self)
        for key, value in data.items():
            if value is None and mode == LoadMode.INITIAL:
                # nulls are ignored unless updating
                continue

            binding = resolve_property(
                instance, key, value,
                registry=self.registry, name_converter=self.name_converter,
            )
            if binding is None:
                self._drop(instance, key, mode)
                continue

            if binding.kind == BindingKind.DIRECT_FIELD:
                setattr(instance, binding.field, value)
                continue

            if binding.is_object_valued and is_composite(value):
                value = self._construct(binding, value, context)

            if (
                binding.is_collection
                and mode == LoadMode.UPDATE
                and not _replaces(replace_collections, binding)
            ):
                adder = getattr(instance, ADDER_PREFIX + binding.field)
                for element in _elements(value):
                    adder(element)
                continue

            getattr(instance, SETTER_PREFIX + binding.field)(value)

    def update(
        self,
        instance: object,
        data: Mapping[str, Any],
        replace_collections: ReplaceCollections = None,
    ) -> None:
        """Merge `data` into an existing instance, if it allows updates."""
        if not getattr(instance, "model_can_be_updated", True):
            logger.debug(
                "Update skipped: model is not updatable",
                extra={"type_name": self.registry.qualified_name(type(instance))},
            )
            return
        self.load(instance, data, LoadMode.UPDATE, replace_collections)

    def _construct(
        self, binding: FieldBinding, value: Any, context: HydrationContext,
    ) -> Any:
        if not binding.is_collection:
            if isinstance(value, Mapping):
                return self._build(binding.element_type, value, context)
            return value
        if isinstance(value, Mapping):
            return {
                k: self._build(binding.element_type, v, context)
                for k, v in value.items()
            }
        built = [self._build(binding.element_type, v, context) for v in value]
        return tuple(built) if isinstance(value, tuple) else built

    def _build(self, base_type: type, element: Any, context: HydrationContext) -> Any:
        if not isinstance(element, Mapping):
            return element
        concrete = resolve_discriminator(base_type, element, registry=self.registry)
        token = active_context.set(context)
        try:
            return concrete(element, *context.constructor_args)
        finally:
            active_context.reset(token)

    def _drop(self, instance: object, key: str, mode: LoadMode) -> None:
        type_name = self.registry.qualified_name(type(instance))
        if self.strict_keys:
            raise UnboundKeyError(key, type_name)
        logger.debug(
            f"Dropped unbound key '{key}'",
            extra={"type_name": type_name, "key": key, "mode": mode.value},
        )


def _replaces(replace_collections: ReplaceCollections, binding: FieldBinding) -> bool:
    if not replace_collections:
        return False
    if isinstance(replace_collections, Mapping):
        return bool(
            replace_collections.get(binding.field)
            or replace_collections.get(binding.key)
        )
    return True


def _elements(value: Any) -> list:
    if isinstance(value, Mapping):
        return list(value.values())
    return list(value)


default_hydrator = Hydrator()
