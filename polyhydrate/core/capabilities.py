"""Capability Tables — per-type accessor surface, built once and cached.

Invariants:
    - Fields are class-level annotations, base classes first, in declaration order
    - Names starting with '_' or 'model_' and ClassVar annotations are never fields
    - Accessors are get_<field> / set_<field> / add_<field> methods on the class
    - A setter accepts a collection when its first parameter is a collection shape
    - element_type is a non-builtin class; scalars and untyped parameters get None
    - An unresolvable forward reference degrades that one accessor to untyped

Design Decisions:
    - Accessors discovered once per class, never per call: the hydrator only reads tables
    - Optional[X] unwrapped to X: an optional nested object is still object-valued
"""

import collections.abc
import inspect
import types
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union, get_args, get_origin, get_type_hints

from polyhydrate.core.errors import ModelNotRegisteredError

GETTER_PREFIX = "get_"
SETTER_PREFIX = "set_"
ADDER_PREFIX = "add_"

_COLLECTION_SHAPES = {
    list, tuple, set, frozenset, dict,
    collections.abc.Iterable,
    collections.abc.Collection,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
}


@dataclass(frozen=True)
class SetterSpec:
    """Setter parameter shape as declared by its first parameter."""
    name: str
    accepts_collection: bool
    element_type: type | None


@dataclass(frozen=True)
class ModelCapabilities:
    """Accessor table for one model type."""
    model_type: type
    fields: tuple[str, ...]
    getters: dict[str, str] = field(default_factory=dict)
    setters: dict[str, SetterSpec] = field(default_factory=dict)
    adders: dict[str, SetterSpec] = field(default_factory=dict)

    def has_field(self, name: str) -> bool:
        return name in self.fields


def build_capabilities(model_type: type) -> ModelCapabilities:
    """Inspect a class once and produce its accessor table."""
    if not isinstance(model_type, type):
        raise ModelNotRegisteredError(repr(model_type))

    getters: dict[str, str] = {}
    setters: dict[str, SetterSpec] = {}
    adders: dict[str, SetterSpec] = {}
    for attr, member in inspect.getmembers(model_type, callable):
        if attr.startswith(GETTER_PREFIX):
            getters[attr[len(GETTER_PREFIX):]] = attr
        elif attr.startswith(SETTER_PREFIX):
            setters[attr[len(SETTER_PREFIX):]] = _setter_spec(attr, member)
        elif attr.startswith(ADDER_PREFIX):
            adders[attr[len(ADDER_PREFIX):]] = _setter_spec(attr, member)

    return ModelCapabilities(
        model_type=model_type,
        fields=_declared_fields(model_type),
        getters=getters,
        setters=setters,
        adders=adders,
    )


def _declared_fields(model_type: type) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for klass in reversed(model_type.__mro__):
        if klass is object:
            continue
        for name, hint in inspect.get_annotations(klass).items():
            if name.startswith("_") or name.startswith("model_"):
                continue
            if _is_class_var(hint):
                continue
            seen.setdefault(name, None)
    return tuple(seen)


def _is_class_var(hint: Any) -> bool:
    if isinstance(hint, str):
        return hint.startswith(("ClassVar", "typing.ClassVar"))
    return hint is ClassVar or get_origin(hint) is ClassVar


def _setter_spec(name: str, method: Any) -> SetterSpec:
    hint = _first_parameter_hint(method)
    if hint is None:
        return SetterSpec(name, accepts_collection=False, element_type=None)
    hint = _unwrap_optional(hint)
    if _is_collection_shape(hint):
        return SetterSpec(name, accepts_collection=True, element_type=None)
    return SetterSpec(name, accepts_collection=False, element_type=_object_type(hint))


def _first_parameter_hint(method: Any) -> Any:
    try:
        params = list(inspect.signature(method).parameters.values())
    except (TypeError, ValueError, NameError):
        return None
    # unbound function: skip self
    if params and params[0].name in ("self", "cls"):
        params = params[1:]
    if not params:
        return None
    first = params[0]
    if first.annotation is inspect.Parameter.empty:
        return None
    try:
        hints = get_type_hints(method)
    except NameError:
        # unresolvable forward reference: keep a real class, else untyped
        return first.annotation if isinstance(first.annotation, type) else None
    return hints.get(first.name)


def _unwrap_optional(hint: Any) -> Any:
    if get_origin(hint) in (Union, types.UnionType):
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _is_collection_shape(hint: Any) -> bool:
    return hint in _COLLECTION_SHAPES or get_origin(hint) in _COLLECTION_SHAPES


def _object_type(hint: Any) -> type | None:
    if isinstance(hint, type) and hint.__module__ not in ("builtins", "typing"):
        return hint
    return None
