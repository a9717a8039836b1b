"""Domain Types — enums and value objects shared by the resolvers and the hydrator.

Invariants:
    - FieldBinding is immutable once resolved
    - A binding's element_type is None for scalar passthrough
    - DIRECT_FIELD bindings never carry an element_type (no nested discrimination)
    - All valid states encoded as Enums — no raw string matching
    - active_context is non-None only while the Hydrator runs a nested constructor

Design Decisions:
    - str Enums: log and serialize without custom encoders
    - Frozen dataclasses over dicts: bindings are compared and cached, never mutated
    - ContextVar over a module global: nested constructors see the enclosing
      Hydrator without changing their (data, *args) signature, per thread and task
"""

from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Any


# ─── Enums ───────────────────────────────────────────────────────

class LoadMode(str, Enum):
    """Hydration policy — INITIAL skips nulls and replaces collections."""
    INITIAL = "initial"
    UPDATE = "update"


class BindingKind(str, Enum):
    """How an input key binds to a model instance."""
    SETTER = "setter"
    COLLECTION_SETTER = "collection_setter"
    DIRECT_FIELD = "direct_field"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class FieldBinding:
    """Resolved mapping from an input key to a target on the instance."""
    key: str
    field: str
    kind: BindingKind
    element_type: type | None = None

    @property
    def is_collection(self) -> bool:
        return self.kind == BindingKind.COLLECTION_SETTER

    @property
    def is_object_valued(self) -> bool:
        return self.element_type is not None


@dataclass(frozen=True)
class HydrationContext:
    """Shared dependencies threaded through recursive construction.

    constructor_args are the parent's model_constructor_args, appended after
    the element data on every nested constructor call. hydrator is the
    Hydrator driving the enclosing load, reused by nested Model constructors.
    """
    constructor_args: tuple[Any, ...] = ()
    hydrator: Any = None

    @classmethod
    def for_instance(cls, instance: object, hydrator: Any = None) -> "HydrationContext":
        return cls(
            tuple(getattr(instance, "model_constructor_args", ()) or ()), hydrator,
        )


# Set only while a nested constructor runs; reset as soon as it returns
active_context: ContextVar[HydrationContext | None] = ContextVar(
    "polyhydrate_active_context", default=None,
)
