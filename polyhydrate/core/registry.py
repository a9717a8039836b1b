"""Type Registry — canonical type identifiers mapped to model classes.

Invariants:
    - Every registered class is reachable by '<module><sep><qualname>' plus its aliases
    - An identifier maps to exactly one class; re-registering the same class is a no-op
    - Capability tables are built at most once per class, then served from cache
    - Populated at import/startup; read-only during hydration

Design Decisions:
    - Explicit registry over import-by-name: discrimination never imports modules
    - Capability tables built lazily on first use so forward references between
      models in one module resolve after the module finishes importing
"""

import logging
from typing import Callable, Iterable, TypeVar, overload

from polyhydrate.config import get_settings
from polyhydrate.core.capabilities import ModelCapabilities, build_capabilities

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


class TypeRegistry:
    """Identifier → class table with a per-class capability cache."""

    def __init__(self, separator: str | None = None):
        self.separator = separator or get_settings().namespace_separator
        self._types: dict[str, type] = {}
        self._capabilities: dict[type, ModelCapabilities] = {}

    def qualified_name(self, model_type: type) -> str:
        qualname = model_type.__qualname__.replace(".", self.separator)
        return f"{model_type.__module__}{self.separator}{qualname}"

    def namespace_of(self, model_type: type) -> str:
        return model_type.__module__

    def join(self, namespace: str, name: str) -> str:
        return f"{namespace}{self.separator}{name}"

    @overload
    def register(self, model_type: T) -> T: ...

    @overload
    def register(
        self, model_type: None = None, *, aliases: Iterable[str] = (),
    ) -> Callable[[T], T]: ...

    def register(self, model_type=None, *, aliases: Iterable[str] = ()):
        """Register a model class; usable as @register or @register(aliases=[...])."""
        def decorate(cls):
            for type_id in (self.qualified_name(cls), *aliases):
                existing = self._types.get(type_id)
                if existing is not None and existing is not cls:
                    raise ValueError(
                        f"Type id '{type_id}' already registered for "
                        f"{self.qualified_name(existing)}"
                    )
                self._types[type_id] = cls
            logger.debug(
                "Registered model", extra={"type_name": self.qualified_name(cls)},
            )
            return cls

        if model_type is not None:
            return decorate(model_type)
        return decorate

    def lookup(self, type_id: str) -> type | None:
        return self._types.get(type_id)

    def __contains__(self, type_id: str) -> bool:
        return type_id in self._types

    def is_registered(self, model_type: type) -> bool:
        return self._types.get(self.qualified_name(model_type)) is model_type

    def capabilities(self, model_type: type) -> ModelCapabilities:
        caps = self._capabilities.get(model_type)
        if caps is None:
            caps = build_capabilities(model_type)
            self._capabilities[model_type] = caps
        return caps


default_registry = TypeRegistry()


def register(model_type=None, *, aliases: Iterable[str] = ()):
    """Register on the process-wide default registry."""
    return default_registry.register(model_type, aliases=aliases)
