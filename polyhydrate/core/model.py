"""Model Base — constructor-driven hydration for model classes.

Invariants:
    - Constructor signature is (data, *constructor_args), the shape the Hydrator
      uses for nested instances
    - Forwarded constructor args become the instance's model_constructor_args,
      so every level of a nested graph receives the same dependencies
    - Model defines no get_/set_/add_ methods of its own (they would become accessors)

Design Decisions:
    - Mixin over metaclass: subclasses stay plain Python classes
    - model_hydrator class attribute: subclasses bound to a custom registry or
      strict mode override it once instead of per call
    - Instances built during a nested load keep the enclosing Hydrator for later
      load_data/update_data calls; an explicit model_hydrator still wins
"""

from collections.abc import Mapping
from typing import Any, ClassVar

from polyhydrate.core.dehydrator import dehydrate
from polyhydrate.core.domain_types import LoadMode, active_context
from polyhydrate.core.hydrator import Hydrator, ReplaceCollections, default_hydrator


class Model:
    """Base class for hydratable models."""

    model_constructor_args: tuple[Any, ...] = ()
    model_can_be_updated: bool = True
    model_hydrator: ClassVar[Hydrator | None] = None
    _bound_hydrator: Hydrator | None = None

    def __init__(self, data: Mapping[str, Any] | None = None, *constructor_args: Any):
        context = active_context.get()
        if context is not None and context.hydrator is not None:
            # built by a Hydrator: keep its registry, naming and strict mode
            self._bound_hydrator = context.hydrator
        if constructor_args:
            self.model_constructor_args = tuple(constructor_args)
        if data:
            self.load_data(data)

    def _hydrator(self) -> Hydrator:
        return type(self).model_hydrator or self._bound_hydrator or default_hydrator

    def load_data(
        self,
        data: Mapping[str, Any],
        update: bool = False,
        replace_collections: ReplaceCollections = None,
    ) -> None:
        mode = LoadMode.UPDATE if update else LoadMode.INITIAL
        self._hydrator().load(self, data, mode, replace_collections)

    def update_data(
        self, data: Mapping[str, Any], replace_collections: ReplaceCollections = None,
    ) -> None:
        self._hydrator().update(self, data, replace_collections)

    def to_dict(self) -> dict[str, Any]:
        return dehydrate(self, registry=self._hydrator().registry)
