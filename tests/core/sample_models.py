"""Sample models shared by the core tests.

Covers:
    - plain accessor models (Customer) with a direct field and a getter-less field
    - polymorphic base with suffix naming (Shape → CircleShape, SquareShape)
    - polymorphic base with a map and suffix fallback (Item → AType, BItem)
    - collections with adders (Order.line_items, Drawing.shapes)
    - two-level nesting with multi-word fields below the top (Shipment → Order)
    - non-updatable model, custom constructor args, non-Model plain class
    - broken descriptors (empty field, unregistered target, dict-shaped descriptor)
"""

from typing import Any

from polyhydrate.core.model import Model
from polyhydrate.core.registry import register
from polyhydrate.schemas.discriminator import DiscriminatorDescriptor


# ─── Plain models ────────────────────────────────────────────────

@register
class Customer(Model):
    name: str | None = None
    email: str | None = None
    secret: str | None = None

    def get_name(self) -> str | None:
        return self.name

    def set_name(self, name: str | None) -> None:
        self.name = name

    # email has a getter but no setter: hydrated as a direct field
    def get_email(self) -> str | None:
        return self.email


@register
class Invoice(Model):
    model_can_be_updated = False

    number: str | None = None

    def get_number(self) -> str | None:
        return self.number

    def set_number(self, number: str | None) -> None:
        self.number = number


class PlainPoint:
    """Not a Model: hydrated and dehydrated purely through the capability table."""
    x: int = 0
    y: int = 0

    def get_x(self) -> int:
        return self.x

    def set_x(self, x: int) -> None:
        self.x = x

    def get_y(self) -> int:
        return self.y

    def set_y(self, y: int) -> None:
        self.y = y


# ─── Shapes: suffix naming ───────────────────────────────────────

@register
class Shape(Model):
    kind: str | None = None

    @classmethod
    def discriminator_descriptor(cls) -> DiscriminatorDescriptor:
        return DiscriminatorDescriptor(discriminator_field="kind", subclass_suffix="Shape")

    def get_kind(self) -> str | None:
        return self.kind

    def set_kind(self, kind: str | None) -> None:
        self.kind = kind


@register
class CircleShape(Shape):
    radius: float | None = None

    def get_radius(self) -> float | None:
        return self.radius

    def set_radius(self, radius: float | None) -> None:
        self.radius = radius


@register
class SquareShape(Shape):
    side: float | None = None

    def get_side(self) -> float | None:
        return self.side

    def set_side(self, side: float | None) -> None:
        self.side = side


@register
class Drawing(Model):
    title: str | None = None
    main_shape: Shape | None = None
    shapes: list[Shape]

    def __init__(self, data=None, *constructor_args: Any):
        self.shapes = []
        super().__init__(data, *constructor_args)

    def get_title(self) -> str | None:
        return self.title

    def set_title(self, title: str | None) -> None:
        self.title = title

    def get_main_shape(self) -> Shape | None:
        return self.main_shape

    def set_main_shape(self, shape: Shape | None) -> None:
        self.main_shape = shape

    def get_shapes(self) -> list[Shape]:
        return self.shapes

    def set_shapes(self, shapes: list[Shape] | None) -> None:
        self.shapes = list(shapes or [])

    def add_shapes(self, shape: Shape) -> None:
        self.shapes.append(shape)


# ─── Items: map + suffix fallback ────────────────────────────────

@register
class Item(Model):
    type: str | None = None
    sku: str | None = None
    quantity: int | None = None

    @classmethod
    def discriminator_descriptor(cls) -> DiscriminatorDescriptor:
        return DiscriminatorDescriptor(
            discriminator_field="type", subclass_suffix="Item", map={"a": "AType"},
        )

    def get_type(self) -> str | None:
        return self.type

    def set_type(self, type: str | None) -> None:
        self.type = type

    def get_sku(self) -> str | None:
        return self.sku

    def set_sku(self, sku: str | None) -> None:
        self.sku = sku

    def get_quantity(self) -> int | None:
        return self.quantity

    def set_quantity(self, quantity: int | None) -> None:
        self.quantity = quantity


@register
class AType(Item):
    pass


@register
class BItem(Item):
    pass


@register
class Order(Model):
    reference: str | None = None
    customer: Customer | None = None
    line_items: list[Item]
    tags: list[str]

    def __init__(self, data=None, *constructor_args: Any):
        self.line_items = []
        self.tags = []
        super().__init__(data, *constructor_args)

    def get_reference(self) -> str | None:
        return self.reference

    def set_reference(self, reference: str | None) -> None:
        self.reference = reference

    def get_customer(self) -> Customer | None:
        return self.customer

    def set_customer(self, customer: Customer | None) -> None:
        self.customer = customer

    def get_line_items(self) -> list[Item]:
        return self.line_items

    def set_line_items(self, line_items: list[Item] | None) -> None:
        self.line_items = list(line_items or [])

    def add_line_items(self, item: Item) -> None:
        self.line_items.append(item)

    # no add_tags: a list setter without an adder receives the raw list
    def get_tags(self) -> list[str]:
        return self.tags

    def set_tags(self, tags: list[str] | None) -> None:
        self.tags = list(tags or [])


@register
class Catalog(Model):
    entries: dict[str, Item]

    def __init__(self, data=None, *constructor_args: Any):
        self.entries = {}
        super().__init__(data, *constructor_args)

    def get_entries(self) -> dict[str, Item]:
        return self.entries

    def set_entries(self, entries: dict[str, Item]) -> None:
        self.entries = dict(entries)

    def add_entries(self, entry: Item) -> None:
        self.entries[entry.sku] = entry


# ─── Constructor argument forwarding ─────────────────────────────

class PriceFormatter:
    def __init__(self, currency: str):
        self.currency = currency

    def format(self, amount: float) -> str:
        return f"{amount:.2f} {self.currency}"


@register
class Price(Model):
    amount: float | None = None

    def __init__(self, data=None, formatter: PriceFormatter | None = None):
        self.formatter = formatter
        self.model_constructor_args = (formatter,)
        super().__init__(data)

    def get_amount(self) -> float | None:
        return self.amount

    def set_amount(self, amount: float | None) -> None:
        self.amount = amount

    def display(self) -> str:
        return self.formatter.format(self.amount)


@register
class Product(Model):
    name: str | None = None
    price: Price | None = None

    def __init__(self, data=None, formatter: PriceFormatter | None = None):
        self.formatter = formatter
        self.model_constructor_args = (formatter,)
        super().__init__(data)

    def get_name(self) -> str | None:
        return self.name

    def set_name(self, name: str | None) -> None:
        self.name = name

    def get_price(self) -> Price | None:
        return self.price

    def set_price(self, price: Price | None) -> None:
        self.price = price


# ─── Broken / alternate descriptors ──────────────────────────────

@register
class Misconfigured(Model):
    @classmethod
    def discriminator_descriptor(cls) -> DiscriminatorDescriptor:
        return DiscriminatorDescriptor(map={"x": "Anything"})


@register
class Vehicle(Model):
    @classmethod
    def discriminator_descriptor(cls) -> DiscriminatorDescriptor:
        return DiscriminatorDescriptor(discriminator_field="kind", map={"rocket": "Spaceship"})


@register
class Animal(Model):
    species: str | None = None

    @classmethod
    def discriminator_descriptor(cls) -> dict:
        return {"discriminatorField": "species", "subclassNamespace": "zoo"}

    def get_species(self) -> str | None:
        return self.species

    def set_species(self, species: str | None) -> None:
        self.species = species


@register(aliases=["zoo.Dog"])
class Dog(Animal):
    pass


@register
class Cage(Model):
    animal: Animal | None = None

    def get_animal(self) -> Animal | None:
        return self.animal

    def set_animal(self, animal: Animal | None) -> None:
        self.animal = animal


@register
class Shipment(Model):
    carrier: str | None = None
    order: Order | None = None

    def get_carrier(self) -> str | None:
        return self.carrier

    def set_carrier(self, carrier: str | None) -> None:
        self.carrier = carrier

    def get_order(self) -> Order | None:
        return self.order

    def set_order(self, order: Order | None) -> None:
        self.order = order
