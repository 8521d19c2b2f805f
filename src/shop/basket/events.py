"""Domain events for the Basket aggregate."""

from protean.fields import DateTime, Identifier, Integer

from shop.domain import shop


@shop.event(part_of="Basket")
class BasketItemAdded:
    """A product was added to the basket."""

    __version__ = 1

    basket_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@shop.event(part_of="Basket")
class BasketItemRemoved:
    """An item was removed from the basket."""

    __version__ = 1

    basket_id = Identifier(required=True)
    item_id = Identifier(required=True)


@shop.event(part_of="Basket")
class BasketCountryChanged:
    """The basket's destination country was changed during checkout."""

    __version__ = 1

    basket_id = Identifier(required=True)
    previous_country_id = Identifier()
    country_id = Identifier(required=True)


@shop.event(part_of="Basket")
class BasketOrdered:
    """The basket was turned into a confirmed order."""

    __version__ = 1

    basket_id = Identifier(required=True)
    order_id = Identifier(required=True)
    ordered_at = DateTime(required=True)
