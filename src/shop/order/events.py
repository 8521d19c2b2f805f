"""Domain events for the Order aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, String

from shop.domain import shop


@shop.event(part_of="Order")
class OrderCreated:
    """An order was created from a submitted checkout form."""

    __version__ = 1

    order_id = Identifier(required=True)
    basket_id = Identifier(required=True)
    email = String(required=True)
    total = Float(required=True)
    pay_by_telephone = Boolean(default=False)
    created_at = DateTime(required=True)


@shop.event(part_of="Order")
class OrderConfirmed:
    """The customer confirmed the order on the confirmation page."""

    __version__ = 1

    order_id = Identifier(required=True)
    basket_id = Identifier(required=True)
    email = String(required=True)
    contact_me = Boolean(default=False)
    confirmed_at = DateTime(required=True)
