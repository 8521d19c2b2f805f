"""Order aggregate - the result of a completed checkout form.

An Order is built from the checkout form data, saved in the ``Created``
state, and moved to ``Confirmed`` once the customer approves it on the
confirmation page.

State Machine:
    CREATED → CONFIRMED (terminal for checkout)
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, String, Text, ValueObject

from shop.domain import shop
from shop.order.events import OrderConfirmed, OrderCreated
from shop.shared.card import Card
from shop.shared.contact import Contact


class OrderStatus(Enum):
    CREATED = "Created"
    CONFIRMED = "Confirmed"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.CREATED: {OrderStatus.CONFIRMED},
    OrderStatus.CONFIRMED: set(),  # Terminal
}


@shop.aggregate
class Order:
    basket_id = Identifier(required=True)
    user_id = Identifier()
    email = String(required=True, max_length=254)
    card_contact = ValueObject(Contact, required=True)
    delivery_contact = ValueObject(Contact)
    use_card_holder_contact = Boolean(default=True)
    contact_me = Boolean(default=False)
    pay_by_telephone = Boolean(default=False)
    card = ValueObject(Card)
    note = Text()
    total = Float(default=0.0, min_value=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.CREATED.value)
    created_at = DateTime()
    confirmed_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        basket_id,
        email,
        card_contact,
        delivery_contact=None,
        use_card_holder_contact=True,
        contact_me=False,
        pay_by_telephone=False,
        card=None,
        note=None,
        total=0.0,
        user_id=None,
    ):
        if not use_card_holder_contact and delivery_contact is None:
            raise ValidationError({"delivery_contact": ["A delivery contact is required"]})
        if not pay_by_telephone and card is None:
            raise ValidationError({"card": ["Card details are required unless paying by telephone"]})

        now = datetime.now(UTC)
        order = cls(
            basket_id=basket_id,
            user_id=user_id,
            email=email,
            card_contact=card_contact,
            delivery_contact=delivery_contact,
            use_card_holder_contact=use_card_holder_contact,
            contact_me=contact_me,
            pay_by_telephone=pay_by_telephone,
            card=card,
            note=note,
            total=total,
            status=OrderStatus.CREATED.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                basket_id=str(basket_id),
                email=email,
                total=total,
                pay_by_telephone=pay_by_telephone,
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def subscription_contact(self):
        """The contact a mailing list subscription is taken from."""
        if self.use_card_holder_contact:
            return self.card_contact
        return self.delivery_contact

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target):
        current = OrderStatus(self.status)
        if target not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})

    def confirm(self):
        self._assert_can_transition(OrderStatus.CONFIRMED)

        now = datetime.now(UTC)
        self.status = OrderStatus.CONFIRMED.value
        self.confirmed_at = now
        self.updated_at = now

        self.raise_(
            OrderConfirmed(
                order_id=str(self.id),
                basket_id=str(self.basket_id),
                email=self.email,
                contact_me=bool(self.contact_me),
                confirmed_at=now,
            )
        )
