"""Basket aggregate - the customer's in-progress selection before checkout.

The basket is a standard CQRS aggregate (not event sourced). It tracks the
items a customer has picked, the country they will be delivered to (postage
depends on it), and is marked as ordered once checkout confirms an Order.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from shop.basket.events import (
    BasketCountryChanged,
    BasketItemAdded,
    BasketItemRemoved,
    BasketOrdered,
)
from shop.domain import shop


class BasketStatus(Enum):
    ACTIVE = "Active"
    ORDERED = "Ordered"


@shop.entity(part_of="Basket")
class BasketItem:
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def total(self) -> float:
        return self.quantity * self.unit_price


@shop.aggregate
class Basket:
    user_id = Identifier()  # Nullable for guest baskets
    session_id = String(max_length=255)
    country_id = Identifier()
    items = HasMany(BasketItem)
    status = String(choices=BasketStatus, default=BasketStatus.ACTIVE.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def ordered_basket_must_have_items(self):
        if self.status == BasketStatus.ORDERED.value and not self.items:
            raise ValidationError({"basket": ["An empty basket cannot be ordered"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id=None, session_id=None, country_id=None):
        now = datetime.now(UTC)
        return cls(
            user_id=user_id,
            session_id=session_id,
            country_id=country_id,
            status=BasketStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )

    @property
    def total(self) -> float:
        return sum(item.total for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, product_name, quantity, unit_price):
        """Add a product to the basket (or increase its quantity if already present)."""
        self._ensure_active("Items can only be added to an active basket")

        existing = next((i for i in self.items if str(i.product_id) == str(product_id)), None)

        if existing:
            existing.quantity += quantity
            item_id = str(existing.id)
        else:
            item = BasketItem(
                product_id=product_id,
                product_name=product_name,
                quantity=quantity,
                unit_price=unit_price,
            )
            self.add_items(item)
            item_id = str(item.id)

        self.updated_at = datetime.now(UTC)

        self.raise_(
            BasketItemAdded(
                basket_id=str(self.id),
                item_id=item_id,
                product_id=str(product_id),
                quantity=quantity,
            )
        )

    def remove_item(self, item_id):
        self._ensure_active("Items can only be removed from an active basket")

        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in basket"]})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(BasketItemRemoved(basket_id=str(self.id), item_id=str(item_id)))

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def update_country(self, country_id):
        """Change the destination country; postage is recalculated from it."""
        self._ensure_active("The country of an ordered basket cannot change")

        previous_country_id = self.country_id
        self.country_id = country_id
        self.updated_at = datetime.now(UTC)

        self.raise_(
            BasketCountryChanged(
                basket_id=str(self.id),
                previous_country_id=str(previous_country_id) if previous_country_id else None,
                country_id=str(country_id),
            )
        )

    def mark_ordered(self, order_id):
        """Mark the basket as consumed by a confirmed order."""
        self._ensure_active("Only active baskets can be ordered")
        if not self.items:
            raise ValidationError({"basket": ["An empty basket cannot be ordered"]})

        now = datetime.now(UTC)
        self.status = BasketStatus.ORDERED.value
        self.updated_at = now

        self.raise_(
            BasketOrdered(
                basket_id=str(self.id),
                order_id=str(order_id),
                ordered_at=now,
            )
        )

    def _ensure_active(self, message):
        if BasketStatus(self.status) != BasketStatus.ACTIVE:
            raise ValidationError({"status": [message]})
