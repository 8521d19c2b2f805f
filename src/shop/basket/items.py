"""Basket item management - commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from shop.basket.basket import Basket
from shop.domain import shop


@shop.command(part_of="Basket")
class AddToBasket:
    basket_id = Identifier(required=True)
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)


@shop.command(part_of="Basket")
class RemoveFromBasket:
    basket_id = Identifier(required=True)
    item_id = Identifier(required=True)


@shop.command_handler(part_of=Basket)
class BasketItemsHandler:
    @handle(AddToBasket)
    def add_to_basket(self, command):
        repo = current_domain.repository_for(Basket)
        basket = repo.get(command.basket_id)
        basket.add_item(
            product_id=command.product_id,
            product_name=command.product_name,
            quantity=command.quantity,
            unit_price=command.unit_price,
        )
        repo.add(basket)

    @handle(RemoveFromBasket)
    def remove_from_basket(self, command):
        repo = current_domain.repository_for(Basket)
        basket = repo.get(command.basket_id)
        basket.remove_item(command.item_id)
        repo.add(basket)
