"""Basket management - commands and handler.

Handles basket creation and the destination country changes made while
the customer fills in the checkout form.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from shop.basket.basket import Basket
from shop.country.country import Country
from shop.domain import shop

logger = structlog.get_logger(__name__)


@shop.command(part_of="Basket")
class CreateBasket:
    """Create a new basket for a registered user or guest session."""

    user_id = Identifier()  # Optional for guest baskets
    session_id = String(max_length=255)
    country_id = Identifier()


@shop.command(part_of="Basket")
class UpdateBasketCountry:
    """Change the country the basket will be delivered to."""

    basket_id = Identifier(required=True)
    country_id = Identifier(required=True)


@shop.command_handler(part_of=Basket)
class ManageBasketHandler:
    @handle(CreateBasket)
    def create_basket(self, command):
        basket = Basket.create(
            user_id=command.user_id,
            session_id=command.session_id,
            country_id=command.country_id,
        )
        current_domain.repository_for(Basket).add(basket)
        return str(basket.id)

    @handle(UpdateBasketCountry)
    def update_country(self, command):
        # Unknown countries surface as ObjectNotFoundError
        current_domain.repository_for(Country).get(command.country_id)

        repo = current_domain.repository_for(Basket)
        basket = repo.get(command.basket_id)
        basket.update_country(command.country_id)
        repo.add(basket)

        logger.info(
            "Basket country changed",
            basket_id=str(basket.id),
            country_id=str(command.country_id),
        )
