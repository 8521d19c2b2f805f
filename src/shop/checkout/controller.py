"""Checkout controller - walks a customer from basket to confirmed order.

Flow:
    1. index(basket_id)        → checkout form, pre-filled from the basket
    2. submit(view_data)       → form again with errors, or Order created
    3. confirm(order_id)       → confirmation page for the created Order
    4. confirm_order(order_id) → Order confirmed, email sent, optional
                                 mailing list subscription recorded

update_country(view_data) may be posted from the form at any point before
submitting; it changes the basket's country and redisplays the form with
what the customer had already typed.
"""

import structlog
from protean.utils.globals import current_domain

from shop.basket.basket import Basket
from shop.basket.management import UpdateBasketCountry
from shop.card_type.card_type import CardType
from shop.checkout.model_state import ModelState
from shop.checkout.results import RedirectResult, ShopViewData, ViewResult
from shop.checkout.service import CheckoutService
from shop.checkout.session import SessionStore, get_session_store
from shop.checkout.view_data import CheckoutViewData
from shop.country.country import Country
from shop.email.service import EmailService
from shop.order.confirmation import ConfirmOrder
from shop.order.order import Order
from shop.utils.settings import setting

logger = structlog.get_logger(__name__)


class CheckoutController:
    name = "checkout"

    def __init__(
        self,
        session_id: str,
        session_store: SessionStore | None = None,
        email_service: EmailService | None = None,
        checkout_service: CheckoutService | None = None,
    ):
        self.session_id = session_id
        self.session_store = session_store or get_session_store()
        self.email_service = email_service or EmailService()
        self.checkout_service = checkout_service or CheckoutService()
        self.model_state = ModelState()

    @property
    def _session_key(self) -> str:
        return setting("checkout_session_key")

    # -------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------
    def index(self, basket_id) -> ViewResult:
        """Display the checkout form for ``basket_id``.

        A form left in session scratch state by update_country for this
        basket is shown as-is and consumed; otherwise a fresh one is
        pre-filled with the basket's country.
        """
        basket = current_domain.repository_for(Basket).get(basket_id)
        card_type = current_domain.repository_for(CardType).get(setting("default_card_type_id"))

        view_data = self.session_store.get(self.session_id, self._session_key)
        if view_data is not None:
            self.session_store.remove(self.session_id, self._session_key)
            if view_data.basket_id != str(basket.id):
                logger.info(
                    "Discarding checkout form for another basket",
                    basket_id=str(basket.id),
                    stored_basket_id=view_data.basket_id,
                )
                view_data = None

        if view_data is None:
            country_id = str(basket.country_id) if basket.country_id else None
            view_data = CheckoutViewData(
                basket_id=str(basket.id),
                card_contact_country_id=country_id,
                delivery_contact_country_id=country_id,
                use_cardholder_contact=True,
                card_type_id=str(card_type.id),
            )

        return self._form_view(view_data)

    def submit(self, view_data: CheckoutViewData):
        """Validate the posted form and create an Order from it."""
        order = self.checkout_service.order_from_checkout_view_data(view_data, self.model_state)
        if order is None or not self.model_state.is_valid:
            logger.info(
                "Checkout form rejected",
                basket_id=view_data.basket_id,
                fields=sorted(self.model_state.errors),
            )
            return self._form_view(view_data)

        current_domain.repository_for(Order).add(order)
        self.session_store.remove(self.session_id, self._session_key)

        logger.info("Order placed", order_id=str(order.id), basket_id=str(order.basket_id))
        return RedirectResult(self.name, "confirm", {"id": str(order.id)})

    def confirm(self, order_id) -> ViewResult:
        order = current_domain.repository_for(Order).get(order_id)
        return ViewResult("checkout/confirm", ShopViewData(order=order))

    def confirm_order(self, order_id) -> RedirectResult:
        """Confirm the order, email the customer and show the order page."""
        current_domain.process(ConfirmOrder(order_id=order_id), asynchronous=False)

        order = current_domain.repository_for(Order).get(order_id)
        self.email_service.send_order_confirmation(order)

        return RedirectResult("order", "item", {"id": str(order.id)})

    def update_country(self, view_data: CheckoutViewData) -> RedirectResult:
        """Move the basket to the card holder's country and redisplay the form."""
        current_domain.process(
            UpdateBasketCountry(
                basket_id=view_data.basket_id,
                country_id=view_data.card_contact_country_id,
            ),
            asynchronous=False,
        )
        self.session_store.set(self.session_id, self._session_key, view_data)

        return RedirectResult(self.name, "index", {"id": view_data.basket_id})

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _form_view(self, view_data) -> ViewResult:
        countries = current_domain.repository_for(Country)._dao.query.filter(is_active=True).order_by("position").all()
        card_types = current_domain.repository_for(CardType)._dao.query.all()
        return ViewResult(
            "checkout/index",
            view_data,
            errors=dict(self.model_state.errors),
            lookups={
                "countries": countries.items,
                "card_types": card_types.items,
            },
        )
