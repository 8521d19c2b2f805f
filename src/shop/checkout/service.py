"""Checkout service - turns submitted checkout form data into an Order.

Validation problems are recorded in the caller's ModelState rather than
raised, so the form can be redisplayed with every message at once.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from shop.basket.basket import Basket, BasketStatus
from shop.card_type.card_type import CardType
from shop.checkout.model_state import ModelState
from shop.checkout.view_data import CheckoutViewData
from shop.country.country import Country
from shop.order.order import Order
from shop.shared.card import Card
from shop.shared.contact import Contact
from shop.shared.email import EmailAddress

_MIN_CARD_DIGITS = 12
_MAX_CARD_DIGITS = 19


def _full_year(year):
    """Cards print two-digit years; treat those as 20xx."""
    if year is not None and 0 <= year < 100:
        return 2000 + year
    return year


class CheckoutService:
    def order_from_checkout_view_data(self, view_data: CheckoutViewData, model_state: ModelState) -> Order | None:
        """Validate ``view_data`` and build an unsaved Order from it.

        Returns None when ``model_state`` holds any errors afterwards.
        Raises ObjectNotFoundError when the referenced basket does not exist.
        """
        basket = self._load_basket(view_data, model_state)
        self._validate_email(view_data, model_state)

        card_contact = self._build_contact(view_data, "card_contact", model_state)
        delivery_contact = None
        if not view_data.use_cardholder_contact:
            delivery_contact = self._build_contact(view_data, "delivery_contact", model_state)

        card = None
        if not view_data.pay_by_telephone:
            card = self._build_card(view_data, model_state)

        if not model_state.is_valid:
            return None

        try:
            return Order.create(
                basket_id=basket.id,
                user_id=basket.user_id,
                email=view_data.email.strip(),
                card_contact=card_contact,
                delivery_contact=delivery_contact,
                use_card_holder_contact=view_data.use_cardholder_contact,
                contact_me=view_data.contact_me,
                pay_by_telephone=view_data.pay_by_telephone,
                card=card,
                note=view_data.note,
                total=basket.total,
            )
        except ValidationError as exc:
            model_state.merge(exc.messages)
            return None

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _load_basket(self, view_data, model_state):
        if not view_data.basket_id:
            model_state.add_model_error("basket_id", "A basket is required")
            return None

        basket = current_domain.repository_for(Basket).get(view_data.basket_id)
        if BasketStatus(basket.status) != BasketStatus.ACTIVE:
            model_state.add_model_error("basket_id", "This basket has already been ordered")
        elif basket.is_empty:
            model_state.add_model_error("basket_id", "Your basket is empty")
        return basket

    def _validate_email(self, view_data, model_state):
        email = (view_data.email or "").strip()
        if not email:
            model_state.add_model_error("email", "Email is required")
            return

        try:
            EmailAddress(address=email)
        except (ValidationError, ValueError):
            model_state.add_model_error("email", "Email is not a valid address")
            return

        if email != (view_data.email_confirm or "").strip():
            model_state.add_model_error("email_confirm", "Email and confirmation do not match")

    def _build_contact(self, view_data, prefix, model_state):
        fields = view_data.contact_fields(prefix)
        try:
            contact = Contact(**fields)
        except ValidationError as exc:
            model_state.merge(exc.messages, prefix=prefix)
            return None

        try:
            current_domain.repository_for(Country).get(contact.country_id)
        except ObjectNotFoundError:
            model_state.add_model_error(f"{prefix}.country_id", "Unknown country")
            return None
        return contact

    def _build_card(self, view_data, model_state):
        card_type = None
        if view_data.card_type_id:
            try:
                card_type = current_domain.repository_for(CardType).get(view_data.card_type_id)
            except ObjectNotFoundError:
                model_state.add_model_error("card.card_type_id", "Unknown card type")

        digits = "".join(ch for ch in (view_data.card_number or "") if ch not in " -")
        if not digits.isdigit() or not _MIN_CARD_DIGITS <= len(digits) <= _MAX_CARD_DIGITS:
            model_state.add_model_error("card.number", "Card number is not valid")

        if card_type is not None and card_type.requires_issue_number and not view_data.card_issue_number:
            model_state.add_model_error("card.issue_number", "Issue number is required for this card type")

        expiry_year = _full_year(view_data.card_expiry_year)
        if view_data.card_expiry_month and expiry_year:
            today = datetime.now(UTC).date()
            if (expiry_year, view_data.card_expiry_month) < (today.year, today.month):
                model_state.add_model_error("card.expiry_year", "Card has expired")

        try:
            card = Card(
                card_type_id=view_data.card_type_id,
                holder=(view_data.card_holder or "").strip() or None,
                last4=digits[-4:] or None,
                expiry_month=view_data.card_expiry_month,
                expiry_year=expiry_year,
                start_month=view_data.card_start_month,
                start_year=_full_year(view_data.card_start_year),
                issue_number=view_data.card_issue_number,
            )
        except ValidationError as exc:
            model_state.merge(exc.messages, prefix="card")
            return None
        return card
