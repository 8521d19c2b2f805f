"""Checkout form data - what the customer has typed into the checkout page.

This is a transfer object (anti-corruption layer), not a domain element: it
is bound from the submitted form, kept in session scratch state between
requests, and converted into an Order by the CheckoutService.
"""

from pydantic import BaseModel

_CONTACT_FIELDS = (
    "first_name",
    "last_name",
    "address1",
    "address2",
    "address3",
    "town",
    "county",
    "postcode",
    "country_id",
    "telephone",
)


class CheckoutViewData(BaseModel):
    basket_id: str | None = None

    email: str | None = None
    email_confirm: str | None = None

    card_contact_first_name: str | None = None
    card_contact_last_name: str | None = None
    card_contact_address1: str | None = None
    card_contact_address2: str | None = None
    card_contact_address3: str | None = None
    card_contact_town: str | None = None
    card_contact_county: str | None = None
    card_contact_postcode: str | None = None
    card_contact_country_id: str | None = None
    card_contact_telephone: str | None = None

    use_cardholder_contact: bool = True

    delivery_contact_first_name: str | None = None
    delivery_contact_last_name: str | None = None
    delivery_contact_address1: str | None = None
    delivery_contact_address2: str | None = None
    delivery_contact_address3: str | None = None
    delivery_contact_town: str | None = None
    delivery_contact_county: str | None = None
    delivery_contact_postcode: str | None = None
    delivery_contact_country_id: str | None = None
    delivery_contact_telephone: str | None = None

    card_type_id: str | None = None
    card_holder: str | None = None
    card_number: str | None = None
    card_expiry_month: int | None = None
    card_expiry_year: int | None = None
    card_start_month: int | None = None
    card_start_year: int | None = None
    card_issue_number: str | None = None

    pay_by_telephone: bool = False
    contact_me: bool = False
    note: str | None = None

    def contact_fields(self, prefix: str) -> dict:
        """Return the ``card_contact`` or ``delivery_contact`` fields, unprefixed and blank-free."""
        values = {}
        for name in _CONTACT_FIELDS:
            value = getattr(self, f"{prefix}_{name}")
            if isinstance(value, str):
                value = value.strip() or None
            if value is not None:
                values[name] = value
        return values

    def public_dict(self) -> dict:
        """Form values safe to echo back to the browser (card number excluded)."""
        return self.model_dump(exclude={"card_number"})
