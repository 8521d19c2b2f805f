"""Contact value object - a named postal address captured at checkout."""

from protean.fields import Identifier, String

from shop.domain import shop


@shop.value_object
class Contact:
    """A person's name, postal address and telephone number.

    Orders record one for the card holder and one for delivery; mailing list
    subscriptions keep a copy of whichever was used to reach the customer.
    """

    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    address1 = String(required=True, max_length=255)
    address2 = String(max_length=255)
    address3 = String(max_length=255)
    town = String(required=True, max_length=100)
    county = String(max_length=100)
    postcode = String(required=True, max_length=20)
    country_id = Identifier(required=True)
    telephone = String(max_length=50)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
