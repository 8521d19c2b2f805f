"""Card value object - payment card details recorded against an Order."""

from protean.fields import Identifier, Integer, String

from shop.domain import shop


@shop.value_object
class Card:
    """The card a customer intends to pay with.

    Only the last four digits of the number are kept on the order.
    """

    card_type_id = Identifier(required=True)
    holder = String(required=True, max_length=255)
    last4 = String(required=True, max_length=4)
    expiry_month = Integer(required=True, min_value=1, max_value=12)
    expiry_year = Integer(required=True)
    start_month = Integer(min_value=1, max_value=12)
    start_year = Integer()
    issue_number = String(max_length=5)
