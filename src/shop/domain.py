"""Shop bounded context - baskets, checkout and orders.

Handles the checkout flow that turns a customer's basket into a confirmed
Order, along with the reference data (countries, card types) and the
mailing list the checkout feeds.
"""

from protean.domain import Domain

from shop.utils.logging import configure_logging

configure_logging()

shop = Domain(name="shop")
