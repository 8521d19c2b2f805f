"""Order confirmation - command and handler.

Confirming an order also consumes the basket it came from and, when the
customer ticked "contact me", records a mailing list subscription. All of
it commits in the handler's unit of work.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from shop.basket.basket import Basket
from shop.domain import shop
from shop.mailing_list.subscription import MailingListSubscription
from shop.order.order import Order

logger = structlog.get_logger(__name__)


@shop.command(part_of="Order")
class ConfirmOrder:
    order_id = Identifier(required=True)


@shop.command_handler(part_of=Order)
class ConfirmOrderHandler:
    @handle(ConfirmOrder)
    def confirm_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.confirm()
        repo.add(order)

        basket_repo = current_domain.repository_for(Basket)
        basket = basket_repo.get(order.basket_id)
        basket.mark_ordered(order.id)
        basket_repo.add(basket)

        if order.contact_me:
            subscription = MailingListSubscription.subscribe(
                contact=order.subscription_contact(),
                email=order.email,
            )
            current_domain.repository_for(MailingListSubscription).add(subscription)
            logger.info(
                "Mailing list subscription created",
                order_id=str(order.id),
                subscription_id=str(subscription.id),
            )

        logger.info("Order confirmed", order_id=str(order.id))
