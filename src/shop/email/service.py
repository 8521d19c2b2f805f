"""Email service - composes and sends the emails the checkout needs."""

import structlog

from shop.email import get_mailer
from shop.email.mailer import Delivery, Mailer, ShopEmail
from shop.email.templates import OrderConfirmationTemplate

logger = structlog.get_logger(__name__)


class EmailService:
    def __init__(self, mailer: Mailer | None = None):
        self._mailer = mailer

    @property
    def mailer(self) -> Mailer:
        return self._mailer or get_mailer()

    def send_order_confirmation(self, order) -> Delivery:
        """Email the customer a confirmation of ``order``.

        Delivery is fire-and-forget: a failed send is logged and reported in
        the returned Delivery, never raised.
        """
        order_id = str(order.id)
        contact = order.card_contact
        rendered = OrderConfirmationTemplate.render(
            {
                "order_id": order_id,
                "name": contact.full_name if contact else None,
                "total": order.total or 0.0,
                "pay_by_telephone": order.pay_by_telephone,
                "card_last4": order.card.last4 if order.card else None,
            }
        )
        email = ShopEmail(
            to=order.email,
            subject=rendered["subject"],
            body=rendered["body"],
            template=OrderConfirmationTemplate.name,
            order_id=order_id,
        )

        try:
            delivery = self.mailer.deliver(email)
        except Exception as e:
            logger.error("Order confirmation email failed", order_id=order_id, error=str(e))
            return Delivery(delivered=False, error=str(e))

        if delivery.delivered:
            logger.info("Order confirmation email sent", order_id=order_id, message_id=delivery.message_id)
        else:
            logger.warning("Order confirmation email not delivered", order_id=order_id, error=delivery.error)
        return delivery
