"""Mail delivery for the shop.

``Mailer`` is the seam between the shop and whatever actually delivers
mail. ``OutboxMailer`` keeps every message in memory; it is the mailer in
use until a real one is registered with ``shop.email.set_mailer``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shop.email.templates import OrderConfirmationTemplate


@dataclass(frozen=True)
class ShopEmail:
    to: str
    subject: str
    body: str
    template: str
    order_id: str | None = None


@dataclass(frozen=True)
class Delivery:
    delivered: bool
    message_id: str | None = None
    error: str | None = None


class Mailer(ABC):
    @abstractmethod
    def deliver(self, email: ShopEmail) -> Delivery:
        """Hand ``email`` over for delivery.

        A refused message is reported in the returned Delivery; transport
        errors may still raise.
        """


class OutboxMailer(Mailer):
    def __init__(self):
        self.outbox: list[ShopEmail] = []
        self.refusal: str | None = None

    def refuse(self, reason: str = "Mailbox unavailable") -> None:
        """Refuse every message from now on, reporting ``reason``."""
        self.refusal = reason

    def deliver(self, email: ShopEmail) -> Delivery:
        if self.refusal:
            return Delivery(delivered=False, error=self.refusal)

        self.outbox.append(email)
        return Delivery(delivered=True, message_id=f"mail-{len(self.outbox):04d}")

    def confirmations_for(self, order_id) -> list[ShopEmail]:
        return [
            email
            for email in self.outbox
            if email.template == OrderConfirmationTemplate.name and email.order_id == str(order_id)
        ]
