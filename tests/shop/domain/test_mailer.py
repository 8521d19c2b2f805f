"""Tests for the mailer, the confirmation template and EmailService."""

from types import SimpleNamespace

from shop.email import get_mailer, reset_mailer, set_mailer
from shop.email.mailer import OutboxMailer, ShopEmail
from shop.email.service import EmailService
from shop.email.templates import OrderConfirmationTemplate


def _order(**overrides):
    values = {
        "id": "order-005",
        "email": "foo@bar.com",
        "total": 25.0,
        "pay_by_telephone": False,
        "card": SimpleNamespace(last4="1111"),
        "card_contact": SimpleNamespace(full_name="Ada Lovelace"),
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def _email(order_id="order-005", template=OrderConfirmationTemplate.name):
    return ShopEmail(to="a@b.com", subject="Hi", body="Hello", template=template, order_id=order_id)


class TestOutboxMailer:
    def setup_method(self):
        self.mailer = OutboxMailer()

    def test_deliver_keeps_message_in_outbox(self):
        email = _email()
        delivery = self.mailer.deliver(email)

        assert delivery.delivered is True
        assert delivery.message_id == "mail-0001"
        assert self.mailer.outbox == [email]

    def test_refused_messages_are_not_kept(self):
        self.mailer.refuse("SMTP error")
        delivery = self.mailer.deliver(_email())

        assert delivery.delivered is False
        assert delivery.error == "SMTP error"
        assert self.mailer.outbox == []

    def test_confirmations_for_filters_by_order_and_template(self):
        self.mailer.deliver(_email("order-1"))
        self.mailer.deliver(_email("order-2"))
        self.mailer.deliver(_email("order-1", template="dispatch_notice"))

        confirmations = self.mailer.confirmations_for("order-1")
        assert len(confirmations) == 1
        assert confirmations[0].order_id == "order-1"


class TestMailerRegistry:
    def test_defaults_to_outbox_mailer(self):
        assert isinstance(get_mailer(), OutboxMailer)
        assert get_mailer() is get_mailer()

    def test_set_and_reset(self):
        custom = OutboxMailer()
        set_mailer(custom)
        assert get_mailer() is custom
        reset_mailer()
        assert get_mailer() is not custom


class TestOrderConfirmationTemplate:
    def test_render_card_payment(self):
        rendered = OrderConfirmationTemplate.render(
            {"order_id": "5", "name": "Ada Lovelace", "total": 25.0, "card_last4": "1111"}
        )
        assert rendered["subject"] == "Order #5 Confirmed"
        assert "Dear Ada Lovelace" in rendered["body"]
        assert "25.00" in rendered["body"]
        assert "ending 1111" in rendered["body"]

    def test_render_telephone_payment(self):
        rendered = OrderConfirmationTemplate.render({"order_id": "5", "pay_by_telephone": True})
        assert "telephone you" in rendered["body"]


class TestEmailService:
    def test_sends_confirmation_for_the_order(self):
        mailer = OutboxMailer()
        delivery = EmailService(mailer).send_order_confirmation(_order())

        assert delivery.delivered is True
        [email] = mailer.confirmations_for("order-005")
        assert email.to == "foo@bar.com"
        assert email.subject == "Order #order-005 Confirmed"
        assert "ending 1111" in email.body

    def test_refused_delivery_is_reported_not_raised(self):
        mailer = OutboxMailer()
        mailer.refuse()
        delivery = EmailService(mailer).send_order_confirmation(_order())
        assert delivery.delivered is False
        assert delivery.error == "Mailbox unavailable"

    def test_mailer_exception_is_reported_not_raised(self):
        class BrokenMailer(OutboxMailer):
            def deliver(self, email):
                raise ConnectionError("SMTP down")

        delivery = EmailService(BrokenMailer()).send_order_confirmation(_order())
        assert delivery.delivered is False
        assert delivery.error == "SMTP down"

    def test_uses_registered_mailer_by_default(self):
        mailer = OutboxMailer()
        set_mailer(mailer)
        EmailService().send_order_confirmation(_order(card=None, pay_by_telephone=True))
        assert len(mailer.confirmations_for("order-005")) == 1
