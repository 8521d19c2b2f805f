"""MailingListSubscription aggregate - customers who asked to be contacted."""

from datetime import UTC, datetime

from protean.fields import DateTime, String, ValueObject

from shop.domain import shop
from shop.mailing_list.events import SubscribedToMailingList
from shop.shared.contact import Contact


@shop.aggregate
class MailingListSubscription:
    contact = ValueObject(Contact, required=True)
    email = String(required=True, max_length=254)
    date_subscribed = DateTime()

    @classmethod
    def subscribe(cls, contact, email):
        now = datetime.now(UTC)
        subscription = cls(contact=contact, email=email, date_subscribed=now)
        subscription.raise_(
            SubscribedToMailingList(
                subscription_id=str(subscription.id),
                email=email,
                subscribed_at=now,
            )
        )
        return subscription
