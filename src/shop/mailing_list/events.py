"""Domain events for the MailingListSubscription aggregate."""

from protean.fields import DateTime, Identifier, String

from shop.domain import shop


@shop.event(part_of="MailingListSubscription")
class SubscribedToMailingList:
    """A customer opted in to the mailing list while checking out."""

    __version__ = 1

    subscription_id = Identifier(required=True)
    email = String(required=True)
    subscribed_at = DateTime(required=True)
