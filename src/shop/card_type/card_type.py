"""Card type catalogue - payment cards accepted at checkout."""

from enum import Enum

import structlog
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from shop.domain import shop

logger = structlog.get_logger(__name__)


class CardTypeId(Enum):
    VISA_DELTA_ELECTRON = "visa-delta-electron"
    MASTERCARD = "mastercard"
    AMERICAN_EXPRESS = "american-express"
    MAESTRO = "maestro"


@shop.aggregate
class CardType:
    """Reference data describing a card scheme.

    Some debit schemes print an issue number on the card; ``requires_issue_number``
    tells checkout validation to insist on one.
    """

    name = String(required=True, max_length=100)
    requires_issue_number = Boolean(default=False)


_STANDARD_CARD_TYPES = [
    (CardTypeId.VISA_DELTA_ELECTRON, "Visa / Delta / Electron", False),
    (CardTypeId.MASTERCARD, "Mastercard / Eurocard", False),
    (CardTypeId.AMERICAN_EXPRESS, "American Express", False),
    (CardTypeId.MAESTRO, "Switch / Solo / Maestro", True),
]


def seed_card_types():
    """Register the standard card types under their well-known ids (idempotent)."""
    repo = current_domain.repository_for(CardType)
    seeded = []
    for card_type_id, name, requires_issue_number in _STANDARD_CARD_TYPES:
        if repo._dao.query.filter(id=card_type_id.value).all().items:
            continue
        repo.add(
            CardType(
                id=card_type_id.value,
                name=name,
                requires_issue_number=requires_issue_number,
            )
        )
        seeded.append(card_type_id.value)

    if seeded:
        logger.info("Card types seeded", card_type_ids=seeded)
    return seeded
