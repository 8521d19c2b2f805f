"""Country aggregate - shippable destinations offered at checkout."""

from protean.fields import Boolean, Integer, String
from protean.utils.globals import current_domain

from shop.domain import shop


@shop.aggregate
class Country:
    """A country the shop delivers to.

    Baskets carry a country because postage depends on the destination;
    checkout contacts reference one for the card holder and the delivery
    address.
    """

    name = String(required=True, max_length=100, unique=True)
    position = Integer(default=0)
    is_active = Boolean(default=True)


def seed_countries(names):
    """Create the given countries in display order, skipping existing ones.

    Returns the list of Country aggregates, in the order given.
    """
    repo = current_domain.repository_for(Country)
    existing = {c.name: c for c in repo._dao.query.all().items}

    countries = []
    for position, name in enumerate(names, start=1):
        country = existing.get(name)
        if country is None:
            country = Country(name=name, position=position)
            repo.add(country)
        countries.append(country)
    return countries
