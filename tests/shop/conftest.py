from datetime import UTC, datetime

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def shop_bed():
    from shop.domain import shop

    bed = DomainFixture(shop)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shop_bed):
    with shop_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture(autouse=True)
def _reset_adapters():
    from shop.checkout.session import reset_session_store
    from shop.email import reset_mailer

    reset_mailer()
    reset_session_store()
    yield
    reset_mailer()
    reset_session_store()


@pytest.fixture()
def countries():
    """Standard card types plus two countries; returns the countries by name."""
    from shop.card_type.card_type import seed_card_types
    from shop.country.country import seed_countries

    seed_card_types()
    united_kingdom, france = seed_countries(["United Kingdom", "France"])
    return {"United Kingdom": united_kingdom, "France": france}


@pytest.fixture()
def basket_id(countries):
    """A basket in the United Kingdom holding two items (total 25.0)."""
    from protean import current_domain
    from shop.basket.items import AddToBasket
    from shop.basket.management import CreateBasket

    basket_id = current_domain.process(
        CreateBasket(user_id="user-004", country_id=str(countries["United Kingdom"].id)),
        asynchronous=False,
    )
    current_domain.process(
        AddToBasket(basket_id=basket_id, product_id="prod-001", product_name="Tea Pot", quantity=1, unit_price=15.0),
        asynchronous=False,
    )
    current_domain.process(
        AddToBasket(basket_id=basket_id, product_id="prod-002", product_name="Mug", quantity=2, unit_price=5.0),
        asynchronous=False,
    )
    return basket_id


@pytest.fixture()
def make_view_data(basket_id, countries):
    """Build a CheckoutViewData that passes validation, with field overrides."""
    from shop.checkout.view_data import CheckoutViewData

    def _make(**overrides):
        uk_id = str(countries["United Kingdom"].id)
        values = {
            "basket_id": basket_id,
            "email": "foo@bar.com",
            "email_confirm": "foo@bar.com",
            "card_contact_first_name": "Ada",
            "card_contact_last_name": "Lovelace",
            "card_contact_address1": "12 Marylebone Road",
            "card_contact_town": "London",
            "card_contact_postcode": "NW1 5LR",
            "card_contact_country_id": uk_id,
            "use_cardholder_contact": True,
            "card_type_id": "visa-delta-electron",
            "card_holder": "A LOVELACE",
            "card_number": "4111 1111 1111 1111",
            "card_expiry_month": 12,
            "card_expiry_year": datetime.now(UTC).year + 2,
        }
        values.update(overrides)
        return CheckoutViewData(**values)

    return _make


@pytest.fixture()
def delivery_fields(countries):
    france_id = str(countries["France"].id)
    return {
        "use_cardholder_contact": False,
        "delivery_contact_first_name": "Charles",
        "delivery_contact_last_name": "Babbage",
        "delivery_contact_address1": "1 Rue de Rivoli",
        "delivery_contact_town": "Paris",
        "delivery_contact_postcode": "75001",
        "delivery_contact_country_id": france_id,
    }
