"""Integration tests for Checkout API endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain
from protean.integrations.fastapi import register_exception_handlers
from shop.api.routes import checkout_router
from shop.basket.basket import Basket
from shop.email import get_mailer
from shop.mailing_list.subscription import MailingListSubscription
from shop.order.order import Order, OrderStatus


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(checkout_router)
    register_exception_handlers(app)
    return TestClient(app, headers={"X-Session-Id": "sess-api-001"})


def _form(make_view_data, **overrides):
    return make_view_data(**overrides).model_dump()


def _submit(client, form):
    response = client.post("/checkout", json=form)
    assert response.status_code == 200
    return response.json()


class TestShowCheckoutForm:
    def test_returns_prefilled_form(self, client, basket_id, countries):
        response = client.get(f"/checkout/{basket_id}")
        assert response.status_code == 200

        body = response.json()
        assert body["view"] == "checkout/index"
        assert body["model"]["basket_id"] == basket_id
        assert body["model"]["card_contact_country_id"] == str(countries["United Kingdom"].id)
        assert body["model"]["use_cardholder_contact"] is True
        assert {ct["id"] for ct in body["lookups"]["card_types"]} >= {"visa-delta-electron", "maestro"}

    def test_unknown_basket_returns_404(self, client, countries):
        response = client.get("/checkout/no-such-basket")
        assert response.status_code == 404

    def test_session_header_required(self, basket_id):
        app = FastAPI()
        app.include_router(checkout_router)
        response = TestClient(app).get(f"/checkout/{basket_id}")
        assert response.status_code == 422


class TestSubmitCheckoutForm:
    def test_valid_form_redirects_to_confirm(self, client, make_view_data):
        body = _submit(client, _form(make_view_data))

        assert body["redirect"]["controller"] == "checkout"
        assert body["redirect"]["action"] == "confirm"
        order_id = body["redirect"]["route_values"]["id"]
        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.CREATED.value

    def test_invalid_form_returns_errors(self, client, make_view_data):
        body = _submit(client, _form(make_view_data, email_confirm="other@bar.com"))

        assert body["view"] == "checkout/index"
        assert "email_confirm" in body["errors"]
        assert "card_number" not in body["model"]
        assert current_domain.repository_for(Order)._dao.query.all().items == []


class TestConfirmEndpoints:
    def test_show_confirmation(self, client, make_view_data):
        order_id = _submit(client, _form(make_view_data))["redirect"]["route_values"]["id"]

        response = client.get(f"/checkout/confirm/{order_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["view"] == "checkout/confirm"
        assert body["model"]["order"]["email"] == "foo@bar.com"

    def test_confirm_order(self, client, make_view_data):
        order_id = _submit(client, _form(make_view_data, contact_me=True))["redirect"]["route_values"]["id"]

        response = client.post(f"/checkout/confirm/{order_id}")
        assert response.status_code == 200
        assert response.json()["redirect"] == {
            "controller": "order",
            "action": "item",
            "route_values": {"id": order_id},
        }

        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.CONFIRMED.value
        assert len(get_mailer().confirmations_for(order_id)) == 1
        assert len(current_domain.repository_for(MailingListSubscription)._dao.query.all().items) == 1

    def test_confirm_twice_returns_400(self, client, make_view_data):
        order_id = _submit(client, _form(make_view_data))["redirect"]["route_values"]["id"]
        client.post(f"/checkout/confirm/{order_id}")

        response = client.post(f"/checkout/confirm/{order_id}")
        assert response.status_code == 400

    def test_resubmitting_after_confirmation_returns_form(self, client, make_view_data):
        order_id = _submit(client, _form(make_view_data))["redirect"]["route_values"]["id"]
        client.post(f"/checkout/confirm/{order_id}")

        body = _submit(client, _form(make_view_data))

        assert body["view"] == "checkout/index"
        assert body["errors"]["basket_id"] == ["This basket has already been ordered"]
        assert len(current_domain.repository_for(Order)._dao.query.all().items) == 1

    def test_confirm_unknown_order_returns_404(self, client):
        response = client.post("/checkout/confirm/no-such-order")
        assert response.status_code == 404


class TestUpdateCountryEndpoint:
    def test_update_country_then_resume_form(self, client, basket_id, countries):
        france_id = str(countries["France"].id)
        response = client.post(
            "/checkout/country",
            json={
                "basket_id": basket_id,
                "email": "foo@bar.com",
                "card_contact_country_id": france_id,
            },
        )
        assert response.status_code == 200
        assert response.json()["redirect"]["action"] == "index"

        basket = current_domain.repository_for(Basket).get(basket_id)
        assert str(basket.country_id) == france_id

        form = client.get(f"/checkout/{basket_id}").json()
        assert form["model"]["email"] == "foo@bar.com"
        assert form["model"]["card_contact_country_id"] == france_id

        refreshed = client.get(f"/checkout/{basket_id}").json()
        assert refreshed["model"]["email"] is None
