"""FastAPI routes for the checkout - a JSON face on CheckoutController.

Every endpoint needs the caller's session id in the ``X-Session-Id`` header;
it scopes the scratch state the form is kept in between requests.
"""

from fastapi import APIRouter, Header

from shop.api.schemas import RedirectResponse, RedirectSchema, ViewResponse
from shop.checkout.controller import CheckoutController
from shop.checkout.results import RedirectResult, ShopViewData, ViewResult
from shop.checkout.view_data import CheckoutViewData

checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


def _render(result):
    if isinstance(result, RedirectResult):
        return RedirectResponse(
            redirect=RedirectSchema(
                controller=result.controller,
                action=result.action,
                route_values={k: str(v) for k, v in result.route_values.items()},
            )
        )
    return _view_response(result)


def _view_response(result: ViewResult) -> ViewResponse:
    model = result.model
    if isinstance(model, CheckoutViewData):
        model_dict = model.public_dict()
    elif isinstance(model, ShopViewData):
        model_dict = {"order": model.order.to_dict()}
    else:
        model_dict = dict(model)

    lookups = {
        "countries": [{"id": str(c.id), "name": c.name} for c in result.lookups.get("countries", [])],
        "card_types": [
            {"id": str(ct.id), "name": ct.name, "requires_issue_number": ct.requires_issue_number}
            for ct in result.lookups.get("card_types", [])
        ],
    }
    return ViewResponse(view=result.view_name, model=model_dict, errors=result.errors, lookups=lookups)


@checkout_router.get("/confirm/{order_id}", response_model=ViewResponse)
async def show_confirmation(order_id: str, x_session_id: str = Header()) -> ViewResponse:
    controller = CheckoutController(session_id=x_session_id)
    return _render(controller.confirm(order_id))


@checkout_router.post("/confirm/{order_id}", response_model=RedirectResponse)
async def confirm_order(order_id: str, x_session_id: str = Header()) -> RedirectResponse:
    controller = CheckoutController(session_id=x_session_id)
    return _render(controller.confirm_order(order_id))


@checkout_router.post("/country", response_model=RedirectResponse)
async def update_country(body: CheckoutViewData, x_session_id: str = Header()) -> RedirectResponse:
    controller = CheckoutController(session_id=x_session_id)
    return _render(controller.update_country(body))


@checkout_router.get("/{basket_id}", response_model=ViewResponse)
async def show_checkout_form(basket_id: str, x_session_id: str = Header()) -> ViewResponse:
    controller = CheckoutController(session_id=x_session_id)
    return _render(controller.index(basket_id))


@checkout_router.post("", response_model=ViewResponse | RedirectResponse)
async def submit_checkout_form(body: CheckoutViewData, x_session_id: str = Header()):
    """Submit the checkout form.

    Responds with the form view and its errors when the data is rejected,
    or a redirect to the confirmation page once the Order is created.
    """
    controller = CheckoutController(session_id=x_session_id)
    return _render(controller.submit(body))
