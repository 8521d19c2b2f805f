"""Pydantic response schemas for the Checkout API.

Requests are bound straight onto CheckoutViewData, the form's own transfer
object; these describe what the endpoints send back.
"""

from typing import Any

from pydantic import BaseModel, Field


class ViewResponse(BaseModel):
    view: str
    model: dict[str, Any]
    errors: dict[str, list[str]] = Field(default_factory=dict)
    lookups: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)


class RedirectSchema(BaseModel):
    controller: str
    action: str
    route_values: dict[str, str] = Field(default_factory=dict)


class RedirectResponse(BaseModel):
    redirect: RedirectSchema

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "redirect": {
                        "controller": "checkout",
                        "action": "confirm",
                        "route_values": {"id": "5f0c6a9e-2b1d-4c5e-9a43-0d1b8f1e7c21"},
                    }
                }
            ]
        }
    }
