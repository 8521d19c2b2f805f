"""Action results returned by the checkout controller."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ViewResult:
    """Render ``view_name`` bound to ``model``."""

    view_name: str
    model: Any
    errors: dict = field(default_factory=dict)
    lookups: dict = field(default_factory=dict)


@dataclass(frozen=True)
class RedirectResult:
    """Send the browser on to another controller action."""

    controller: str
    action: str
    route_values: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ShopViewData:
    """View model for pages that show a single order."""

    order: Any
