"""Application settings read from the ``[custom]`` section of domain.toml."""

from protean.utils.globals import current_domain

DEFAULTS = {
    "default_card_type_id": "visa-delta-electron",
    "checkout_session_key": "CheckoutViewData",
}


def setting(name: str):
    custom = current_domain.config.get("custom") or {}
    return custom.get(name, DEFAULTS[name])
