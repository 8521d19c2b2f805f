"""Registered mailer.

get_mailer() hands out the process-wide Mailer, an OutboxMailer unless
set_mailer() installed another one.
"""

from shop.email.mailer import Mailer, OutboxMailer

_current_mailer: Mailer | None = None


def get_mailer() -> Mailer:
    global _current_mailer
    if _current_mailer is None:
        _current_mailer = OutboxMailer()
    return _current_mailer


def set_mailer(mailer: Mailer) -> None:
    global _current_mailer
    _current_mailer = mailer


def reset_mailer() -> None:
    global _current_mailer
    _current_mailer = None
