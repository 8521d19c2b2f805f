"""Field-level validation errors collected while handling a form post."""


class ModelState:
    """Accumulates error messages per field, in the shape of ``ValidationError.messages``."""

    def __init__(self):
        self.errors: dict[str, list[str]] = {}

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_model_error(self, key: str, message: str) -> None:
        self.errors.setdefault(key, []).append(message)

    def merge(self, messages: dict, prefix: str | None = None) -> None:
        """Fold a ``ValidationError.messages`` dict into this state."""
        for field, field_messages in messages.items():
            key = f"{prefix}.{field}" if prefix else field
            if isinstance(field_messages, str):
                field_messages = [field_messages]
            for message in field_messages:
                self.add_model_error(key, str(message))

    def __contains__(self, key) -> bool:
        return key in self.errors
