"""EmailAddress value object for validated email addresses."""

from protean import invariant
from protean.fields import String

from shop.domain import shop


@shop.value_object
class EmailAddress:
    """A structurally valid email address: one @, non-empty local and domain parts, a dotted domain."""

    address = String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        email = self.address

        if any(ch in email for ch in " \t\n"):
            raise ValueError(f"Invalid email address: {email!r}")

        if email.count("@") != 1:
            raise ValueError(f"Invalid email address: {email!r}")

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise ValueError(f"Invalid email address: {email!r}")

        if not domain_part or "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValueError(f"Invalid email address: {email!r}")

        if ".." in local_part or ".." in domain_part:
            raise ValueError(f"Invalid email address: {email!r}")
