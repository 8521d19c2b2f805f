"""Email templates sent by the shop."""


class OrderConfirmationTemplate:
    name = "order_confirmation"

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        name = context.get("name", "Customer")
        total = context.get("total", 0.0)
        pay_by_telephone = context.get("pay_by_telephone", False)

        payment_line = (
            "We will telephone you shortly to take payment."
            if pay_by_telephone
            else f"Your card ending {context.get('card_last4', '****')} will be charged."
        )
        return {
            "subject": f"Order #{order_id} Confirmed",
            "body": (
                f"Dear {name},\n\n"
                f"Thank you for your order #{order_id}.\n\n"
                f"Order Total: {total:.2f}\n"
                f"{payment_line}\n\n"
                "We'll let you know once your order has been dispatched."
            ),
        }
