"""Adapter: uniform payment interface over two incompatible SDKs."""

from typing import Protocol


class PaymentProcessor(Protocol):
    def process_payment(self, amount: float) -> str: ...


class StripeService:
    """Stand-in for a third-party Stripe client with its own API."""

    def create_charge(self, amount: float) -> str:
        line = f"Charging ${amount} using Stripe."
        print(line)
        return line


class PayPalService:
    """Stand-in for a third-party PayPal client with its own API."""

    def make_payment(self, amount: float) -> str:
        line = f"Paying ${amount} using PayPal."
        print(line)
        return line


class StripeAdapter:
    def __init__(self, stripe_service: StripeService):
        self.stripe_service = stripe_service

    def process_payment(self, amount: float) -> str:
        return self.stripe_service.create_charge(amount)


class PayPalAdapter:
    def __init__(self, paypal_service: PayPalService):
        self.paypal_service = paypal_service

    def process_payment(self, amount: float) -> str:
        return self.paypal_service.make_payment(amount)


class PaymentService:
    """Accepts any PaymentProcessor."""

    def __init__(self, payment_processor: PaymentProcessor):
        self.payment_processor = payment_processor

    def make_payment(self, amount: float) -> str:
        if amount <= 0:
            raise ValueError(f"Payment amount must be positive, got {amount}")
        return self.payment_processor.process_payment(amount)


def main() -> None:
    PaymentService(StripeAdapter(StripeService())).make_payment(100.00)
    PaymentService(PayPalAdapter(PayPalService())).make_payment(200.00)
