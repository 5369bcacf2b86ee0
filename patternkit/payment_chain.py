"""Payment gateways linked into a chain of responsibility."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "PHONEPE_URL",
    "STRIPE_URL",
    "PaymentGateway",
    "PhonePeGateway",
    "StripeGateway",
]

PHONEPE_URL = "https://phonepe.example.com"
STRIPE_URL = "https://stripe.example.com"


class PaymentGateway:
    """A gateway that hands the request to the next one in the chain."""

    def __init__(self) -> None:
        self._next: Optional[PaymentGateway] = None

    def set_next(self, gateway: Optional[PaymentGateway]) -> None:
        """Set the gateway that handles requests this one declines."""
        self._next = gateway

    def create_payment_url(self, order_id: int, amount: int) -> Optional[str]:
        """Return a payment URL, or None when no gateway in the chain accepts."""
        if self._next is None:
            return None
        return self._next.create_payment_url(order_id, amount)


class PhonePeGateway(PaymentGateway):
    """Accepts amounts up to 100."""

    def create_payment_url(self, order_id: int, amount: int) -> Optional[str]:
        if amount <= 100:
            return PHONEPE_URL
        return super().create_payment_url(order_id, amount)


class StripeGateway(PaymentGateway):
    """Accepts amounts above 100 and up to 200."""

    def create_payment_url(self, order_id: int, amount: int) -> Optional[str]:
        if 100 < amount <= 200:
            return STRIPE_URL
        return super().create_payment_url(order_id, amount)