"""A payments service wrapped by caching and logging proxies."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = [
    "PAYMENTS_BASE_URL",
    "PaymentsService",
    "PaymentsServiceImpl",
    "CachedPaymentsService",
    "LoggedPaymentsService",
]

PAYMENTS_BASE_URL = "https://payments.example.com/"


class PaymentsService(ABC):
    """Creates payment links for orders."""

    @abstractmethod
    def create_payment_url(self, amount: int, order_id: int) -> str:
        """Return a payment link for ``amount`` on ``order_id``."""


class PaymentsServiceImpl(PaymentsService):
    """The real service that builds payment links."""

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def create_payment_url(self, amount: int, order_id: int) -> str:
        print("<PaymentsServiceImpl>")
        link = f"{PAYMENTS_BASE_URL}{amount}@{order_id}"
        print("</PaymentsServiceImpl>")
        return link


class CachedPaymentsService(PaymentsService):
    """Remembers the first link made for each order and serves it again."""

    def __init__(self, service: PaymentsService) -> None:
        self.service = service
        self.cache: dict[int, str] = {}

    def create_payment_url(self, amount: int, order_id: int) -> str:
        print("<CachedPaymentsService>")
        if order_id in self.cache:
            print("[CPS] Cache Hit!")
            print("</CachedPaymentsService>")
            return self.cache[order_id]

        print("[CPS] Cache Miss :(")
        link = self.service.create_payment_url(amount, order_id)
        self.cache[order_id] = link
        print("</CachedPaymentsService>")
        return link


class LoggedPaymentsService(PaymentsService):
    """Logs around each call to the wrapped service."""

    def __init__(self, service: PaymentsService) -> None:
        self.service = service

    def create_payment_url(self, amount: int, order_id: int) -> str:
        print("<LoggedPaymentsService>")
        print("[LPS] Begin Logged Execution:")
        link = self.service.create_payment_url(amount, order_id)
        print("[LPS] End Logged Execution:")
        print("</LoggedPaymentsService>")
        return link