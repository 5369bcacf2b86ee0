"""An auction whose bidders talk only through a mediator."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Mediator", "AuctionMediator", "Bidder"]


class Mediator(ABC):
    """Routes bids between participants."""

    @abstractmethod
    def place_bid(self, sender: Bidder, amount: int) -> None:
        """Announce a bid from ``sender`` to the other participants."""

    @abstractmethod
    def add_participant(self, participant: Bidder) -> None:
        """Register a participant."""


class AuctionMediator(Mediator):
    """Sends each bid to every participant except the one who placed it."""

    def __init__(self) -> None:
        self.participants: list[Bidder] = []

    def place_bid(self, sender: Bidder, amount: int) -> None:
        for participant in self.participants:
            if participant is not sender:
                participant.receive_message(str(amount))

    def add_participant(self, participant: Bidder) -> None:
        self.participants.append(participant)


class Bidder:
    """An auction participant that prints and keeps the bids it hears of."""

    def __init__(self, name: str, mediator: Mediator) -> None:
        self.name = name
        self.mediator = mediator
        self.messages: list[str] = []

    def receive_message(self, message: str) -> None:
        self.messages.append(message)
        print(f"[{self.name}] new bid: {message}")