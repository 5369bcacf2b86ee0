"""Runnable walk-throughs of each pattern, selectable from the command line."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Optional

from .auction import AuctionMediator, Bidder
from .config import Config
from .factory import ShapeFactory, ShapeKind
from .filesystem import DirectoryNode, FileNode
from .memento import History, Original, Snapshot, State
from .payment_chain import PaymentGateway, PhonePeGateway, StripeGateway
from .payments_proxy import (
    CachedPaymentsService,
    LoggedPaymentsService,
    PaymentsServiceImpl,
)
from .pizza import (
    BaseMargherita,
    CheeseBlastDecorator,
    ChickenDecorator,
    Pizza,
    TomatoDecorator,
)
from .visitor import AreaVisitor, Circle, CsvVisitor, Rect, Shape

__all__ = [
    "DEMOS",
    "payment_chain_demo",
    "auction_demo",
    "memento_demo",
    "visitor_demo",
    "factory_demo",
    "singleton_demo",
    "composite_demo",
    "pizza_demo",
    "proxy_demo",
    "main",
]

ORDER_AMOUNTS = [(1, 100), (2, 200), (3, 300)]
CHAIN_SEPARATOR = "-------------------------------------------------"
PROXY_SEPARATOR = "----------------------------------------"


def _run_chain(
    label: str, head: PaymentGateway
) -> list[tuple[str, int, Optional[str]]]:
    results = []
    for order_id, amount in ORDER_AMOUNTS:
        url = head.create_payment_url(order_id, amount)
        print(f"[{label} chain result] ({amount}):{url if url is not None else 'Failed'}")
        print(CHAIN_SEPARATOR)
        results.append((label, amount, url))
    return results


def payment_chain_demo() -> list[tuple[str, int, Optional[str]]]:
    """Send three orders through a PhonePe-first and a Stripe-first chain."""
    phonepe, stripe = PhonePeGateway(), StripeGateway()
    phonepe.set_next(stripe)
    results = _run_chain("PhonePe", phonepe)

    phonepe, stripe = PhonePeGateway(), StripeGateway()
    stripe.set_next(phonepe)
    results.extend(_run_chain("Stripe", stripe))
    return results


def auction_demo() -> list[Bidder]:
    """Have five bidders each place one bid through an auction mediator."""
    mediator = AuctionMediator()
    bidders = [Bidder(str(number), mediator) for number in range(1, 6)]
    for bidder in bidders:
        mediator.add_participant(bidder)
    for offset, bidder in enumerate(bidders):
        mediator.place_bid(bidder, 100 + offset)
    return bidders


def memento_demo() -> list[State]:
    """Move an object around, saving and undoing; return each printed state."""
    original = Original(State(0, 0))
    history = History()
    printed: list[State] = []

    def show() -> None:
        state = original.snap().state
        print(state)
        printed.append(state)

    def undo() -> None:
        restored = history.undo()
        original.restore(restored if restored is not None else Snapshot(State(0, 0)))

    history.add_snapshot(original.snap())
    show()

    original.move(1, 2)
    history.add_snapshot(original.snap())
    show()

    original.move(2, 4)
    original.move(4, 5)
    history.add_snapshot(original.snap())
    show()

    undo()
    show()

    original.move(3, 3)
    history.add_snapshot(original.snap())
    show()

    original.move(5, 5)
    history.add_snapshot(original.snap())
    show()

    undo()
    show()
    return printed


def visitor_demo() -> list[str]:
    """Report six shapes as CSV dimensions and then as areas."""
    shapes: list[Shape] = [
        Circle(1.0),
        Rect(1.0, 2.0),
        Circle(2.0),
        Rect(2.0, 3.0),
        Circle(3.0),
        Rect(3.0, 4.0),
    ]
    lines: list[str] = []

    for title, header, visitor in (
        ("----CSV----", "Shape kind, Dimensions", CsvVisitor()),
        ("----Area----", "Shape kind, Area", AreaVisitor()),
    ):
        print(title)
        print(header)
        lines.extend([title, header])
        lines.extend(str(shape.accept(visitor)) for shape in shapes)
    return lines


def factory_demo() -> list[float]:
    """Create shapes from two differently configured factories."""
    large = ShapeFactory(5, 5, 15)
    small = ShapeFactory(1, 1, 1)
    shapes = [
        large.create_shape(ShapeKind.CIRCLE),
        small.create_shape(ShapeKind.CIRCLE),
        large.create_shape(ShapeKind.RECTANGLE),
        small.create_shape(ShapeKind.RECTANGLE),
    ]
    areas = [shape.area() for shape in shapes]
    for area in areas:
        print(f"Area: {area:g}")
    return areas


def singleton_demo() -> list[Config]:
    """Ask for the shared configuration five times."""
    return [Config.get_instance() for _ in range(5)]


def composite_demo() -> list[str]:
    """Build a small directory tree and list it."""
    root = DirectoryNode("root")
    dir1 = DirectoryNode("1")
    dir2 = DirectoryNode("2")
    dir3 = DirectoryNode("3")

    dir2.add(FileNode("B"))
    dir2.add(FileNode("C"))
    dir2.add(dir3)

    root.add(FileNode("A"))
    root.add(dir1)
    root.add(dir2)
    return root.ls()


def pizza_demo() -> Pizza:
    """Layer toppings onto a margherita and print the order summary."""
    pizza = TomatoDecorator(
        ChickenDecorator(CheeseBlastDecorator(BaseMargherita()))
    )
    print("🍕 Pizza Order Summary")
    print(f"Cost: ${pizza.cost():g}")
    print(f"Ingredients: [{', '.join(pizza.ingredients())}]")
    return pizza


def proxy_demo() -> list[str]:
    """Request the same order's link twice through logging and caching proxies."""
    service = LoggedPaymentsService(
        CachedPaymentsService(PaymentsServiceImpl("placeholder"))
    )
    first = service.create_payment_url(123, 987)
    print("First Payment Link  >")
    print(first)
    print(PROXY_SEPARATOR)
    final = service.create_payment_url(321, 987)
    print("Final Payment Link  >")
    print(final)
    return [first, final]


DEMOS: dict[str, Callable[[], object]] = {
    "chain": payment_chain_demo,
    "mediator": auction_demo,
    "memento": memento_demo,
    "visitor": visitor_demo,
    "factory": factory_demo,
    "singleton": singleton_demo,
    "composite": composite_demo,
    "decorator": pizza_demo,
    "proxy": proxy_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the named demos, or all of them when none is named."""
    parser = argparse.ArgumentParser(
        prog="patternkit", description="Run design-pattern demos."
    )
    parser.add_argument(
        "demos",
        nargs="*",
        metavar="DEMO",
        help=f"demos to run: {', '.join(DEMOS)} (default: all)",
    )
    args = parser.parse_args(argv)

    unknown = [name for name in args.demos if name not in DEMOS]
    if unknown:
        parser.error(f"unknown demo: {', '.join(unknown)}")

    for name in args.demos or DEMOS:
        print(f"===== {name} =====")
        DEMOS[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())