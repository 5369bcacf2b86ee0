import pytest

from patternkit.config import Config
from patternkit.demos import (
    DEMOS,
    auction_demo,
    composite_demo,
    factory_demo,
    main,
    memento_demo,
    payment_chain_demo,
    pizza_demo,
    proxy_demo,
    singleton_demo,
    visitor_demo,
)
from patternkit.factory import Circle as FactoryCircle
from patternkit.memento import State
from patternkit.payment_chain import PHONEPE_URL, STRIPE_URL
from patternkit.payments_proxy import PAYMENTS_BASE_URL


def test_payment_chain_results_for_both_orders():
    results = payment_chain_demo()
    by_label = {}
    for label, amount, url in results:
        by_label.setdefault(label, []).append((amount, url))
    expected = [(100, PHONEPE_URL), (200, STRIPE_URL), (300, None)]
    assert by_label["PhonePe"] == expected
    assert by_label["Stripe"] == expected


def test_payment_chain_prints_failed_for_unhandled(capsys):
    payment_chain_demo()
    out = capsys.readouterr().out
    assert "[PhonePe chain result] (300):Failed" in out
    assert "[Stripe chain result] (300):Failed" in out
    assert f"[Stripe chain result] (100):{PHONEPE_URL}" in out


def test_auction_each_bidder_hears_all_other_bids():
    bidders = auction_demo()
    assert len(bidders) == 5
    all_bids = [str(100 + i) for i in range(5)]
    for index, bidder in enumerate(bidders):
        expected = [bid for i, bid in enumerate(all_bids) if i != index]
        assert bidder.messages == expected


def test_auction_output_lines(capsys):
    auction_demo()
    out = capsys.readouterr().out
    assert "[2] new bid: 100" in out
    assert "[1] new bid: 100" not in out


def test_memento_states_follow_moves_and_undos():
    states = memento_demo()
    assert states == [
        State(0, 0),
        State(1, 2),
        State(4, 5),
        State(1, 2),
        State(3, 3),
        State(5, 5),
        State(3, 3),
    ]


def test_memento_prints_states(capsys):
    memento_demo()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "State{x=0, y=0}"
    assert lines[-1] == "State{x=3, y=3}"


def test_visitor_lines_cover_both_reports():
    lines = visitor_demo()
    assert lines[:2] == ["----CSV----", "Shape kind, Dimensions"]
    assert "Circle, radius:1" in lines
    assert "Rectangle, L:2 x B:3" in lines
    area_index = lines.index("----Area----")
    assert lines[area_index + 1] == "Shape kind, Area"
    assert sum(line.startswith("Circle, area:") for line in lines) == 3
    assert sum(line.startswith("Rectangle, area:") for line in lines) == 3


def test_factory_areas_in_order():
    areas = factory_demo()
    assert areas == [
        FactoryCircle(5).area(),
        FactoryCircle(1).area(),
        5 * 15,
        1 * 1,
    ]


def test_composite_listing():
    assert composite_demo() == [
        "Directory (root)/",
        "   A.file",
        "   Directory (1)/",
        "   Directory (2)/",
        "      B.file",
        "      C.file",
        "      Directory (3)/",
    ]


def test_pizza_summary(capsys):
    pizza = pizza_demo()
    assert pizza.ingredients() == ["Cheese Blast", "Margherita", "Chickens", "Tomatoes"]
    assert pizza.cost() == 330
    out = capsys.readouterr().out
    assert "🍕 Pizza Order Summary" in out
    assert "Ingredients: [Cheese Blast, Margherita, Chickens, Tomatoes]" in out


def test_proxy_serves_cached_link(capsys):
    first, final = proxy_demo()
    assert first == f"{PAYMENTS_BASE_URL}123@987"
    assert final == first
    out = capsys.readouterr().out
    assert out.count("[CPS] Cache Miss :(") == 1
    assert out.count("[CPS] Cache Hit!") == 1
    assert out.count("<PaymentsServiceImpl>") == 1


def test_main_runs_every_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    for name in DEMOS:
        assert f"===== {name} =====" in out


def test_main_runs_selected_demo_only(capsys):
    assert main(["composite"]) == 0
    out = capsys.readouterr().out
    assert "===== composite =====" in out
    assert "===== proxy =====" not in out
    assert "Directory (root)/" in out


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit) as excinfo:
        main(["no-such-demo"])
    assert excinfo.value.code == 2