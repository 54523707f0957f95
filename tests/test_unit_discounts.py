import pytest

from budgetcalc.budget import Budget, InvalidArgument
from budgetcalc.discounts import BULK, HIGH_VALUE, DEFAULT_CHAIN, DiscountChain, DiscountRule, calculate_discount


@pytest.mark.parametrize("total, items, expected", [
    (100, 6, 10.0),   # bulk
    (500, 1, 25.0),   # high value
    (50, 1, 0.0),     # nothing applies
    (0, 10, 0.0),     # bulk on an empty total
])
def test_scenarios(total, items, expected):
    assert calculate_discount(Budget(total, items)) == pytest.approx(expected)

def test_bulk_wins_over_high_value():
    b = Budget(500, 6)
    assert DEFAULT_CHAIN.match(b) is BULK
    assert DEFAULT_CHAIN.evaluate(b) == pytest.approx(50.0)

def test_bulk_ignores_total():
    for total in (1, 99.99, 100, 2500):
        assert calculate_discount(Budget(total, 7)) == pytest.approx(total * 0.10)

def test_high_value_boundary():
    assert DEFAULT_CHAIN.match(Budget(100, 5)) is HIGH_VALUE
    assert DEFAULT_CHAIN.match(Budget(99.99, 5)) is None
    assert calculate_discount(Budget(99.99, 5)) == 0.0

def test_result_bounds_and_idempotence():
    for total, items in [(0, 0), (10, 3), (150, 2), (150, 9), (1000, 0)]:
        b = Budget(total, items)
        d = calculate_discount(b)
        assert 0.0 <= d <= total * 0.10
        assert calculate_discount(b) == d

def test_later_rules_not_evaluated():
    def boom(b):
        raise AssertionError("should not be evaluated")
    chain = DiscountChain([BULK, DiscountRule("never", boom, lambda b: 0.5)])
    assert chain.evaluate(Budget(20, 6)) == pytest.approx(2.0)

def test_rate_may_depend_on_budget():
    tiered = DiscountRule("tiered", lambda b: True, lambda b: 0.2 if b.item_count > 10 else 0.01)
    chain = DiscountChain([tiered])
    assert chain.evaluate(Budget(100, 11)) == pytest.approx(20.0)
    assert chain.evaluate(Budget(100, 1)) == pytest.approx(1.0)

def test_empty_chain_falls_back_to_zero():
    assert DiscountChain([]).evaluate(Budget(1000, 50)) == 0.0

@pytest.mark.parametrize("total, items", [
    (-1, 0),
    (10, -1),
    ("abc", 1),
    (float("inf"), 6),
    (float("nan"), 1),
    (100, 5.9),       # fractional counts are not truncated into a smaller count
    (100, float("inf")),
    (True, 1),
    (100, True),
])
def test_invalid_budget(total, items):
    with pytest.raises(InvalidArgument):
        Budget(total, items)

def test_whole_float_count_accepted():
    b = Budget("150.5", 6.0)
    assert b.total_value == 150.5
    assert b.item_count == 6
    assert isinstance(b.item_count, int)

def test_apply_returns_rule_and_amount():
    rule, amount = DEFAULT_CHAIN.apply(Budget(200, 2))
    assert rule is HIGH_VALUE
    assert amount == pytest.approx(10.0)
    assert DEFAULT_CHAIN.apply(Budget(20, 2)) == (None, 0.0)

def test_apply_matches_once():
    calls = []
    def counted(b):
        calls.append(b)
        return True
    chain = DiscountChain([DiscountRule("counted", counted, lambda b: 0.1)])
    chain.apply(Budget(10, 1))
    assert len(calls) == 1
