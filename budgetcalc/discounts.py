"""Discount chain: ordered rules, first match wins, zero when none applies."""
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from budgetcalc.budget import Budget


@dataclass(frozen=True)
class DiscountRule:
    name: str
    applies_when: Callable[[Budget], bool]
    rate: Callable[[Budget], float]


BULK = DiscountRule(
    name="bulk",
    applies_when=lambda b: b.item_count > 5,
    rate=lambda b: 0.10,
)
HIGH_VALUE = DiscountRule(
    name="high_value",
    applies_when=lambda b: b.total_value >= 100,
    rate=lambda b: 0.05,
)


class DiscountChain:
    def __init__(self, rules: Sequence[DiscountRule] = (BULK, HIGH_VALUE)):
        self.rules = tuple(rules)

    def match(self, budget: Budget) -> Optional[DiscountRule]:
        for rule in self.rules:
            if rule.applies_when(budget):
                return rule
        return None

    def apply(self, budget: Budget) -> Tuple[Optional[DiscountRule], float]:
        """Return the winning rule (None for the fallback) and the discount it grants."""
        rule = self.match(budget)
        if rule is None:
            return None, 0.0
        return rule, budget.total_value * rule.rate(budget)

    def evaluate(self, budget: Budget) -> float:
        return self.apply(budget)[1]


DEFAULT_CHAIN = DiscountChain()


def calculate_discount(budget: Budget) -> float:
    return DEFAULT_CHAIN.evaluate(budget)
