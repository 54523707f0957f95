# Tax variants dispatched by kind; ICPP and IKCV pick between two rates
from enum import Enum
from typing import Callable

from budgetcalc.budget import Budget, InvalidArgument


class TaxKind(str, Enum):
    ISS = "iss"
    ICMS = "icms"
    ICPP = "icpp"
    IKCV = "ikcv"

    @classmethod
    def parse(cls, name) -> "TaxKind":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            known = ", ".join(k.value for k in cls)
            raise InvalidArgument(f"unknown tax {name!r} (expected one of: {known})") from None


def _two_rates(budget: Budget, use_max: Callable[[Budget], bool], max_rate: float, min_rate: float) -> float:
    rate = max_rate if use_max(budget) else min_rate
    return budget.total_value * rate


def calculate_tax(budget: Budget, kind) -> float:
    kind = TaxKind.parse(kind)
    if kind is TaxKind.ISS:
        return budget.total_value * 0.06
    if kind is TaxKind.ICMS:
        return budget.total_value * 0.10
    if kind is TaxKind.ICPP:
        return _two_rates(budget, lambda b: b.total_value > 500, 0.03, 0.02)
    if kind is TaxKind.IKCV:
        return _two_rates(budget, lambda b: b.total_value > 300 and b.item_count > 3, 0.04, 0.025)
    raise InvalidArgument(f"unsupported tax kind: {kind!r}")
