# Budget value object read by the discount and tax calculators
import math
from dataclasses import dataclass


class InvalidArgument(ValueError):
    pass


@dataclass(frozen=True)
class Budget:
    total_value: float
    item_count: int = 0

    def __post_init__(self):
        if isinstance(self.total_value, bool) or isinstance(self.item_count, bool):
            raise InvalidArgument("budget values must be numbers, not booleans")
        try:
            total = float(self.total_value)
            count = float(self.item_count)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidArgument(f"budget values must be numeric: {exc}") from exc
        if not math.isfinite(total):
            raise InvalidArgument(f"total_value must be finite, got {total}")
        if not math.isfinite(count) or not count.is_integer():
            raise InvalidArgument(f"item_count must be a whole number, got {self.item_count!r}")
        if total < 0:
            raise InvalidArgument(f"total_value must be >= 0, got {total}")
        if count < 0:
            raise InvalidArgument(f"item_count must be >= 0, got {int(count)}")
        object.__setattr__(self, "total_value", total)
        object.__setattr__(self, "item_count", int(count))
