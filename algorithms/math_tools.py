import math
from typing import Iterable

import numpy as np


class MathTools:
    """Numeric helpers shared by the plan generators and the estimator."""

    KCAL_PER_G_PROTEIN: int = 4
    KCAL_PER_G_CARB: int = 4
    KCAL_PER_G_FAT: int = 9

    @staticmethod
    def clamp(value: float, min_value: float, max_value: float) -> float:
        """Clamp ``value`` to the inclusive range [min_value, max_value]."""
        if min_value > max_value:
            raise ValueError("min_value must not exceed max_value")
        return max(min_value, min(value, max_value))

    @staticmethod
    def round_half_up(value: float, digits: int = 0) -> float:
        """Round ``value`` to ``digits`` decimals with halves going up.

        Python's ``round`` rounds halves to even, so 18.5 would become 18;
        here it becomes 19. Binary noise below 1e-9 is dropped first so that
        102.49999999999999 is treated as the half it was meant to be.
        """
        factor = 10**digits
        scaled = round(value * factor, 9)
        return math.floor(scaled + 0.5) / factor

    @classmethod
    def round_int(cls, value: float) -> int:
        return int(cls.round_half_up(value))

    @classmethod
    def round_to_increment(cls, value: float, increment: float) -> float:
        """Round ``value`` to the nearest multiple of ``increment``."""
        if increment <= 0:
            raise ValueError("increment must be positive")
        return cls.round_half_up(value / increment) * increment

    @staticmethod
    def mean(values: Iterable[float]) -> float:
        """Return the arithmetic mean, or 0.0 for an empty input."""
        data = list(values)
        if not data:
            return 0.0
        return float(np.mean(np.array(data, dtype=float)))

    @staticmethod
    def fraction(count: int, total: int) -> float:
        """Return ``count / total`` with an empty total giving 0.0."""
        if total <= 0:
            return 0.0
        return count / total

    @staticmethod
    def total(values: Iterable[float]) -> float:
        """Sum ``values`` without accumulating float error."""
        return math.fsum(values)
