"""
Table Order Service — Cook time policy

Every new order gets a preparation time drawn uniformly from
[COOK_TIME_MIN_MINUTES, COOK_TIME_MAX_MINUTES], both ends inclusive.
"""
import random

from table_order.core.config import Settings


class CookTimePolicy:
    def __init__(self, minimum: int = 5, maximum: int = 10, rng: random.Random | None = None):
        if minimum < 1:
            raise ValueError(f"minimum cook time must be at least 1, got {minimum}")
        if minimum > maximum:
            raise ValueError(f"minimum cook time {minimum} exceeds maximum {maximum}")
        self.minimum = minimum
        self.maximum = maximum
        self._rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: Settings, rng: random.Random | None = None) -> "CookTimePolicy":
        return cls(settings.COOK_TIME_MIN_MINUTES, settings.COOK_TIME_MAX_MINUTES, rng=rng)

    def draw(self) -> int:
        return self._rng.randint(self.minimum, self.maximum)

    def __repr__(self) -> str:
        return f"CookTimePolicy({self.minimum}..{self.maximum})"
