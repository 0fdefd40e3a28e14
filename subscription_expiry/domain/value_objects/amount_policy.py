"""Amount policy value object."""

from enum import StrEnum, auto


class AmountPolicy(StrEnum):
    """How amounts that are not a whole number of monthly fees are handled."""

    STRICT = auto()
    FLOOR = auto()

    def __str__(self) -> str:
        return self.value
