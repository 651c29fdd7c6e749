"""Конфигурация non-adjacent stepping."""

from dataclasses import dataclass
from typing import Final

# Минимальная база: инкременты StepMap используют цифры 1, 2, 3
MIN_STEPPING_BASE: Final[int] = 4


@dataclass(frozen=True)
class NonAdjacentConfig:
    """Конфигурация перечисления без длинных серий повторов.

    - adjacent_limit: сколько повторов соседней цифры допустимо
      (0 = никаких повторов, 1 = "aa" допустимо, "aaa" нет)
    - min_base: минимальная база алфавита (не меньше MIN_STEPPING_BASE)
    """
    adjacent_limit: int = 0
    min_base: int = MIN_STEPPING_BASE

    def __post_init__(self) -> None:
        if self.adjacent_limit < 0:
            raise ValueError(f"adjacent_limit must be non-negative, got {self.adjacent_limit}")
        if self.min_base < MIN_STEPPING_BASE:
            raise ValueError(
                f"min_base must be >= {MIN_STEPPING_BASE}, got {self.min_base}"
            )
