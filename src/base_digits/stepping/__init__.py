"""Non-adjacent stepping — перечисление значений без длинных серий повторов.

- StepMap: генератор минимальных инкрементов
- prep / step / next: продвижение Digits к следующему валидному значению
- NonAdjacentEnumerator: перечисление по конфигурации
"""

from .config import MIN_STEPPING_BASE, NonAdjacentConfig
from .non_adjacent import (
    NonAdjacentEnumerator,
    iter_non_adjacent,
    next_non_adjacent,
    prep_non_adjacent,
    step_non_adjacent,
)
from .step_map import StepMap, next_base_map

__all__ = [
    "MIN_STEPPING_BASE",
    "NonAdjacentConfig",
    "NonAdjacentEnumerator",
    "StepMap",
    "iter_non_adjacent",
    "next_base_map",
    "next_non_adjacent",
    "prep_non_adjacent",
    "step_non_adjacent",
]
