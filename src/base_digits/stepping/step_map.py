"""StepMap — генератор минимальных шагов для non-adjacent stepping.

Base-map — короткий список ordinal-значений (старший разряд первым),
интерпретируемый в алфавите исходного Digits как очередной инкремент.
Последовательность инкрементов возрастает и покрывает все минимальные
расстояния между соседними значениями без серий длиннее limit + 1.

Пример, base 4, limit 0:
    1, 2, 3, 11, 21, 103, 203, 1021, 2021, 10203, ...

Переходы (tz = количество нулей в конце списка):
- []      → [1]
- [1]     → [2];  [2] → [3];  [3] → [1, 1]
- [1, 1]  → [2, 1]
- [2, 1]  → [1, 0, 3] если limit == 0, иначе [1, 0, 1]
- len ≥ 3, первый 1 → первый заменяется на 2
- len ≥ 3, первый 2 → хвост по двум последним элементам:
    (0, 1): pop; push 0 если tz < limit+1; push 1 если tz < limit+1, иначе 3
    (0, 3): pop; push 2, 1
    (2, 1): pop, pop; если tz == limit+1 push 2, 0, иначе push 0;
            push 3 если limit == 0, иначе 1
  затем первый элемент удаляется и в начало ставится 1
Любая другая форма — StepMapInvariantError.
"""

from base_digits.core.errors import BaseTooSmallError, StepMapInvariantError
from base_digits.core.math.digits import Digits
from base_digits.stepping.config import MIN_STEPPING_BASE


def _end_zero_qty(values: list[int]) -> int:
    count = 0
    for value in reversed(values):
        if value != 0:
            break
        count += 1
    return count


def next_base_map(base_map: list[int], limit: int) -> list[int]:
    """
    Следующее состояние base-map.

    Чистая функция: base_map не изменяется.

    Args:
        base_map: Текущее состояние (старший разряд первым)
        limit: Допустимое количество повторов соседних цифр

    Returns:
        Новый base-map

    Raises:
        StepMapInvariantError: Если base_map не достижим из []
    """
    size = len(base_map)

    if size == 0:
        return [1]

    if size == 1:
        transitions = {1: [2], 2: [3], 3: [1, 1]}
        if base_map[0] not in transitions:
            raise StepMapInvariantError(f"unreachable base-map {base_map}")
        return list(transitions[base_map[0]])

    if size == 2:
        pair = (base_map[0], base_map[1])
        if pair == (1, 1):
            return [2, 1]
        if pair == (2, 1):
            return [1, 0, 3] if limit == 0 else [1, 0, 1]
        raise StepMapInvariantError(f"unreachable base-map {base_map}")

    head = base_map[0]
    if head == 1:
        return [2] + base_map[1:]
    if head != 2:
        raise StepMapInvariantError(f"unreachable base-map {base_map}")

    next_map = list(base_map)
    tail = (base_map[-2], base_map[-1])
    zeros_max = limit + 1

    if tail == (0, 1):
        next_map.pop()
        if _end_zero_qty(next_map) < zeros_max:
            next_map.append(0)
        if _end_zero_qty(next_map) < zeros_max:
            next_map.append(1)
        else:
            next_map.append(3)
    elif tail == (0, 3):
        next_map.pop()
        next_map.extend([2, 1])
    elif tail == (2, 1):
        # башня из "20": сначала максимум нулей, затем "20"
        next_map.pop()
        next_map.pop()
        if _end_zero_qty(next_map) == zeros_max:
            next_map.extend([2, 0])
        else:
            next_map.append(0)
        next_map.append(3 if limit == 0 else 1)
    else:
        raise StepMapInvariantError(f"unreachable base-map {base_map}")

    return [1] + next_map[1:]


class StepMap:
    """Бесконечный итератор инкрементов для non-adjacent stepping.

    Каждый next() продвигает base-map и возвращает его как Digits
    в алфавите digits.
    """

    def __init__(self, digits: Digits, limit: int):
        """
        Args:
            digits: Источник алфавита (значение не используется)
            limit: Допустимое количество повторов соседних цифр (>= 0)

        Raises:
            BaseTooSmallError: base < 4
            ValueError: limit < 0
        """
        if digits.base() < MIN_STEPPING_BASE:
            raise BaseTooSmallError(
                f"You may not use non-adjacent stepping with numeric bases "
                f"of less than {MIN_STEPPING_BASE}! Got base {digits.base()}"
            )
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        self.digits = digits
        self.limit = limit
        self._base_map: list[int] = []

    @property
    def base_map(self) -> list[int]:
        return list(self._base_map)

    def __iter__(self) -> "StepMap":
        return self

    def __next__(self) -> Digits:
        self._base_map = next_base_map(self._base_map, self.limit)
        return self.digits.new_mapped(self._base_map)
