"""Non-adjacent stepping — перечисление значений без длинных серий повторов.

Значение валидно для limit k, если ни одна цифра не повторяется подряд
больше k + 1 раз (Digits.is_valid_adjacent).

Две фазы:
1. prep: невалидное значение поднимается до ближайшего "чистого"
   префикса с нулевым хвостом и уменьшается на единицу
2. step: к значению прибавляются инкременты StepMap по возрастанию,
   принимается первая валидная сумма

Для валидного x next_non_adjacent(x, k) — наименьшее валидное значение > x.
"""

import logging
from collections.abc import Iterator
from typing import Optional

from base_digits.core.errors import BaseTooSmallError
from base_digits.core.math.digits import Digits
from base_digits.stepping.config import MIN_STEPPING_BASE, NonAdjacentConfig
from base_digits.stepping.step_map import StepMap

logger = logging.getLogger(__name__)


def _require_stepping_base(digits: Digits, min_base: int = MIN_STEPPING_BASE) -> None:
    if digits.base() < min_base:
        raise BaseTooSmallError(
            f"You may not use non-adjacent stepping with numeric bases "
            f"of less than {min_base}! Got base {digits.base()}"
        )


def _first_violation(places: list[int], adjacent: int) -> Optional[int]:
    """Индекс (MSD-first) цифры, на которой серия превышает limit, иначе None"""
    run = 0
    for i in range(1, len(places)):
        run = run + 1 if places[i] == places[i - 1] else 0
        if run > adjacent:
            return i
    return None


def prep_non_adjacent(digits: Digits, adjacent: int) -> Digits:
    """
    Подготовка значения к step-фазе (на месте).

    Валидное значение не меняется. Иначе: префикс до первой слишком
    длинной серии включительно увеличивается на 1, остаток заполняется
    нулями, проверка повторяется с начала. Итог уменьшается на 1
    (pred_till_zero), чтобы первый шаг step-фазы вернул его обратно.

    Args:
        digits: Значение (мутируется)
        adjacent: Допустимое количество повторов соседних цифр

    Returns:
        digits

    Raises:
        BaseTooSmallError: base < 4
    """
    _require_stepping_base(digits)

    if digits.is_valid_adjacent(adjacent):
        return digits

    places = digits.as_mapping_vec()
    while True:
        i = _first_violation(places, adjacent)
        if i is None:
            break
        prefix = digits.new_mapped(places[: i + 1]).succ()
        bumped = prefix.as_mapping_vec() + [0] * (len(places) - i - 1)
        logger.debug("prep bump at %d: %s -> %s", i, places, bumped)
        places = bumped

    return digits.assign(digits.new_mapped(places).pred_till_zero())


def step_non_adjacent(digits: Digits, adjacent: int) -> Digits:
    """
    Шаг к следующему валидному значению (на месте).

    Кандидаты digits + inc для инкрементов StepMap по возрастанию;
    принимается первый валидный.

    Raises:
        BaseTooSmallError: base < 4
    """
    candidate = digits
    for attempt, increment in enumerate(StepMap(digits.zero(), adjacent), start=1):
        candidate = digits.add(increment)
        if candidate.is_valid_adjacent(adjacent):
            logger.debug(
                "step %s + %s -> %s after %d candidates",
                digits.to_s(),
                increment.to_s(),
                candidate.to_s(),
                attempt,
            )
            break
    return digits.assign(candidate)


def next_non_adjacent(digits: Digits, adjacent: int) -> Digits:
    """prep + step: следующее значение без серий длиннее adjacent + 1 (на месте)"""
    prep_non_adjacent(digits, adjacent)
    return step_non_adjacent(digits, adjacent)


class NonAdjacentEnumerator:
    """Перечисление валидных значений по конфигурации.

    Не мутирует переданные значения: работает с копиями.
    """

    def __init__(self, config: Optional[NonAdjacentConfig] = None):
        self.config = config or NonAdjacentConfig()

    def next_value(self, digits: Digits) -> Digits:
        """Следующее валидное значение после digits (новый объект)"""
        _require_stepping_base(digits, self.config.min_base)
        return next_non_adjacent(digits.copy(), self.config.adjacent_limit)

    def iterate(self, start: Digits, count: Optional[int] = None) -> Iterator[Digits]:
        """
        Последовательность валидных значений после start.

        Args:
            start: Начальное значение (не включается)
            count: Количество значений; None — бесконечно
        """
        if count is not None and count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        _require_stepping_base(start, self.config.min_base)

        current = start.copy()
        produced = 0
        while count is None or produced < count:
            next_non_adjacent(current, self.config.adjacent_limit)
            produced += 1
            yield current.copy()


def iter_non_adjacent(
    start: Digits,
    limit: int = 0,
    count: Optional[int] = None,
) -> Iterator[Digits]:
    """
    Генератор значений после start без серий длиннее limit + 1.

    Examples:
        >>> base4 = Alphabet.from_string("0123")
        >>> [d.to_s() for d in iter_non_adjacent(Digits(base4), 0, 5)]
        ['1', '2', '3', '10', '12']
    """
    return NonAdjacentEnumerator(NonAdjacentConfig(adjacent_limit=limit)).iterate(start, count)
