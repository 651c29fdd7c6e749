"""
Digits — целое неограниченной длины над произвольным алфавитом

Число хранится как список ordinal-цифр, младшая цифра первой
(индекс 0 = младший разряд). Алфавит задаёт символы и base.

Операции:
- Сложение с переносом (capped_add на каждую позицию)
- Умножение "в столбик" O(n·m)
- Возведение в степень (square-and-multiply)
- Сравнение по величине
- Конвертация между алфавитами (Horner)
- succ / pred_till_zero
- Структурные операции: zero_fill, zero_trim, reverse, max_adjacent, rcount

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Список цифр никогда не пуст: каноничный ноль = [0]
2. Каждая цифра 0 <= d < base
3. Равенство структурное: тот же алфавит и тот же список цифр
   (ведущие нули значимы для == и to_s, но не для <, >)
4. Операнд из другого алфавита конвертируется в алфавит получателя
5. Все алгоритмы итеративные: глубина стека не зависит от длины числа
"""

import logging
from collections.abc import Iterable

from base_digits.core.domain.alphabet import Alphabet
from base_digits.core.errors import (
    IncompatibleAlphabetError,
    MappingOutOfRange,
    NegativeValueError,
)
from base_digits.core.math.carry_add import capped_add

logger = logging.getLogger(__name__)


class Digits:
    """
    Неотрицательное целое с цифрами из Alphabet.

    Мутирующие операции (mut_add, mut_mul, mut_pow, succ, pred_till_zero,
    zero_fill, zero_trim, reverse) меняют объект на месте и возвращают self.
    Остальные возвращают новый объект.

    Examples:
        >>> base10 = Alphabet.from_string("0123456789")
        >>> Digits(base10, "11").add(Digits(base10, "2")).to_s()
        '13'
    """

    # mutable value: в set/dict ключах не используется
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, mapping: Alphabet, number: str = "") -> None:
        """
        Args:
            mapping: Алфавит
            number: Строка символов, старший разряд слева; "" -> ноль

        Raises:
            UnknownSymbolError: Если символ не из алфавита
        """
        self.mapping = mapping
        if number:
            self._digits = [mapping.ordinal(ch) for ch in reversed(number)]
        else:
            self._digits = [0]

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def _from_list(cls, mapping: Alphabet, digits: list[int]) -> "Digits":
        # digits: младший разряд первым, уже провалидированы
        obj = cls.__new__(cls)
        obj.mapping = mapping
        obj._digits = digits if digits else [0]
        return obj

    @classmethod
    def new_zero(cls, mapping: Alphabet) -> "Digits":
        return cls._from_list(mapping, [0])

    @classmethod
    def new_one(cls, mapping: Alphabet) -> "Digits":
        return cls(mapping, mapping.one)

    @classmethod
    def from_int(cls, mapping: Alphabet, value: int) -> "Digits":
        """
        Digits из native неотрицательного целого.

        Raises:
            NegativeValueError: Если value < 0
        """
        if value < 0:
            raise NegativeValueError(f"negative values are not supported, got {value}")
        return cls(mapping, mapping.gen(value))

    @classmethod
    def from_place_values(cls, mapping: Alphabet, values: Iterable[int]) -> "Digits":
        """
        Digits из вектора ordinal-значений, старший разряд первым.

        Пустой вектор даёт ноль.

        Raises:
            MappingOutOfRange: Если любое значение вне 0..base-1
        """
        places = list(values)
        base = mapping.base
        for value in places:
            if value < 0 or value >= base:
                raise MappingOutOfRange(
                    f"Character mapping out of range: {value} not in 0..{base - 1}"
                )
        places.reverse()
        return cls._from_list(mapping, places)

    @classmethod
    def from_digits(cls, mapping: Alphabet, source: "Digits") -> "Digits":
        """
        Конвертация source в алфавит mapping (Horner).

        Значение source вычисляется в арифметике целевого алфавита:
            result = (...((d_n) * b + d_{n-1}) * b + ...) + d_0
        где b — base исходного алфавита. Тот же алфавит — копия.
        Результат каноничный (без ведущих нулей).
        """
        if source.mapping == mapping:
            return source.copy()

        logger.debug(
            "radix conversion %r: base %d -> base %d",
            source.to_s(),
            source.base(),
            mapping.base,
        )
        radix = cls.from_int(mapping, source.base())
        result = cls.new_zero(mapping)
        for value in reversed(source._digits):
            result = result.mul(radix)
            if value:
                result.mut_add(cls.from_int(mapping, value), trim=True)
        return result

    def new_mapped(self, places: Iterable[int]) -> "Digits":
        """Digits в том же алфавите из place-values (старший первым)"""
        return Digits.from_place_values(self.mapping, places)

    def propagate(self, number: str) -> "Digits":
        """Новое значение из строки в том же алфавите"""
        return Digits(self.mapping, number)

    def gen(self, other: "int | Digits") -> "Digits":
        """
        Выразить int или Digits (любого алфавита) в алфавите self.

        Examples:
            >>> hex_num = Digits(hexadecimal(), "ff")
            >>> Digits(decimal(), "0").gen(hex_num).to_s()
            '255'
        """
        if isinstance(other, Digits):
            return Digits.from_digits(self.mapping, other)
        return Digits.from_int(self.mapping, other)

    def zero(self) -> "Digits":
        return Digits.new_zero(self.mapping)

    def one(self) -> "Digits":
        return Digits.new_one(self.mapping)

    def copy(self) -> "Digits":
        return Digits._from_list(self.mapping, list(self._digits))

    replicate = copy
    __copy__ = copy

    def __deepcopy__(self, memo) -> "Digits":
        return self.copy()

    def _into_base(self, other: "Digits") -> "Digits":
        if self.is_compat(other):
            return other
        return self.gen(other)

    # =========================================================================
    # INSPECTION
    # =========================================================================

    def base(self) -> int:
        return self.mapping.base

    def is_compat(self, other: "Digits") -> bool:
        """Совместимость = одинаковая таблица символов"""
        return self.mapping == other.mapping

    def length(self) -> int:
        """Количество разрядов (включая ведущие нули)"""
        return len(self._digits)

    def __len__(self) -> int:
        return len(self._digits)

    def is_zero(self) -> bool:
        return not any(self._digits)

    def is_one(self) -> bool:
        return self._digits[0] == 1 and not any(self._digits[1:])

    def is_end(self) -> bool:
        """Ровно один разряд со значением 0"""
        return self._digits == [0]

    def as_mapping_vec(self) -> list[int]:
        """Ordinal-значения разрядов, старший первым"""
        return self._digits[::-1]

    def pinky(self) -> str:
        """Символ младшего разряда"""
        return self.mapping.symbols[self._digits[0]]

    def to_s(self) -> str:
        symbols = self.mapping.symbols
        return "".join(symbols[d] for d in reversed(self._digits))

    def to_int(self) -> int:
        """Native значение (Horner)"""
        value = 0
        base = self.base()
        for d in reversed(self._digits):
            value = value * base + d
        return value

    def max_adjacent(self) -> int:
        """
        Длина самой длинной серии одинаковых соседних цифр минус один.

        Одиночная цифра даёт 0, "112" даёт 1, "1000" даёт 2.
        """
        longest = 1
        run = 1
        for prev, cur in zip(self._digits, self._digits[1:]):
            run = run + 1 if cur == prev else 1
            longest = max(longest, run)
        return longest - 1

    def is_valid_adjacent(self, adjacent: int) -> bool:
        """True если нет серии одинаковых цифр длиннее adjacent + 1"""
        return self.max_adjacent() <= adjacent

    def rcount(self, value: int) -> int:
        """Количество подряд идущих младших разрядов, равных value"""
        count = 0
        for d in self._digits:
            if d != value:
                break
            count += 1
        return count

    # =========================================================================
    # STRUCTURAL MUTATIONS
    # =========================================================================

    def assign(self, other: "Digits") -> "Digits":
        """Заменить значение self на значение other (в алфавите self)"""
        self._digits = list(self._into_base(other)._digits)
        return self

    def zero_fill(self, length: int) -> "Digits":
        """Дополнить ведущими нулями до length разрядов"""
        missing = length - len(self._digits)
        if missing > 0:
            self._digits.extend([0] * missing)
        return self

    def zero_trim(self) -> "Digits":
        """Удалить ведущие нули (минимум один разряд остаётся)"""
        digits = self._digits
        while len(digits) > 1 and digits[-1] == 0:
            digits.pop()
        return self

    def reverse(self) -> "Digits":
        """
        Развернуть порядок разрядов на месте.

        Без нормализации: "0008" -> "8000".
        """
        self._digits.reverse()
        return self

    def pow_base(self, positions: int) -> "Digits":
        """Умножение на base^positions через сдвиг (без общего умножения)"""
        return Digits._from_list(self.mapping, [0] * positions + self._digits)

    # =========================================================================
    # ADDITION
    # =========================================================================

    def _add_digits(self, other: list[int]) -> list[int]:
        base = self.base()
        mine = self._digits
        result: list[int] = []
        carry = 0

        for i in range(max(len(mine), len(other))):
            x = mine[i] if i < len(mine) else 0
            y = other[i] if i < len(other) else 0
            step = capped_add(x + carry, y, (0, base))
            result.append(step.digit)
            carry = step.carry_value

        while carry:
            step = capped_add(carry, 0, (0, base))
            result.append(step.digit)
            carry = step.carry_value

        # ширина получателя сохраняется, рост только значимыми разрядами
        width = len(mine)
        while len(result) > width and result[-1] == 0:
            result.pop()
        return result

    def mut_add(self, other: "Digits", trim: bool = False) -> "Digits":
        """
        Прибавить other на месте.

        Args:
            other: Слагаемое (любого алфавита)
            trim: Удалить ведущие нули результата

        Returns:
            self
        """
        other = self._into_base(other)
        self._digits = self._add_digits(other._digits)
        if trim:
            self.zero_trim()
        return self

    def add(self, other: "Digits") -> "Digits":
        """Сумма без удаления ведущих нулей получателя ("0001" + "1" = "0002")"""
        return self.copy().mut_add(other)

    def add_trimmed(self, other: "Digits") -> "Digits":
        """Сумма без ведущих нулей"""
        return self.copy().mut_add(other, trim=True)

    def succ(self) -> "Digits":
        """Инкремент на месте"""
        return self.mut_add(self.one())

    def pred_till_zero(self) -> "Digits":
        """
        Декремент на месте с полом в нуле.

        Младшие нули заимствуют (становятся base-1), первая ненулевая цифра
        уменьшается. Ноль остаётся нулём, ошибки underflow нет.
        Ширина сохраняется: "10" -> "09".
        """
        if self.is_zero():
            return self
        top = self.base() - 1
        for i, d in enumerate(self._digits):
            if d:
                self._digits[i] = d - 1
                break
            self._digits[i] = top
        return self

    # =========================================================================
    # MULTIPLICATION / POWER
    # =========================================================================

    def _mul_digit(self, digit: int) -> "Digits":
        base = self.base()
        result: list[int] = []
        carry = 0
        for d in self._digits:
            step = capped_add(d * digit, carry, (0, base))
            result.append(step.digit)
            carry = step.carry_value
        while carry:
            step = capped_add(carry, 0, (0, base))
            result.append(step.digit)
            carry = step.carry_value
        return Digits._from_list(self.mapping, result)

    def mul(self, other: "Digits") -> "Digits":
        """
        Произведение "в столбик".

        Каждая цифра множителя на позиции p умножает всё множимое,
        частичное произведение сдвигается на p разрядов (pow_base)
        и накапливается сложением. Результат без ведущих нулей.
        """
        other = self._into_base(other)
        result = self.zero()
        for position, dgt in enumerate(other._digits):
            if dgt == 0:
                continue
            partial = self._mul_digit(dgt).pow_base(position)
            result.mut_add(partial, trim=True)
        return result.zero_trim()

    def mut_mul(self, other: "Digits") -> "Digits":
        self._digits = self.mul(other)._digits
        return self

    def pow(self, exponent: "Digits | int") -> "Digits":
        """
        Возведение в неотрицательную целую степень.

        exponent == 0 даёт один, exponent == 1 даёт копию self.
        Результат совпадает с повторным умножением, но число умножений
        логарифмично по значению степени.

        Raises:
            NegativeValueError: Если exponent — отрицательный int
        """
        if isinstance(exponent, Digits):
            power = exponent.to_int()
        else:
            power = exponent
        if power < 0:
            raise NegativeValueError(f"negative exponents are not supported, got {power}")

        if power == 0:
            return self.one()
        if power == 1:
            return self.copy()

        result = self.one()
        square = self.copy()
        while power:
            if power & 1:
                result = result.mul(square)
            power >>= 1
            if power:
                square = square.mul(square)
        return result

    def mut_pow(self, exponent: "Digits | int") -> "Digits":
        self._digits = self.pow(exponent)._digits
        return self

    # =========================================================================
    # NON-ADJACENT STEPPING
    # =========================================================================

    def prep_non_adjacent(self, adjacent: int) -> "Digits":
        from base_digits.stepping.non_adjacent import prep_non_adjacent

        return prep_non_adjacent(self, adjacent)

    def step_non_adjacent(self, adjacent: int) -> "Digits":
        from base_digits.stepping.non_adjacent import step_non_adjacent

        return step_non_adjacent(self, adjacent)

    def next_non_adjacent(self, adjacent: int) -> "Digits":
        from base_digits.stepping.non_adjacent import next_non_adjacent

        return next_non_adjacent(self, adjacent)

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def _significant(self) -> list[int]:
        digits = self._digits
        end = len(digits)
        while end > 1 and digits[end - 1] == 0:
            end -= 1
        return digits[:end]

    def _compare(self, other: "Digits") -> int:
        if not self.is_compat(other):
            raise IncompatibleAlphabetError(
                f"cannot order values of alphabets {self.mapping!s} and {other.mapping!s}"
            )
        mine = self._significant()
        theirs = other._significant()
        if len(mine) != len(theirs):
            return -1 if len(mine) < len(theirs) else 1
        for x, y in zip(reversed(mine), reversed(theirs)):
            if x != y:
                return -1 if x < y else 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Digits):
            return NotImplemented
        return self.mapping == other.mapping and self._digits == other._digits

    def __lt__(self, other: "Digits") -> bool:
        if not isinstance(other, Digits):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: "Digits") -> bool:
        if not isinstance(other, Digits):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: "Digits") -> bool:
        if not isinstance(other, Digits):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: "Digits") -> bool:
        if not isinstance(other, Digits):
            return NotImplemented
        return self._compare(other) >= 0

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: "Digits") -> "Digits":
        if not isinstance(other, Digits):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: "Digits") -> "Digits":
        if not isinstance(other, Digits):
            return NotImplemented
        return self.mut_add(other)

    def __mul__(self, other: "Digits") -> "Digits":
        if not isinstance(other, Digits):
            return NotImplemented
        return self.mul(other)

    def __imul__(self, other: "Digits") -> "Digits":
        if not isinstance(other, Digits):
            return NotImplemented
        return self.mut_mul(other)

    def __pow__(self, exponent: "Digits | int") -> "Digits":
        if not isinstance(exponent, (Digits, int)):
            return NotImplemented
        return self.pow(exponent)

    def __ipow__(self, exponent: "Digits | int") -> "Digits":
        if not isinstance(exponent, (Digits, int)):
            return NotImplemented
        return self.mut_pow(exponent)

    # =========================================================================
    # REPRESENTATION
    # =========================================================================

    def __str__(self) -> str:
        return self.to_s()

    def __repr__(self) -> str:
        return f"Digits({self.to_s()!r}, alphabet={str(self.mapping)!r})"
