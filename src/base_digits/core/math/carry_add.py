"""
Carry-Limited Adder — сложение одной позиции с переносом

Единственное место, где живёт семантика модульной редукции:
    capped_add(a, b, (0, base)) -> (a + b) % base, перенос (a + b) // base

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Cap всегда (0, base) с base > 0; иначе CappedAddError
2. Перенос сообщается только если он ненулевой (carry=None иначе)
3. Знак MINUS и nega-base зарезервированы: NotImplementedError, никогда
   не молчаливый неверный результат
4. Функция чистая, без состояния
"""

from dataclasses import dataclass
from enum import Enum

from base_digits.core.errors import CappedAddError


# =============================================================================
# TYPES
# =============================================================================


class Sign(str, Enum):
    """Знак цифры. MINUS зарезервирован для будущего borrow."""

    PLUS = "+"
    MINUS = "-"


@dataclass(frozen=True)
class SignNum:
    """Цифра со знаком."""

    num: int
    sign: Sign = Sign.PLUS


@dataclass(frozen=True)
class CarryResult:
    """Результат capped_add: цифра позиции и опциональный перенос."""

    sign_num: SignNum
    carry: SignNum | None

    @property
    def digit(self) -> int:
        return self.sign_num.num

    @property
    def carry_value(self) -> int:
        """Перенос как int (0 если переноса нет)"""
        return 0 if self.carry is None else self.carry.num


# =============================================================================
# CAPPED ADD
# =============================================================================


def _as_sign_num(value: int | SignNum) -> SignNum:
    if isinstance(value, SignNum):
        return value
    return SignNum(value)


def capped_add(
    a: int | SignNum,
    b: int | SignNum,
    cap: tuple[int, int],
) -> CarryResult:
    """
    Сложение двух значений с редукцией по base.

    Args:
        a: Первое слагаемое (int или SignNum)
        b: Второе слагаемое (int или SignNum)
        cap: (low, high); поддерживается только (0, base) с base > 0

    Returns:
        CarryResult с цифрой (a + b) % base и переносом (a + b) // base,
        перенос None если равен нулю

    Raises:
        CappedAddError: Если cap не имеет вид (0, base>0)
        NotImplementedError: Nega-base cap или операнд со знаком MINUS

    Examples:
        >>> capped_add(9, 1, (0, 10)).digit
        0
        >>> capped_add(9, 1, (0, 10)).carry_value
        1
        >>> capped_add(3, 4, (0, 10)).carry is None
        True
    """
    low, high = cap
    if high == 0 and low < 0:
        raise NotImplementedError("nega-base capped addition is not implemented")
    if not (low == 0 and high > 0):
        raise CappedAddError(f"cap must be (0, base) with base > 0, got {cap}")

    left = _as_sign_num(a)
    right = _as_sign_num(b)

    if left.sign is not Sign.PLUS or right.sign is not Sign.PLUS:
        raise NotImplementedError("signed (borrow) capped addition is not implemented")

    carry, num = divmod(left.num + right.num, high)
    return CarryResult(
        sign_num=SignNum(num),
        carry=SignNum(carry) if carry else None,
    )
