"""
Errors — таксономия исключений base-digits

Две категории:
- Recoverable: некорректный ввод от вызывающего кода (MappingOutOfRange,
  UnknownSymbolError, NegativeValueError). Наследуются от ValueError.
- Fatal: нарушение предусловия или инварианта (PreconditionViolation и
  подклассы). Означает ошибку программиста, восстановление не предполагается.

Арифметика между разными алфавитами ошибкой НЕ является: операнд
конвертируется в алфавит получателя (см. Digits.gen).
"""


class DigitsError(Exception):
    """Базовое исключение пакета base-digits."""


# =============================================================================
# RECOVERABLE
# =============================================================================


class MappingOutOfRange(DigitsError, ValueError):
    """
    Place-value вне диапазона алфавита (value >= base).

    Возникает при построении Digits из вектора ordinal-значений
    и при запросе Alphabet.symbol() для несуществующей позиции.
    """


class UnknownSymbolError(DigitsError, ValueError):
    """Символ отсутствует в таблице алфавита."""


class NegativeValueError(DigitsError, ValueError):
    """Отрицательное native-значение. Отрицательные числа не поддерживаются."""


# =============================================================================
# FATAL (PRECONDITION / INVARIANT)
# =============================================================================


class PreconditionViolation(DigitsError):
    """
    Нарушение предусловия операции.

    Ошибка программиста или сломанный инвариант: операция прерывается
    немедленно, silent coercion не выполняется.
    """


class BaseTooSmallError(PreconditionViolation):
    """Non-adjacent stepping требует base > 3."""


class IncompatibleAlphabetError(PreconditionViolation):
    """Сравнение по величине для Digits с разными алфавитами."""


class StepMapInvariantError(PreconditionViolation):
    """Base-map генератора шагов попал в недостижимое состояние."""


class CappedAddError(PreconditionViolation):
    """Некорректный cap для capped_add: ожидается (0, base) с base > 0."""
