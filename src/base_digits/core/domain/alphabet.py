"""
Alphabet — таблица символов для чисел с произвольной базой

Immutable Pydantic модель: упорядоченный набор различных символов,
base = len(symbols). Позиция символа в таблице = его ordinal value.

Контракт для Digits:
- ordinal(symbol) -> value
- symbol(value) -> symbol
- base -> размер таблицы

Два алфавита совместимы, если совпадают их таблицы символов (равенство
по значению, не по identity и не только по base).
"""

from typing import Final

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from base_digits.core.errors import (
    MappingOutOfRange,
    NegativeValueError,
    UnknownSymbolError,
)

# =============================================================================
# CONSTANTS
# =============================================================================

DIGITS_DEC: Final[str] = "0123456789"
DIGITS_HEX: Final[str] = "0123456789abcdef"


# =============================================================================
# ALPHABET MODEL
# =============================================================================


class Alphabet(BaseModel):
    """
    Упорядоченный алфавит символов-цифр.

    Каждый символ ровно один character, символы уникальны,
    минимум один символ в таблице.
    """

    symbols: tuple[str, ...] = Field(..., min_length=1, description="Символы в порядке ordinal")

    model_config = {"frozen": True}

    _ordinals: dict[str, int] = PrivateAttr(default_factory=dict)

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Каждый символ — один character, без повторов"""
        for s in v:
            if len(s) != 1:
                raise ValueError(f"symbol must be a single character, got {s!r}")
        if len(set(v)) != len(v):
            raise ValueError(f"symbols must be distinct, got {''.join(v)!r}")
        return v

    def model_post_init(self, __context) -> None:
        self._ordinals = {s: i for i, s in enumerate(self.symbols)}

    @classmethod
    def from_string(cls, symbols: str) -> "Alphabet":
        """Alphabet из строки: каждый character — отдельный символ"""
        return cls(symbols=tuple(symbols))

    @property
    def base(self) -> int:
        return len(self.symbols)

    @property
    def zero(self) -> str:
        """Символ с ordinal 0"""
        return self.symbols[0]

    @property
    def one(self) -> str:
        """Символ с ordinal 1 (требует base >= 2)"""
        return self.symbol(1)

    def ordinal(self, symbol: str) -> int:
        """
        Ordinal value символа.

        Raises:
            UnknownSymbolError: Если символа нет в таблице
        """
        try:
            return self._ordinals[symbol]
        except KeyError:
            raise UnknownSymbolError(
                f"symbol {symbol!r} is not in alphabet {''.join(self.symbols)!r}"
            ) from None

    def symbol(self, value: int) -> str:
        """
        Символ для ordinal value.

        Raises:
            MappingOutOfRange: Если value вне 0..base-1
        """
        if value < 0 or value >= self.base:
            raise MappingOutOfRange(
                f"Character mapping out of range: {value} not in 0..{self.base - 1}"
            )
        return self.symbols[value]

    def gen(self, value: int) -> str:
        """
        Запись native целого в этой базе.

        Examples:
            >>> decimal().gen(42)
            '42'
            >>> binary().gen(5)
            '101'
            >>> hexadecimal().gen(0)
            '0'
        """
        if value < 0:
            raise NegativeValueError(f"negative values are not supported, got {value}")
        if value == 0:
            return self.zero
        if self.base == 1:
            # унарная запись не имеет позиционного смысла
            raise MappingOutOfRange(f"cannot express {value} in a base 1 alphabet")

        out: list[str] = []
        while value:
            value, rem = divmod(value, self.base)
            out.append(self.symbols[rem])
        return "".join(reversed(out))

    def decimal(self, text: str) -> int:
        """
        Native значение строки символов (Horner).

        Examples:
            >>> decimal().decimal("0042")
            42
            >>> hexadecimal().decimal("ff")
            255
        """
        value = 0
        for ch in text:
            value = value * self.base + self.ordinal(ch)
        return value

    def __str__(self) -> str:
        return "".join(self.symbols)


# =============================================================================
# COMMON BASES
# =============================================================================


def binary() -> Alphabet:
    """Алфавит base 2: '01'"""
    return Alphabet.from_string(DIGITS_DEC[:2])


def octal() -> Alphabet:
    """Алфавит base 8: '01234567'"""
    return Alphabet.from_string(DIGITS_DEC[:8])


def decimal() -> Alphabet:
    """Алфавит base 10: '0123456789'"""
    return Alphabet.from_string(DIGITS_DEC)


def hexadecimal() -> Alphabet:
    """Алфавит base 16: '0123456789abcdef'"""
    return Alphabet.from_string(DIGITS_HEX)
