"""
Тесты для Alphabet — таблицы символов

Проверяет:
1. Валидацию таблицы (уникальность, один character, непустота)
2. ordinal/symbol и ошибки диапазона
3. gen/decimal для native целых
4. Immutability и равенство по значению
5. Фабрики распространённых баз
"""

import pytest
from pydantic import ValidationError

from base_digits import (
    Alphabet,
    MappingOutOfRange,
    NegativeValueError,
    UnknownSymbolError,
    binary,
    decimal,
    hexadecimal,
    octal,
)

# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestAlphabetValidation:
    """Тесты валидации таблицы символов"""

    def test_from_string(self) -> None:
        """Каждый character строки — отдельный символ"""
        alphabet = Alphabet.from_string("0123")
        assert alphabet.symbols == ("0", "1", "2", "3")
        assert alphabet.base == 4

    def test_from_list(self) -> None:
        """Список символов приводится к tuple"""
        alphabet = Alphabet(symbols=["a", "b", "c"])
        assert alphabet.symbols == ("a", "b", "c")
        assert alphabet.base == 3

    def test_duplicate_symbols_rejected(self) -> None:
        """Повтор символа — ошибка валидации"""
        with pytest.raises(ValidationError, match="distinct"):
            Alphabet.from_string("0120")

    def test_multi_character_symbol_rejected(self) -> None:
        """Символ из нескольких character — ошибка валидации"""
        with pytest.raises(ValidationError, match="single character"):
            Alphabet(symbols=("0", "10"))

    def test_empty_symbol_rejected(self) -> None:
        """Пустой символ — ошибка валидации"""
        with pytest.raises(ValidationError, match="single character"):
            Alphabet(symbols=("0", ""))

    def test_empty_alphabet_rejected(self) -> None:
        """Алфавит без символов недопустим"""
        with pytest.raises(ValidationError):
            Alphabet(symbols=())

    def test_immutable(self) -> None:
        """Alphabet frozen"""
        alphabet = Alphabet.from_string("01")
        with pytest.raises(ValidationError):
            alphabet.symbols = ("a", "b")  # type: ignore


# =============================================================================
# ORDINAL / SYMBOL
# =============================================================================


class TestOrdinalSymbol:
    """Тесты ordinal/symbol"""

    def test_ordinal_roundtrip(self) -> None:
        """symbol(ordinal(s)) == s для каждого символа"""
        alphabet = Alphabet.from_string("xyzw")
        for i, s in enumerate("xyzw"):
            assert alphabet.ordinal(s) == i
            assert alphabet.symbol(i) == s

    def test_unknown_symbol(self) -> None:
        """Символ вне таблицы"""
        with pytest.raises(UnknownSymbolError, match="not in alphabet"):
            decimal().ordinal("a")

    def test_symbol_out_of_range(self) -> None:
        """Ordinal >= base или < 0"""
        alphabet = Alphabet.from_string("0123")
        with pytest.raises(MappingOutOfRange):
            alphabet.symbol(4)
        with pytest.raises(MappingOutOfRange):
            alphabet.symbol(-1)

    def test_zero_and_one(self) -> None:
        """zero/one — первые два символа"""
        alphabet = Alphabet.from_string("ab")
        assert alphabet.zero == "a"
        assert alphabet.one == "b"

    def test_one_requires_base_two(self) -> None:
        """У base 1 нет символа для единицы"""
        with pytest.raises(MappingOutOfRange):
            Alphabet.from_string("x").one

    def test_errors_are_value_errors(self) -> None:
        """Recoverable ошибки совместимы с ValueError"""
        with pytest.raises(ValueError):
            decimal().ordinal("?")
        with pytest.raises(ValueError):
            decimal().symbol(10)


# =============================================================================
# GEN / DECIMAL
# =============================================================================


class TestGenDecimal:
    """Тесты конверсии native целых"""

    def test_gen_decimal(self) -> None:
        assert decimal().gen(42) == "42"
        assert decimal().gen(0) == "0"

    def test_gen_binary(self) -> None:
        assert binary().gen(5) == "101"
        assert binary().gen(1) == "1"

    def test_gen_custom_symbols(self) -> None:
        """5 = 1*3 + 2 → 'bc' в алфавите 'abc'"""
        alphabet = Alphabet.from_string("abc")
        assert alphabet.gen(5) == "bc"
        assert alphabet.gen(0) == "a"

    def test_gen_negative_rejected(self) -> None:
        with pytest.raises(NegativeValueError):
            decimal().gen(-1)

    def test_gen_base_one_only_zero(self) -> None:
        """Base 1 выражает только ноль"""
        alphabet = Alphabet.from_string("z")
        assert alphabet.gen(0) == "z"
        with pytest.raises(MappingOutOfRange):
            alphabet.gen(3)

    def test_decimal(self) -> None:
        assert decimal().decimal("0042") == 42
        assert hexadecimal().decimal("ff") == 255
        assert Alphabet.from_string("abc").decimal("bc") == 5

    def test_decimal_unknown_symbol(self) -> None:
        with pytest.raises(UnknownSymbolError):
            binary().decimal("102")

    def test_gen_decimal_roundtrip(self) -> None:
        """decimal(gen(n)) == n"""
        alphabet = Alphabet.from_string("!@#$%")
        for n in [0, 1, 4, 5, 24, 25, 3124, 10**20]:
            assert alphabet.decimal(alphabet.gen(n)) == n


# =============================================================================
# РАВЕНСТВО И ФАБРИКИ
# =============================================================================


class TestEqualityAndFactories:
    """Равенство по значению и фабрики баз"""

    def test_equal_by_value(self) -> None:
        """Одинаковые таблицы — равные алфавиты"""
        a = Alphabet.from_string("0123")
        b = Alphabet.from_string("0123")
        assert a == b
        assert hash(a) == hash(b)

    def test_same_base_different_symbols(self) -> None:
        """Одинаковая base не означает совместимость"""
        assert Alphabet.from_string("0123") != Alphabet.from_string("abcd")

    def test_factories(self) -> None:
        assert binary().base == 2
        assert octal().base == 8
        assert decimal().base == 10
        assert hexadecimal().base == 16
        assert str(hexadecimal()) == "0123456789abcdef"

    def test_factories_return_equal_values(self) -> None:
        """Фабрики чистые: повторный вызов даёт равный алфавит"""
        assert decimal() == decimal()
        assert decimal() == Alphabet.from_string("0123456789")
