"""
Domain value objects.

Alphabet и фабрики алфавитов для распространённых баз.
"""

from base_digits.core.domain.alphabet import (
    DIGITS_DEC,
    DIGITS_HEX,
    Alphabet,
    binary,
    decimal,
    hexadecimal,
    octal,
)

__all__ = [
    # Constants
    "DIGITS_DEC",
    "DIGITS_HEX",
    # Model
    "Alphabet",
    # Factories
    "binary",
    "octal",
    "decimal",
    "hexadecimal",
]
