"""
base-digits — целые неограниченной длины над произвольным алфавитом.

Основной сценарий: перебор последовательностей символов, в том числе
без серий повторяющихся символов (non-adjacent stepping).
"""

from base_digits.core.domain import (
    Alphabet,
    binary,
    decimal,
    hexadecimal,
    octal,
)
from base_digits.core.errors import (
    BaseTooSmallError,
    CappedAddError,
    DigitsError,
    IncompatibleAlphabetError,
    MappingOutOfRange,
    NegativeValueError,
    PreconditionViolation,
    StepMapInvariantError,
    UnknownSymbolError,
)
from base_digits.core.math import CarryResult, Digits, Sign, SignNum, capped_add
from base_digits.stepping import (
    MIN_STEPPING_BASE,
    NonAdjacentConfig,
    NonAdjacentEnumerator,
    StepMap,
    iter_non_adjacent,
    next_non_adjacent,
    prep_non_adjacent,
    step_non_adjacent,
)

__version__ = "0.1.0"

__all__ = [
    # Alphabet
    "Alphabet",
    "binary",
    "octal",
    "decimal",
    "hexadecimal",
    # Errors
    "DigitsError",
    "MappingOutOfRange",
    "UnknownSymbolError",
    "NegativeValueError",
    "PreconditionViolation",
    "BaseTooSmallError",
    "IncompatibleAlphabetError",
    "StepMapInvariantError",
    "CappedAddError",
    # Arithmetic
    "Digits",
    "CarryResult",
    "Sign",
    "SignNum",
    "capped_add",
    # Stepping
    "MIN_STEPPING_BASE",
    "NonAdjacentConfig",
    "NonAdjacentEnumerator",
    "StepMap",
    "iter_non_adjacent",
    "next_non_adjacent",
    "prep_non_adjacent",
    "step_non_adjacent",
]
