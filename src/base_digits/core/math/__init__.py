"""
Core math modules для base-digits

Арифметика позиционных чисел над произвольным алфавитом.
"""

# Carry-Limited Adder
from base_digits.core.math.carry_add import (
    CarryResult,
    Sign,
    SignNum,
    capped_add,
)

# Digits engine
from base_digits.core.math.digits import Digits

__all__ = [
    # Carry-Limited Adder — Types
    "CarryResult",
    "Sign",
    "SignNum",
    # Carry-Limited Adder — Functions
    "capped_add",
    # Digits engine
    "Digits",
]
