"""
Pytest configuration for base-digits tests.

Provides:
- Hypothesis profiles (HYPOTHESIS_PROFILE=ci for a longer search)
- Shared alphabet fixtures
"""

import os

import pytest
from hypothesis import settings

from base_digits import Alphabet, decimal

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile("default", deadline=None, max_examples=100, print_blob=True)
settings.register_profile("ci", deadline=None, max_examples=500, print_blob=True)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def base10() -> Alphabet:
    """Десятичный алфавит '0123456789'"""
    return decimal()


@pytest.fixture
def base4() -> Alphabet:
    """Алфавит base 4 '0123'"""
    return Alphabet.from_string("0123")
