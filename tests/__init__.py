"""
Test suite for base-digits

Contains:
- tests/unit/          : Unit tests for individual modules
"""
