"""
Test suite for monomial-calculus

Contains:
- tests/unit/          : Unit tests for individual modules
"""
