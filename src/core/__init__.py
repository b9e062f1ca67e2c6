"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks for monomial terms:
numerical primitives, the expression contract, the Monomial model,
the differentiation algorithm and JSON contracts.
"""
