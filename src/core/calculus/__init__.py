"""
Calculus — символьное дифференцирование термов.
"""

from src.core.calculus.differentiation import differentiate_monomial

__all__ = [
    "differentiate_monomial",
]
