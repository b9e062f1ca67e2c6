"""
Mask — маски переменных для частного дифференцирования

Маска — N флагов, по одному на переменную. Флаг может быть bool или int
(ненулевое значение = переменная отмечена). Все отмеченные переменные
дифференцируются одновременно.
"""

from typing import Sequence

from src.core.domain.expression import check_dimension


def normalize_mask(mask: Sequence[object], dimension: int) -> tuple[bool, ...]:
    """
    Проверка длины и приведение флагов маски к bool.

    Args:
        mask: Флаги переменных
        dimension: Ожидаемое число переменных N

    Returns:
        Кортеж из N bool

    Raises:
        DimensionMismatch: Если len(mask) != dimension

    Examples:
        >>> normalize_mask([1, 0, 2], 3)
        (True, False, True)
    """
    check_dimension("mask", mask, dimension)
    return tuple(bool(flag) for flag in mask)


def variable_mask(dimension: int, *indices: int) -> tuple[bool, ...]:
    """
    Маска, отмечающая переменные с заданными индексами (с нуля).

    Args:
        dimension: Число переменных N
        *indices: Индексы отмечаемых переменных

    Returns:
        Кортеж из N bool

    Raises:
        IndexError: Если индекс вне [0, dimension)

    Examples:
        >>> variable_mask(3, 0, 2)
        (True, False, True)
    """
    flags = [False] * dimension
    for index in indices:
        if not 0 <= index < dimension:
            raise IndexError(f"variable index {index} out of range for dimension {dimension}")
        flags[index] = True
    return tuple(flags)


def full_mask(dimension: int) -> tuple[bool, ...]:
    """Маска, отмечающая все переменные."""
    return (True,) * dimension


def empty_mask(dimension: int) -> tuple[bool, ...]:
    """Маска без отмеченных переменных (производная всегда канонический ноль)."""
    return (False,) * dimension
