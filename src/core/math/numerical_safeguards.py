"""
Numerical Safeguards — численные примитивы для мономов

Модуль содержит элементарные операции, на которых построены вычисление
и дифференцирование мономов:
- Возведение в натуральную степень (real power) с фиксированной конвенцией 0^0 = 1
- Проверка float на NaN/Inf
- Epsilon-сравнения float с учётом машинной точности
- Валидация коэффициентов и показателей степени

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. real_pow(0.0, 0) == 1.0 (конвенция C pow / IEEE 754), это не ошибка
2. Показатели степени всегда целые и неотрицательные
3. Коэффициент всегда конечный float
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения значений мономов
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения значений мономов
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ВОЗВЕДЕНИЕ В СТЕПЕНЬ
# =============================================================================


def real_pow(base: float, exponent: int) -> float:
    """
    Возведение base в степень exponent стандартной real-power функцией.

    Используется math.pow (обёртка над C pow), поэтому 0^0 == 1.0.
    Вырожденный случай не считается ошибкой.

    При переполнении возвращается бесконечность со знаком результата
    (как HUGE_VAL в C pow), а не OverflowError.

    Args:
        base: Значение переменной
        exponent: Неотрицательный целый показатель

    Returns:
        base ** exponent как float (±inf при переполнении)

    Examples:
        >>> real_pow(2.0, 3)
        8.0
        >>> real_pow(0.0, 0)
        1.0
        >>> real_pow(-2.0, 2)
        4.0
        >>> real_pow(-1e200, 3)
        -inf
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        # Нечётная степень отрицательного основания отрицательна
        if base < 0 and exponent % 2 == 1:
            return -math.inf
        return math.inf


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки

    Examples:
        >>> is_close(30.0, 30.0 + 1e-10)
        True
        >>> is_close(6.0, 6.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_coefficient(value: float, name: str = "coefficient") -> None:
    """
    Валидация коэффициента монома.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если значение NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_exponent(value: int, name: str = "exponent") -> None:
    """
    Валидация показателя степени.

    bool отклоняется явно: True/False не являются показателями.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если значение не целое или отрицательное
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
