"""Текстовое представление мономов."""

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class RenderConfig:
    """Конфигурация текстового представления монома.

    Значения по умолчанию дают формат ``3.0x_1^2x_2^1``:
    - коэффициент через str(float)
    - для каждой переменной с ненулевым показателем: prefix + номер + symbol + показатель
    - без разделителей между множителями, показатель 1 тоже печатается
    """
    variable_prefix: str = "x_"
    power_symbol: str = "^"
    index_base: int = 1


DEFAULT_RENDER_CONFIG = RenderConfig()


def render_monomial(
    coefficient: float,
    exponents: Sequence[int],
    config: Optional[RenderConfig] = None,
) -> str:
    """
    Склейка коэффициента и множителей переменных.

    Args:
        coefficient: Коэффициент монома
        exponents: Показатели степени по переменным
        config: Формат (default: DEFAULT_RENDER_CONFIG)

    Returns:
        Строка вида "6.0x_1^1"

    Examples:
        >>> render_monomial(3.0, [2])
        '3.0x_1^2'
        >>> render_monomial(5.0, [2, 0, 1])
        '5.0x_1^2x_3^1'
        >>> render_monomial(0.0, [0, 0])
        '0.0'
    """
    config = config or DEFAULT_RENDER_CONFIG

    parts = [str(coefficient)]
    for i, exponent in enumerate(exponents):
        if exponent != 0:
            parts.append(
                f"{config.variable_prefix}{i + config.index_base}"
                f"{config.power_symbol}{exponent}"
            )
    return "".join(parts)
