"""
Differentiation — частное дифференцирование монома по маске переменных

Для монома c · Π x_i^e_i и маски S производная по всем переменным из S
вычисляется за один проход:

    deriv = copy(source)
    для каждого i: если mask[i] и source.e_i != 0:
        deriv.c   *= source.e_i
        deriv.e_i -= 1

Все чтения идут из source, все записи в deriv, поэтому порядок обхода
не влияет на результат, а source и deriv могут быть одним объектом.

ПОЛИТИКА ГРАНИЧНЫХ СЛУЧАЕВ:
1. Отмеченная переменная с показателем 0 пропускается (терм НЕ обнуляется)
2. Если ни одна переменная не продифференцирована (пустая маска или все
   отмеченные показатели равны 0), результат — канонический ноль
"""

import logging
from typing import TYPE_CHECKING, Sequence

from src.core.domain.mask import normalize_mask
from src.core.math.numerical_safeguards import validate_coefficient

if TYPE_CHECKING:
    from src.core.domain.monomial import Monomial

logger = logging.getLogger(__name__)


def differentiate_monomial(
    source: "Monomial",
    deriv: "Monomial",
    mask: Sequence[object],
) -> None:
    """
    Частная производная source по отмеченным переменным, запись в deriv.

    Прежнее содержимое deriv не читается и полностью перезаписывается.

    Args:
        source: Исходный моном
        deriv: Моном того же конкретного типа для результата
        mask: N флагов переменных (bool или int)

    Raises:
        ExpressionTypeMismatch: Если type(deriv) отличается от type(source)
        DimensionMismatch: Если len(mask) != N
        ValueError: Если коэффициент производной переполнился до Inf

    Examples:
        >>> from src.core.domain import Monomial1D
        >>> deriv = Monomial1D()
        >>> differentiate_monomial(Monomial1D(3.0, [2]), deriv, [True])
        >>> deriv.to_string()
        '6.0x_1^1'
    """
    source.check_same_kind(deriv)
    flags = normalize_mask(mask, source.dimension)

    # Снимок source до записи: deriv может быть тем же объектом
    source_exponents = list(source.exponents)
    coefficient = source.coefficient
    exponents = list(source_exponents)
    differentiated = False

    for i, (flag, exponent) in enumerate(zip(flags, source_exponents)):
        if not flag:
            continue
        if exponent == 0:
            logger.debug("variable %d is masked but has exponent 0, skipped", i)
            continue
        coefficient *= exponent
        exponents[i] -= 1
        differentiated = True

    if not differentiated:
        logger.debug("no variable differentiated for mask %s, result is zero", flags)
        deriv.nullify()
        return

    validate_coefficient(coefficient)
    deriv.coefficient = coefficient
    deriv.set_exponents(exponents)
