"""
Monomial — Модель одночлена c · x_1^e_1 · ... · x_N^e_N

Pydantic модель с фиксированным числом переменных N. N — структурный
параметр конкретного класса (атрибут ``dimension``), а не поле экземпляра:
monomial_type(n) возвращает кэшированный подкласс для данного N,
Monomial1D = monomial_type(1).

Модель изменяема: результат дифференцирования записывается в
моном-приёмник, а nullify() сбрасывает моном в канонический ноль.
Копирование — только по значению (списки показателей не разделяются).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(exponents) == dimension
2. Канонический ноль: coefficient == 0 ⇒ все показатели равны 0
3. Показатели — целые неотрицательные, коэффициент — конечный float
"""

from functools import lru_cache
from typing import Annotated, Any, ClassVar, Optional, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.expression import Expression, check_dimension
from src.core.domain.rendering import RenderConfig, render_monomial
from src.core.math.numerical_safeguards import (
    real_pow,
    validate_exponent,
)

Exponent = Annotated[int, Field(strict=True, ge=0)]


# =============================================================================
# MONOMIAL MODEL
# =============================================================================


class Monomial(Expression, BaseModel):
    """
    Одночлен над N переменными.

    Базовый класс без N не создаётся; используйте monomial_type(n)
    или готовые Monomial1D / Monomial2D / Monomial3D.

    Конструкторы:
        T()                   — канонический ноль
        T(c)                  — константа (все показатели 0)
        T(c, exponents)       — явный моном
    """

    dimension: ClassVar[Optional[int]] = None

    coefficient: float = Field(0.0, allow_inf_nan=False, description="Коэффициент монома")
    exponents: list[Exponent] = Field(..., description="Показатели степени по переменным")

    model_config = {"extra": "forbid", "validate_assignment": True}

    def __init__(
        self,
        coefficient: float = 0.0,
        exponents: Optional[Sequence[int]] = None,
        **data: Any,
    ) -> None:
        if type(self).dimension is None:
            raise TypeError(
                "Monomial has no fixed dimension, use monomial_type(n) to get a concrete type"
            )
        if exponents is not None:
            exponents = list(exponents)
        super().__init__(coefficient=coefficient, exponents=exponents, **data)

    @model_validator(mode="before")
    @classmethod
    def fill_constant_exponents(cls, data: Any) -> Any:
        """Без показателей моном — константа: N нулей."""
        if isinstance(data, dict) and data.get("exponents") is None:
            data = {**data, "exponents": [0] * cls.dimension}
        return data

    @field_validator("exponents")
    @classmethod
    def validate_dimension(cls, v: list[int]) -> list[int]:
        """Число показателей равно N конкретного типа."""
        check_dimension("exponents", v, cls.dimension)
        return v

    @model_validator(mode="after")
    def canonicalize_zero(self) -> "Monomial":
        """
        Нулевой коэффициент приводится к каноническому нулю.

        Выполняется и при каждом присваивании полей (validate_assignment),
        поэтому пишет в __dict__ напрямую, минуя повторную валидацию.
        """
        if self.coefficient == 0.0:
            self.__dict__["coefficient"] = 0.0
            self.__dict__["exponents"] = [0] * self.dimension
        return self

    # -------------------------------------------------------------------------
    # Expression contract
    # -------------------------------------------------------------------------

    def solve(self, values: Sequence[float]) -> float:
        """
        Значение c · Π values[i]^exponents[i].

        0^0 вычисляется как 1 (см. real_pow), поэтому константа возвращает
        коэффициент в любой точке, включая начало координат.

        Raises:
            DimensionMismatch: Если len(values) != N
        """
        check_dimension("values", values, self.dimension)

        result = self.coefficient
        for value, exponent in zip(values, self.exponents):
            result *= real_pow(value, exponent)
        return result

    def differentiate(self, output: Expression, mask: Sequence[object]) -> None:
        """
        Частная производная по отмеченным в mask переменным, запись в output.

        Raises:
            ExpressionTypeMismatch: Если output другого конкретного типа
            DimensionMismatch: Если len(mask) != N
        """
        from src.core.calculus.differentiation import differentiate_monomial

        differentiate_monomial(self, output, mask)

    def to_string(self, config: Optional[RenderConfig] = None) -> str:
        """
        Текстовое представление, например "3.0x_1^2".

        Показатель 1 печатается, нулевые показатели пропускаются.
        """
        return render_monomial(self.coefficient, self.exponents, config)

    # -------------------------------------------------------------------------
    # Мутации
    # -------------------------------------------------------------------------

    def nullify(self) -> None:
        """Сброс в канонический ноль: coefficient = 0, все показатели 0."""
        self.coefficient = 0.0
        self.exponents = [0] * self.dimension

    def set_exponents(self, exponents: Sequence[int]) -> None:
        """
        Замена вектора показателей (копией).

        Raises:
            DimensionMismatch: Если len(exponents) != N
            ValueError: Если показатель не целый или отрицательный
        """
        check_dimension("exponents", exponents, self.dimension)
        for i, exponent in enumerate(exponents):
            validate_exponent(exponent, name=f"exponents[{i}]")
        self.exponents = list(exponents)

    def assign(self, other: "Monomial") -> None:
        """
        Копирование по значению из монома того же типа.

        Raises:
            ExpressionTypeMismatch: Если other другого конкретного типа
        """
        self.check_same_kind(other)
        self.coefficient = other.coefficient
        self.exponents = list(other.exponents)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def degree(self) -> int:
        """Полная степень (сумма показателей)."""
        return sum(self.exponents)

    def is_zero(self) -> bool:
        """Канонический ноль."""
        return self.coefficient == 0.0

    def is_constant(self) -> bool:
        """Все показатели равны 0."""
        return not any(self.exponents)


# =============================================================================
# КОНКРЕТНЫЕ ТИПЫ ПО N
# =============================================================================


@lru_cache(maxsize=None, typed=True)
def monomial_type(dimension: int) -> type[Monomial]:
    """
    Конкретный тип монома с фиксированным числом переменных.

    Повторный вызов с тем же N возвращает тот же класс, поэтому
    monomial_type(2)(...) и Monomial2D(...) — один и тот же тип.

    Args:
        dimension: Число переменных N (>= 1)

    Returns:
        Подкласс Monomial с dimension == N

    Raises:
        ValueError: Если dimension не положительное целое
    """
    if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension < 1:
        raise ValueError(f"dimension must be a positive integer, got {dimension!r}")

    name = f"Monomial{dimension}D"
    namespace = {
        "__module__": __name__,
        "__qualname__": name,
        "__annotations__": {"dimension": ClassVar[Optional[int]]},
        "dimension": dimension,
    }
    return type(Monomial)(name, (Monomial,), namespace)


Monomial1D = monomial_type(1)
Monomial2D = monomial_type(2)
Monomial3D = monomial_type(3)
