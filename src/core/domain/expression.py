"""
Expression — контракт дифференцируемого терма

Абстрактный базовый класс, описывающий набор возможностей любого терма:
вычисление в точке, частное дифференцирование по маске переменных и
текстовое представление. Monomial — единственная реализация; суммы и
полиномы могут подключиться к тому же контракту.

Ошибки:
- ExpressionTypeMismatch — цель дифференцирования другого конкретного типа
- DimensionMismatch — длина values/mask/exponents не совпадает с N
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Sequence


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExpressionError(Exception):
    """Базовая ошибка операций над термами."""

    pass


class ExpressionTypeMismatch(ExpressionError, TypeError):
    """
    Цель дифференцирования имеет другой конкретный тип.

    Проверяется на границе вызова differentiate(), до любой записи в output.
    """

    pass


class DimensionMismatch(ExpressionError, ValueError):
    """
    Число переменных не совпадает с N конкретного типа терма.

    Возникает для values в solve(), mask в differentiate() и при
    копировании между мономами разной размерности.
    """

    def __init__(self, what: str, expected: int, actual: int):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} has {actual} entries, expected {expected}")


def check_dimension(what: str, values: Sequence, expected: int) -> None:
    """
    Проверка длины последовательности относительно N.

    Raises:
        DimensionMismatch: Если len(values) != expected
    """
    if len(values) != expected:
        raise DimensionMismatch(what, expected, len(values))


# =============================================================================
# EXPRESSION CONTRACT
# =============================================================================


class Expression(ABC):
    """
    Контракт терма над фиксированным числом переменных N.

    Конкретный тип терма задаёт N через атрибут класса ``dimension`` и
    обязан создаваться конструктором без аргументов в каноническом нуле.
    """

    dimension: ClassVar[Optional[int]] = None

    @abstractmethod
    def solve(self, values: Sequence[float]) -> float:
        """
        Вычисление терма в точке.

        Args:
            values: N значений переменных

        Returns:
            Значение терма

        Raises:
            DimensionMismatch: Если len(values) != N
        """

    @abstractmethod
    def differentiate(self, output: "Expression", mask: Sequence[object]) -> None:
        """
        Частная производная по всем переменным, отмеченным в mask.

        Результат полностью перезаписывает output; прежнее содержимое
        output не читается.

        Args:
            output: Терм того же конкретного типа и N
            mask: N флагов (bool или int), truthy = дифференцировать

        Raises:
            ExpressionTypeMismatch: Если type(output) отличается от type(self)
            DimensionMismatch: Если len(mask) != N
        """

    @abstractmethod
    def to_string(self) -> str:
        """Текстовое представление терма."""

    def derivative(self, mask: Sequence[object]) -> "Expression":
        """
        Производная как новый экземпляр.

        Создаёт канонический ноль того же типа и вызывает differentiate().

        Args:
            mask: N флагов переменных

        Returns:
            Новый терм с производной
        """
        result = type(self)()
        self.differentiate(result, mask)
        return result

    def check_same_kind(self, other: object) -> None:
        """
        Проверка, что other — терм того же конкретного типа.

        Raises:
            ExpressionTypeMismatch: Если типы различаются
        """
        if type(other) is not type(self):
            raise ExpressionTypeMismatch(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )

    def __str__(self) -> str:
        return self.to_string()
