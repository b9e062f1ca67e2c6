"""
JSON Schema Contract Validators

Модуль для валидации JSON представлений мономов согласно формальным
JSON Schema контрактам и для конверсии между контрактом и моделью.
Использует библиотеку jsonschema для проверки соответствия данных схемам,
$ref между схемами разрешаются через referencing.Registry.

Схемы:
- monomial.json
- differentiation_request.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

from src.core.domain.expression import check_dimension
from src.core.domain.monomial import Monomial, monomial_type

# Версия контрактов monomial / differentiation_request
MONOMIAL_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в пакете (src/core/contracts/schema/) и устанавливаются
    вместе с ним как package data. Ссылки $ref между схемами
    разрешаются через referencing.Registry по их $id.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._registry: Optional[Registry] = None

    @property
    def schema_dir(self) -> Path:
        """Каталог со схемами."""
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'monomial')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema

    def registry(self) -> Registry:
        """
        Реестр всех схем каталога, ключ — $id схемы.

        Returns:
            referencing.Registry для разрешения $ref между контрактами
        """
        if self._registry is None:
            resources = []
            for schema_path in sorted(self._schema_dir.glob("*.json")):
                schema = self.load_schema(schema_path.stem)
                resource = Resource.from_contents(schema, default_specification=DRAFT202012)
                resources.append((schema["$id"], resource))
            self._registry = Registry().with_resources(resources)
        return self._registry


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema, registry=_SCHEMA_LOADER.registry())

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class MonomialValidator(ContractValidator):
    """Валидатор для monomial контракта."""

    def __init__(self):
        super().__init__("monomial")


class DifferentiationRequestValidator(ContractValidator):
    """Валидатор для differentiation_request контракта."""

    def __init__(self):
        super().__init__("differentiation_request")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_monomial(data: Dict[str, Any]) -> None:
    """
    Валидация monomial данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MonomialValidator().validate(data)


def validate_differentiation_request(data: Dict[str, Any]) -> None:
    """
    Валидация differentiation_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DifferentiationRequestValidator().validate(data)


def _build_monomial(data: Dict[str, Any]) -> Monomial:
    # JSON Schema считает 2.0 целым, модель требует int
    exponents = [int(e) for e in data["exponents"]]
    return monomial_type(len(exponents))(data["coefficient"], exponents)


def monomial_from_contract(data: Dict[str, Any]) -> Monomial:
    """
    Построение монома из monomial контракта.

    Тип выбирается по длине exponents: monomial_type(len(exponents)).

    Args:
        data: monomial контракт

    Returns:
        Моном конкретного типа

    Raises:
        ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если коэффициент NaN/Inf
    """
    validate_monomial(data)
    return _build_monomial(data)


def monomial_to_contract(monomial: Monomial) -> Dict[str, Any]:
    """
    Сериализация монома в monomial контракт.

    Returns:
        dict, проходящий validate_monomial
    """
    data = monomial.model_dump()
    data["schema_version"] = MONOMIAL_SCHEMA_VERSION
    return data


def run_differentiation_request(data: Dict[str, Any]) -> Monomial:
    """
    Выполнение differentiation_request: валидация, построение, производная.

    Args:
        data: differentiation_request контракт

    Returns:
        Новый моном с производной

    Raises:
        ValidationError: Если данные не соответствуют схеме
        DimensionMismatch: Если длина mask не совпадает с числом показателей
    """
    validate_differentiation_request(data)

    monomial = _build_monomial(data["monomial"])
    mask = data["mask"]
    check_dimension("mask", mask, monomial.dimension)

    return monomial.derivative(mask)
