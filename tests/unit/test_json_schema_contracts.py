"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Конверсия контракт ↔ Pydantic модель
- Выполнение differentiation_request
"""

from pathlib import Path

import pytest
from jsonschema import ValidationError

import src.core.contracts as contracts_package
from src.core.contracts import (
    MONOMIAL_SCHEMA_VERSION,
    DifferentiationRequestValidator,
    MonomialValidator,
    SchemaLoader,
    monomial_from_contract,
    monomial_to_contract,
    run_differentiation_request,
    validate_differentiation_request,
    validate_monomial,
)
from src.core.domain import DimensionMismatch, Monomial1D, Monomial2D, monomial_type


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_monomial():
    """Валидный monomial: 5·x1^2·x2^3."""
    return {
        "schema_version": "1",
        "coefficient": 5.0,
        "exponents": [2, 3],
    }


@pytest.fixture
def valid_differentiation_request():
    """Валидный differentiation_request по обеим переменным."""
    return {
        "schema_version": "1",
        "monomial": {"schema_version": "1", "coefficient": 5.0, "exponents": [2, 3]},
        "mask": [True, True],
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    monomial_schema = loader.load_schema("monomial")
    request_schema = loader.load_schema("differentiation_request")

    assert monomial_schema["properties"]["schema_version"]["const"] == MONOMIAL_SCHEMA_VERSION
    assert request_schema["properties"]["schema_version"]["const"] == MONOMIAL_SCHEMA_VERSION


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("monomial")
    schema2 = loader.load_schema("monomial")

    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_uses_package_schema_dir():
    """Схемы лежат внутри пакета src.core.contracts (package data)."""
    loader = SchemaLoader()

    assert loader.schema_dir == Path(contracts_package.__file__).parent / "schema"
    assert (loader.schema_dir / "monomial.json").is_file()


def test_schema_loader_registry_contains_all_schemas():
    """Реестр содержит схемы по их $id."""
    loader = SchemaLoader()
    registry = loader.registry()

    monomial_id = loader.load_schema("monomial")["$id"]
    assert registry.contents(monomial_id) == loader.load_schema("monomial")
    assert loader.registry() is registry


# =============================================================================
# TESTS - MONOMIAL VALIDATION
# =============================================================================


def test_monomial_validator_accepts_valid_data(valid_monomial):
    """Валидация правильного monomial."""
    validator = MonomialValidator()
    validator.validate(valid_monomial)
    assert validator.is_valid(valid_monomial)


def test_monomial_validate_function(valid_monomial):
    """Проверка функции validate_monomial."""
    validate_monomial(valid_monomial)


def test_monomial_rejects_missing_required_field(valid_monomial):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_monomial.copy()
    del data["exponents"]

    with pytest.raises(ValidationError) as exc_info:
        validate_monomial(data)
    assert "'exponents' is a required property" in str(exc_info.value)


def test_monomial_rejects_wrong_coefficient_type(valid_monomial):
    """Коэффициент должен быть числом."""
    data = valid_monomial.copy()
    data["coefficient"] = "five"

    with pytest.raises(ValidationError) as exc_info:
        validate_monomial(data)
    assert "is not of type 'number'" in str(exc_info.value)


def test_monomial_rejects_negative_exponent(valid_monomial):
    """Показатели неотрицательные."""
    data = valid_monomial.copy()
    data["exponents"] = [2, -1]

    with pytest.raises(ValidationError):
        validate_monomial(data)


def test_monomial_rejects_fractional_exponent(valid_monomial):
    """Показатели целые."""
    data = valid_monomial.copy()
    data["exponents"] = [2, 1.5]

    with pytest.raises(ValidationError) as exc_info:
        validate_monomial(data)
    assert "is not of type 'integer'" in str(exc_info.value)


def test_monomial_rejects_empty_exponents(valid_monomial):
    """Хотя бы одна переменная."""
    data = valid_monomial.copy()
    data["exponents"] = []

    assert not MonomialValidator().is_valid(data)


def test_monomial_rejects_wrong_schema_version(valid_monomial):
    """Версия схемы фиксирована."""
    data = valid_monomial.copy()
    data["schema_version"] = "2"

    with pytest.raises(ValidationError):
        validate_monomial(data)


def test_monomial_rejects_additional_properties(valid_monomial):
    """Лишние поля запрещены."""
    data = valid_monomial.copy()
    data["degree"] = 5

    with pytest.raises(ValidationError):
        validate_monomial(data)


def test_monomial_iter_errors_reports_all(valid_monomial):
    """iter_errors возвращает все нарушения."""
    data = valid_monomial.copy()
    data["coefficient"] = "five"
    data["exponents"] = [-1]

    errors = list(MonomialValidator().iter_errors(data))
    assert len(errors) == 2


# =============================================================================
# TESTS - DIFFERENTIATION REQUEST VALIDATION
# =============================================================================


def test_differentiation_request_validator_accepts_valid_data(valid_differentiation_request):
    """Валидация правильного differentiation_request."""
    validator = DifferentiationRequestValidator()
    validator.validate(valid_differentiation_request)
    assert validator.is_valid(valid_differentiation_request)


def test_differentiation_request_validate_function(valid_differentiation_request):
    """Проверка функции validate_differentiation_request."""
    validate_differentiation_request(valid_differentiation_request)


def test_differentiation_request_rejects_integer_mask(valid_differentiation_request):
    """Маска в контракте — только boolean."""
    data = valid_differentiation_request.copy()
    data["mask"] = [1, 0]

    with pytest.raises(ValidationError) as exc_info:
        validate_differentiation_request(data)
    assert "is not of type 'boolean'" in str(exc_info.value)


def test_differentiation_request_rejects_missing_mask(valid_differentiation_request):
    """mask обязателен."""
    data = valid_differentiation_request.copy()
    del data["mask"]

    with pytest.raises(ValidationError):
        validate_differentiation_request(data)


def test_differentiation_request_nested_monomial_requires_schema_version(
    valid_differentiation_request,
):
    """Вложенный monomial проверяется схемой monomial.json через $ref."""
    data = valid_differentiation_request.copy()
    data["monomial"] = {"coefficient": 5.0, "exponents": [2, 3]}

    with pytest.raises(ValidationError) as exc_info:
        validate_differentiation_request(data)
    assert "'schema_version' is a required property" in str(exc_info.value)


def test_differentiation_request_nested_negative_exponent(valid_differentiation_request):
    """Ограничения monomial.json действуют внутри запроса."""
    data = valid_differentiation_request.copy()
    data["monomial"] = {"schema_version": "1", "coefficient": 5.0, "exponents": [2, -3]}

    assert not DifferentiationRequestValidator().is_valid(data)


def test_differentiation_request_iter_errors_reports_nested(valid_differentiation_request):
    """iter_errors собирает ошибки запроса и вложенного monomial."""
    data = valid_differentiation_request.copy()
    data["monomial"] = {"schema_version": "2", "coefficient": 5.0, "exponents": [2, 3]}
    data["mask"] = [1, 0]

    errors = list(DifferentiationRequestValidator().iter_errors(data))
    paths = sorted(list(error.absolute_path) for error in errors)
    assert paths == [["mask", 0], ["mask", 1], ["monomial", "schema_version"]]


# =============================================================================
# TESTS - PYDANTIC MODEL INTEGRATION
# =============================================================================


def test_monomial_from_contract(valid_monomial):
    """Тип выбирается по длине exponents."""
    m = monomial_from_contract(valid_monomial)

    assert type(m) is Monomial2D
    assert m == Monomial2D(5.0, [2, 3])


def test_monomial_from_contract_integral_float_exponent():
    """JSON Schema считает 2.0 целым; модель получает int."""
    m = monomial_from_contract({"schema_version": "1", "coefficient": 3, "exponents": [2.0]})

    assert m == Monomial1D(3.0, [2])
    assert isinstance(m.exponents[0], int)


def test_monomial_from_contract_new_dimension():
    """Тип для N без готового алиаса."""
    m = monomial_from_contract(
        {"schema_version": "1", "coefficient": 1.0, "exponents": [0, 0, 0, 1]}
    )

    assert type(m) is monomial_type(4)


def test_monomial_from_contract_rejects_invalid(valid_monomial):
    """Невалидный контракт не доходит до модели."""
    data = valid_monomial.copy()
    data["exponents"] = [-2]

    with pytest.raises(ValidationError):
        monomial_from_contract(data)


def test_monomial_model_generates_valid_json():
    """Pydantic Monomial генерирует валидный monomial контракт."""
    data = monomial_to_contract(Monomial2D(5.0, [2, 3]))

    validate_monomial(data)
    assert data == {"schema_version": "1", "coefficient": 5.0, "exponents": [2, 3]}


def test_canonical_zero_generates_valid_json():
    """Канонический ноль тоже валиден."""
    validate_monomial(monomial_to_contract(Monomial1D()))


# =============================================================================
# TESTS - DIFFERENTIATION REQUEST EXECUTION
# =============================================================================


def test_run_differentiation_request(valid_differentiation_request):
    """∂²/∂x1∂x2 5·x1^2·x2^3 = 30·x1·x2^2."""
    deriv = run_differentiation_request(valid_differentiation_request)

    assert deriv == Monomial2D(30.0, [1, 2])
    assert monomial_to_contract(deriv)["exponents"] == [1, 2]


def test_run_differentiation_request_from_model_contract():
    """Модель → monomial_to_contract → запрос → производная."""
    request = {
        "schema_version": MONOMIAL_SCHEMA_VERSION,
        "monomial": monomial_to_contract(Monomial1D(3.0, [2])),
        "mask": [True],
    }

    validate_differentiation_request(request)
    assert run_differentiation_request(request) == Monomial1D(6.0, [1])


def test_run_differentiation_request_empty_mask(valid_differentiation_request):
    """Пустая маска → канонический ноль."""
    data = valid_differentiation_request.copy()
    data["mask"] = [False, False]

    assert run_differentiation_request(data) == Monomial2D()


def test_run_differentiation_request_mask_length_mismatch(valid_differentiation_request):
    """Длина mask != числу показателей → DimensionMismatch."""
    data = valid_differentiation_request.copy()
    data["mask"] = [True]

    with pytest.raises(DimensionMismatch):
        run_differentiation_request(data)
