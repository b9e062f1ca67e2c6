"""
Contract Validation Module

Модуль для валидации JSON контрактов мономов.
"""

from .validators import (
    MONOMIAL_SCHEMA_VERSION,
    ContractValidator,
    DifferentiationRequestValidator,
    MonomialValidator,
    SchemaLoader,
    monomial_from_contract,
    monomial_to_contract,
    run_differentiation_request,
    validate_differentiation_request,
    validate_monomial,
)

__all__ = [
    # Constants
    "MONOMIAL_SCHEMA_VERSION",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MonomialValidator",
    "DifferentiationRequestValidator",
    # Functions
    "validate_monomial",
    "validate_differentiation_request",
    "monomial_from_contract",
    "monomial_to_contract",
    "run_differentiation_request",
]
