"""
Domain models and value objects.

Contains the expression contract, the Monomial term model and its helpers.
"""

from src.core.domain.expression import (
    DimensionMismatch,
    Expression,
    ExpressionError,
    ExpressionTypeMismatch,
    check_dimension,
)
from src.core.domain.mask import (
    empty_mask,
    full_mask,
    normalize_mask,
    variable_mask,
)
from src.core.domain.monomial import (
    Monomial,
    Monomial1D,
    Monomial2D,
    Monomial3D,
    monomial_type,
)
from src.core.domain.rendering import (
    DEFAULT_RENDER_CONFIG,
    RenderConfig,
    render_monomial,
)

__all__ = [
    # Expression contract
    "Expression",
    "ExpressionError",
    "ExpressionTypeMismatch",
    "DimensionMismatch",
    "check_dimension",
    # Monomial model
    "Monomial",
    "Monomial1D",
    "Monomial2D",
    "Monomial3D",
    "monomial_type",
    # Masks
    "normalize_mask",
    "variable_mask",
    "full_mask",
    "empty_mask",
    # Rendering
    "RenderConfig",
    "DEFAULT_RENDER_CONFIG",
    "render_monomial",
]
