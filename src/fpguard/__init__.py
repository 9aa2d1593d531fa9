"""
fpguard — численно устойчивые примитивы float32

- difference_of_products: компенсированная разность произведений
- approx_eq: сравнение с учётом масштаба
- safe_cmp: полный порядок IEEE-754 с корректной обработкой NaN
- smooth_damp: экспоненциальное сглаживание
- NonNaNFloat: float32 без NaN с проверяемой арифметикой
"""

from fpguard.config import (
    InvariantMode,
    checks_enabled,
    get_invariant_mode,
    invariant_mode,
    set_invariant_mode,
)
from fpguard.domain import FloatInvariantViolation, NonNaNFloat
from fpguard.math import (
    DEFAULT_EPSILON,
    Ordering,
    approx_eq,
    difference_of_products,
    fma32,
    safe_cmp,
    smooth_damp,
    sort_total,
    total_order_key,
)

__all__ = [
    # Config
    "InvariantMode",
    "checks_enabled",
    "get_invariant_mode",
    "invariant_mode",
    "set_invariant_mode",
    # Domain
    "FloatInvariantViolation",
    "NonNaNFloat",
    # Math
    "DEFAULT_EPSILON",
    "Ordering",
    "approx_eq",
    "difference_of_products",
    "fma32",
    "safe_cmp",
    "smooth_damp",
    "sort_total",
    "total_order_key",
]
