"""
Math modules для fpguard

Численно устойчивые примитивы одинарной точности (float32).
"""

# Float32 foundation
from fpguard.math.float32 import (
    F32_EPSILON,
    F32_MAX,
    F32_MIN_POSITIVE,
    fma32,
    from_bits,
    is_sign_negative,
    to_bits,
    to_f32,
)

# Difference of products
from fpguard.math.products import difference_of_products

# Comparisons
from fpguard.math.comparisons import (
    DEFAULT_EPSILON,
    Ordering,
    approx_eq,
    safe_cmp,
    sort_total,
    total_order_key,
)

# Smoothing
from fpguard.math.smoothing import smooth_damp, smoothing_factor

__all__ = [
    # Float32 — Constants
    "F32_EPSILON",
    "F32_MAX",
    "F32_MIN_POSITIVE",
    # Float32 — Functions
    "fma32",
    "from_bits",
    "is_sign_negative",
    "to_bits",
    "to_f32",
    # Difference of products
    "difference_of_products",
    # Comparisons — Constants
    "DEFAULT_EPSILON",
    # Comparisons — Types
    "Ordering",
    # Comparisons — Functions
    "approx_eq",
    "safe_cmp",
    "sort_total",
    "total_order_key",
    # Smoothing
    "smooth_damp",
    "smoothing_factor",
]
