"""
Comparisons — сравнения float32 с учётом масштаба и полный порядок

Модуль содержит:
- approx_eq: сравнение с точным fast path, абсолютной и относительной
  толерантностью
- safe_cmp / total_order_key: полный порядок IEEE-754 totalOrder для
  сортировки последовательностей, содержащих NaN

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. approx_eq(x, x, eps) == True для любого не-NaN x, включая ±inf
2. safe_cmp рефлексивен, антисимметричен и транзитивен на ВСЕХ битовых
   паттернах float32 (включая NaN с разными payload и ±0)
3. Функции тотальны: не бросают исключений и не выдают RuntimeWarning
"""

from enum import IntEnum
from typing import Final, Iterable

import numpy as np

from fpguard.math.float32 import F32_EPSILON, to_f32

# Epsilon по умолчанию для approx_eq
DEFAULT_EPSILON: Final[np.float32] = F32_EPSILON

_MAGNITUDE_MASK: Final[int] = 0x7FFF_FFFF


# =============================================================================
# ПРИБЛИЖЁННОЕ РАВЕНСТВО
# =============================================================================


def approx_eq(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """
    Сравнение float32 с учётом масштаба.

    Порядок проверок (первое совпадение выигрывает):
        1. a == b                             → True (±inf, ±0)
        2. |a - b| <= epsilon                 → True (значения около нуля)
        3. |a - b| <= max(|a|, |b|) * epsilon → относительное сравнение

    Порядок важен: без шага 1 бесконечности никогда не равны друг другу
    (inf - inf = NaN), без шага 2 малые значения около нуля не проходят
    относительный тест.

    Args:
        a: Первое значение
        b: Второе значение
        epsilon: Толерантность (ожидается положительной, не проверяется)

    Returns:
        True если значения следует считать равными; False для NaN

    Examples:
        >>> approx_eq(1.0, 1.0 + 1e-8)
        True
        >>> approx_eq(float("inf"), float("inf"))
        True
        >>> approx_eq(0.0, 1e-9, 1e-6)
        True
        >>> approx_eq(1.0, 1.1, 1e-6)
        False
    """
    a32, b32, eps32 = to_f32(a), to_f32(b), to_f32(epsilon)

    if a32 == b32:
        return True

    with np.errstate(all="ignore"):
        diff = np.abs(a32 - b32)
        if diff <= eps32:
            return True

        largest = max(np.abs(a32), np.abs(b32))
        return bool(diff <= largest * eps32)


# =============================================================================
# ПОЛНЫЙ ПОРЯДОК (IEEE-754 totalOrder)
# =============================================================================


class Ordering(IntEnum):
    """Результат сравнения (совместим с functools.cmp_to_key)"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def total_order_key(value: float) -> int:
    """
    Целочисленный ключ сортировки, эквивалентный IEEE-754 totalOrder.

    Биты float32 интерпретируются как знаковое int32; у отрицательных
    значений инвертируются биты модуля, чтобы порядок ключей совпал с
    порядком значений:

        -NaN < -inf < -1.0 < -0.0 < +0.0 < 1.0 < +inf < +NaN

    NaN с разными payload упорядочены по битовому представлению.

    Examples:
        >>> total_order_key(-0.0) < total_order_key(0.0)
        True
        >>> total_order_key(float("inf")) < total_order_key(float("nan"))
        True
    """
    bits = int(to_f32(value).view(np.int32))
    if bits < 0:
        return bits ^ _MAGNITUDE_MASK
    return bits


def safe_cmp(a: float, b: float) -> Ordering:
    """
    Сравнение по полному порядку, безопасное для NaN.

    В отличие от естественного (частичного) порядка float, где NaN
    несравним ни с чем, результат всегда определён, а порядок
    антисимметричен и транзитивен. Подходит для sorted(key=cmp_to_key(...)).

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        Ordering.LESS / Ordering.EQUAL / Ordering.GREATER

    Examples:
        >>> safe_cmp(1.0, 2.0)
        <Ordering.LESS: -1>
        >>> safe_cmp(float("nan"), float("inf"))
        <Ordering.GREATER: 1>
        >>> safe_cmp(-0.0, 0.0)
        <Ordering.LESS: -1>
    """
    key_a = total_order_key(a)
    key_b = total_order_key(b)

    if key_a < key_b:
        return Ordering.LESS
    elif key_a > key_b:
        return Ordering.GREATER
    else:
        return Ordering.EQUAL


def sort_total(values: Iterable[float]) -> list[np.float32]:
    """
    Стабильная сортировка значений (приведённых к float32) по полному порядку.

    Args:
        values: Последовательность значений, допускаются NaN

    Returns:
        Новый список float32 в каноническом порядке totalOrder
    """
    return sorted((to_f32(v) for v in values), key=total_order_key)
