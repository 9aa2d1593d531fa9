"""
Float32 — базовые примитивы одинарной точности

Модуль приводит значения к IEEE-754 binary32 и даёт доступ к их битовому
представлению:
- Округление произвольного real к ближайшему float32
- Битовое представление float32 (и обратное преобразование)
- Fused multiply-add с ОДНИМ округлением до float32

Python float это binary64, поэтому все примитивы пакета сначала приводят
входы к numpy.float32 и считают в арифметике float32.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. fma32 округляет результат x*y + z ровно один раз (correctly rounded)
2. from_bits(to_bits(x)) сохраняет знак и payload NaN
3. Переполнение при приведении даёт ±inf без RuntimeWarning
"""

import math
from fractions import Fraction
from typing import Final

import numpy as np

# =============================================================================
# КОНСТАНТЫ FLOAT32
# =============================================================================

# Machine epsilon для float32: 2^-23
F32_EPSILON: Final[np.float32] = np.finfo(np.float32).eps

# Максимальное конечное значение float32
F32_MAX: Final[np.float32] = np.finfo(np.float32).max

# Минимальное положительное нормализованное значение float32
F32_MIN_POSITIVE: Final[np.float32] = np.finfo(np.float32).tiny

_SIGN_MASK: Final[int] = 0x8000_0000
_U32_MASK: Final[int] = 0xFFFF_FFFF


# =============================================================================
# ПРИВЕДЕНИЕ И БИТОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def to_f32(value: float) -> np.float32:
    """
    Округление значения к ближайшему float32.

    Args:
        value: Любое вещественное значение (float, int, numpy scalar)

    Returns:
        Ближайшее float32; значения вне диапазона становятся ±inf

    Examples:
        >>> bool(to_f32(0.1) == np.float32(0.1))
        True
        >>> bool(np.isinf(to_f32(1e39)))
        True
    """
    with np.errstate(over="ignore"):
        return np.float32(value)


def to_bits(value: float) -> int:
    """
    Битовое представление float32 как беззнаковое 32-битное целое.

    Examples:
        >>> hex(to_bits(1.0))
        '0x3f800000'
        >>> hex(to_bits(-0.0))
        '0x80000000'
    """
    return int(to_f32(value).view(np.uint32))


def from_bits(bits: int) -> np.float32:
    """
    Float32 из 32-битного представления (обратное к to_bits).

    Используется для построения NaN с заданным знаком и payload.

    Examples:
        >>> float(from_bits(0x3F800000))
        1.0
        >>> bool(np.isnan(from_bits(0xFFC00000)))
        True
    """
    return np.uint32(bits & _U32_MASK).view(np.float32)


def is_sign_negative(value: float) -> bool:
    """True если установлен знаковый бит (включая -0.0 и -NaN)."""
    return bool(to_bits(value) & _SIGN_MASK)


# =============================================================================
# FUSED MULTIPLY-ADD
# =============================================================================


def _round_to_odd_f64(exact: Fraction) -> float:
    # Округление к binary64 в режиме round-to-odd: при неточном результате
    # младший бит мантиссы обязан быть 1.
    nearest = float(exact)
    if Fraction(nearest) == exact:
        return nearest
    if int(np.float64(nearest).view(np.uint64)) & 1:
        return nearest
    direction = math.inf if Fraction(nearest) < exact else -math.inf
    return math.nextafter(nearest, direction)


def fma32(x: float, y: float, z: float) -> np.float32:
    """
    Fused multiply-add: x*y + z с одним округлением до float32.

    Для конечных входов результат вычисляется точно (рациональная
    арифметика), округляется к binary64 в режиме round-to-odd и затем к
    float32. Так как 53 >= 2*24 + 2, двойное округление не искажает
    результат: он совпадает с аппаратным fmaf.

    Точный ноль получает знак по правилам IEEE-754 (вычисление в binary64,
    где произведение двух float32 точно).

    Нечисловые входы (NaN/Inf) распространяются по обычным правилам IEEE.

    Args:
        x: Первый множитель
        y: Второй множитель
        z: Слагаемое

    Returns:
        round_f32(x*y + z)

    Examples:
        >>> float(fma32(2.0, 3.0, 1.0))
        7.0
        >>> float(fma32(1e8, 1.0, -1e8))
        0.0
    """
    x32, y32, z32 = to_f32(x), to_f32(y), to_f32(z)

    if not (np.isfinite(x32) and np.isfinite(y32) and np.isfinite(z32)):
        with np.errstate(all="ignore"):
            return x32 * y32 + z32

    exact = Fraction(float(x32)) * Fraction(float(y32)) + Fraction(float(z32))
    if exact == 0:
        return np.float32(float(x32) * float(y32) + float(z32))

    return to_f32(_round_to_odd_f64(exact))
