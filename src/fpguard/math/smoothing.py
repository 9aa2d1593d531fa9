"""
Smoothing — экспоненциальное сглаживание, не зависящее от частоты кадров

    t      = 1 - exp(-smoothness * dt)
    result = current + (target - current) * t

Два шага dt = x и dt = y эквивалентны одному шагу dt = x + y (с точностью
до округления float32), так как (1 - t_x) * (1 - t_y) = 1 - t_{x+y}.
"""

import numpy as np

from fpguard.math.float32 import to_f32


def smoothing_factor(smoothness: float, dt: float) -> np.float32:
    """
    Доля пути к цели за время dt: 1 - exp(-smoothness * dt).

    Вычисляется как -expm1(-smoothness * dt), что точнее при малых dt.
    smoothness и dt не проверяются (ожидаются неотрицательными).

    Examples:
        >>> float(smoothing_factor(5.0, 0.0))
        0.0
    """
    with np.errstate(all="ignore"):
        return -np.expm1(-to_f32(smoothness) * to_f32(dt))


def smooth_damp(
    current: float,
    target: float,
    smoothness: float,
    dt: float,
) -> np.float32:
    """
    Сдвиг current к target с экспоненциальным затуханием.

    Args:
        current: Текущее значение
        target: Целевое значение
        smoothness: Скорость сходимости (1/сек)
        dt: Прошедшее время (сек)

    Returns:
        Новое значение между current и target

    Examples:
        >>> float(smooth_damp(0.0, 10.0, 5.0, 0.0))
        0.0
        >>> bool(0.0 < smooth_damp(0.0, 10.0, 5.0, 0.1) < 10.0)
        True
    """
    current32 = to_f32(current)
    t = smoothing_factor(smoothness, dt)

    with np.errstate(all="ignore"):
        return current32 + (to_f32(target) - current32) * t
