"""
Products — компенсированная разность произведений

Вычисление a*b - c*d с уменьшенной ошибкой катастрофического сокращения
(алгоритм Кэхэна на основе fused multiply-add).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Оба fused-шага выполняются с одним округлением (fma32)
2. Ошибка округления c*d восстанавливается точно и добавляется к результату
3. NaN/Inf во входах распространяются по правилам IEEE-754 (без исключений)
"""

import numpy as np

from fpguard.math.float32 import fma32, to_f32


def difference_of_products(a: float, b: float, c: float, d: float) -> np.float32:
    """
    Компенсированная разность произведений a*b - c*d в float32.

    Алгоритм:
        cd  = c*d                 (округлено до float32)
        err = fma(-c, d, cd)      (точная ошибка округления cd)
        dop = fma(a, b, -cd)      (a*b - cd с одним округлением)
        return dop + err

    Погрешность не превышает ~1.5 ulp, тогда как наивное (a*b) - (c*d)
    при a*b ≈ c*d может потерять все значащие биты.

    Args:
        a, b: Множители первого произведения
        c, d: Множители вычитаемого произведения

    Returns:
        a*b - c*d в float32

    Examples:
        >>> float(difference_of_products(3.0, 4.0, 2.0, 5.0))
        2.0
        >>> float(difference_of_products(1e8, 1 + 1e-7, 1e8, 1.0))
        11.920928955078125
    """
    a32, b32, c32, d32 = to_f32(a), to_f32(b), to_f32(c), to_f32(d)

    with np.errstate(all="ignore"):
        cd = c32 * d32
        err = fma32(-c32, d32, cd)
        dop = fma32(a32, b32, -cd)
        return dop + err
