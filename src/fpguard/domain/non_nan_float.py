"""
NonNaNFloat — float32, который никогда не является NaN

Immutable Pydantic модель-скаляр. Все операции создают новый экземпляр.

Два способа создания:
- try_new: восстановимое отсутствие (NaN → None), исключений нет
- new_checked: в режиме CHECKED значение обязано быть конечным
  (NaN и ±inf → FloatInvariantViolation); в режиме UNCHECKED не проверяется

Арифметика (float32):
- +, -, *: результат проходит через new_checked (inf - inf → нарушение)
- /: запрещён только NaN (0/0); бесконечность допустима (1/0 → inf)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляр, созданный через try_new или конструктор, не содержит NaN
2. В режиме CHECKED ни одна операция не возвращает NaN
3. В режиме UNCHECKED проверки отсутствуют, NaN распространяется молча
"""

import logging
import math
from typing import NoReturn, Optional

import numpy as np
from pydantic import BaseModel, Field, field_validator

from fpguard.config import checks_enabled
from fpguard.math.float32 import to_f32

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FloatInvariantViolation(AssertionError):
    """
    Нарушение инварианта NonNaNFloat в режиме CHECKED.

    Ошибка программиста, а не восстановимое состояние: вычисление
    произвело NaN (или бесконечность там, где требуется конечное значение).
    """

    pass


def _raise_violation(message: str) -> NoReturn:
    logger.error(message)
    raise FloatInvariantViolation(message)


# =============================================================================
# NON-NaN FLOAT MODEL
# =============================================================================


class NonNaNFloat(BaseModel):
    """
    Float32-значение с гарантией отсутствия NaN.

    Immutable модель (frozen=True): арифметика и конструкторы всегда
    создают новый экземпляр.
    """

    value: float = Field(
        ..., allow_inf_nan=True, description="Значение float32 (не NaN)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("value")
    @classmethod
    def validate_not_nan(cls, v: float) -> float:
        """NaN запрещён; значение округляется к float32."""
        if math.isnan(v):
            raise ValueError("NonNaNFloat value cannot be NaN")
        return float(to_f32(v))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def try_new(cls, value: float) -> Optional["NonNaNFloat"]:
        """
        Создание без исключений.

        Args:
            value: Исходное значение (округляется к float32)

        Returns:
            NonNaNFloat или None, если значение NaN. Бесконечности допустимы.

        Examples:
            >>> NonNaNFloat.try_new(float("nan")) is None
            True
            >>> NonNaNFloat.try_new(1.0).value
            1.0
        """
        value32 = to_f32(value)
        if np.isnan(value32):
            return None
        return cls(value=float(value32))

    @classmethod
    def new_checked(cls, value: float) -> "NonNaNFloat":
        """
        Создание с проверкой конечности (только в режиме CHECKED).

        Args:
            value: Исходное значение (округляется к float32)

        Returns:
            NonNaNFloat, содержащий значение как есть

        Raises:
            FloatInvariantViolation: В режиме CHECKED, если значение NaN или ±inf
        """
        value32 = to_f32(value)
        if checks_enabled() and not np.isfinite(value32):
            _raise_violation(
                f"NonNaNFloat error: expected finite number, got {value32}"
            )
        return cls._trusted(value32)

    @classmethod
    def _trusted(cls, value32: np.float32) -> "NonNaNFloat":
        # Без валидации: вызывающий код уже проверил (или доверяет) значение
        return cls.model_construct(value=float(value32))

    # -------------------------------------------------------------------------
    # Доступ к значению
    # -------------------------------------------------------------------------

    def val(self) -> np.float32:
        """Значение как numpy.float32."""
        return np.float32(self.value)

    def __float__(self) -> float:
        return self.value

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "NonNaNFloat") -> "NonNaNFloat":
        with np.errstate(all="ignore"):
            result = self.val() + other.val()
        return type(self).new_checked(result)

    def sub(self, other: "NonNaNFloat") -> "NonNaNFloat":
        with np.errstate(all="ignore"):
            result = self.val() - other.val()
        return type(self).new_checked(result)

    def mul(self, other: "NonNaNFloat") -> "NonNaNFloat":
        with np.errstate(all="ignore"):
            result = self.val() * other.val()
        return type(self).new_checked(result)

    def div(self, other: "NonNaNFloat") -> "NonNaNFloat":
        """
        Деление. В отличие от +, -, * бесконечный результат допустим;
        запрещён только NaN (например, 0/0).

        Raises:
            FloatInvariantViolation: В режиме CHECKED, если результат NaN
        """
        with np.errstate(all="ignore"):
            result = self.val() / other.val()
        if checks_enabled() and np.isnan(result):
            _raise_violation("NaN generated in NonNaNFloat division")
        return type(self)._trusted(result)

    def __add__(self, other: object) -> "NonNaNFloat":
        if not isinstance(other, NonNaNFloat):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "NonNaNFloat":
        if not isinstance(other, NonNaNFloat):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "NonNaNFloat":
        if not isinstance(other, NonNaNFloat):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> "NonNaNFloat":
        if not isinstance(other, NonNaNFloat):
            return NotImplemented
        return self.div(other)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NonNaNFloat):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NonNaNFloat):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NonNaNFloat):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NonNaNFloat):
            return NotImplemented
        return self.value >= other.value
