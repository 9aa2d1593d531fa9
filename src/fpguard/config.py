"""
Invariant Mode — режим проверки инвариантов

Два режима проверки инвариантов NonNaNFloat:
- CHECKED: нарушение инварианта (NaN/Inf в результате) считается ошибкой
  программиста, немедленно FloatInvariantViolation
- UNCHECKED: проверки не выполняются, инвариант "доверенный, но не
  проверенный"; NaN может молча распространиться

Режим по умолчанию:
1. Переменная окружения FPGUARD_INVARIANT_CHECKS (1/true/yes/on или
   0/false/no/off)
2. Иначе __debug__: CHECKED для разработки, UNCHECKED под `python -O`

Режим процесса задаётся set_invariant_mode. Блок invariant_mode переопределяет
его только в текущем контексте (ContextVar): поток или asyncio task.
"""

import logging
import os
from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
from typing import Final, Iterator, Optional, Union

logger = logging.getLogger(__name__)

ENV_INVARIANT_CHECKS: Final[str] = "FPGUARD_INVARIANT_CHECKS"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSY: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


class InvariantMode(str, Enum):
    """Режим проверки инвариантов"""

    CHECKED = "checked"
    UNCHECKED = "unchecked"


def _fallback_mode() -> InvariantMode:
    return InvariantMode.CHECKED if __debug__ else InvariantMode.UNCHECKED


def default_invariant_mode() -> InvariantMode:
    """
    Режим по умолчанию из окружения или __debug__.

    Raises:
        ValueError: Если FPGUARD_INVARIANT_CHECKS содержит неизвестное значение
    """
    raw = os.environ.get(ENV_INVARIANT_CHECKS)
    if raw is None or raw.strip() == "":
        return _fallback_mode()

    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return InvariantMode.CHECKED
    if normalized in _FALSY:
        return InvariantMode.UNCHECKED

    raise ValueError(
        f"{ENV_INVARIANT_CHECKS} must be one of "
        f"{sorted(_TRUTHY | _FALSY)}, got {raw!r}"
    )


# =============================================================================
# СОСТОЯНИЕ РЕЖИМА
# =============================================================================

# Режим процесса: задаётся set_invariant_mode, иначе берётся из окружения
_default_mode: Optional[InvariantMode] = None

# Режим контекста (поток / asyncio task): задаётся invariant_mode
_scoped_mode: ContextVar[Optional[InvariantMode]] = ContextVar(
    "fpguard_invariant_mode", default=None
)


def _resolve_default_mode() -> InvariantMode:
    try:
        return default_invariant_mode()
    except ValueError as exc:
        fallback = _fallback_mode()
        logger.warning("%s; falling back to %s", exc, fallback.value)
        return fallback


def _log_transition(previous: InvariantMode, new_mode: InvariantMode) -> None:
    if new_mode is previous:
        return
    if new_mode is InvariantMode.UNCHECKED:
        logger.warning(
            "Invariant checks disabled: NaN will propagate silently through NonNaNFloat"
        )
    else:
        logger.info("Invariant checks enabled")


def _process_mode() -> InvariantMode:
    global _default_mode
    if _default_mode is None:
        _default_mode = _resolve_default_mode()
    return _default_mode


def get_invariant_mode() -> InvariantMode:
    """
    Действующий режим.

    Режим активного invariant_mode в текущем контексте, иначе режим процесса
    (при первом обращении берётся режим по умолчанию).
    """
    scoped = _scoped_mode.get()
    if scoped is not None:
        return scoped
    return _process_mode()


def set_invariant_mode(mode: Union[InvariantMode, str]) -> InvariantMode:
    """
    Установка режима процесса.

    Активные блоки invariant_mode продолжают действовать в своих контекстах.

    Args:
        mode: InvariantMode или его строковое значение ("checked"/"unchecked")

    Returns:
        Предыдущий режим процесса

    Raises:
        ValueError: Если mode не является допустимым режимом
    """
    global _default_mode
    previous = _process_mode()
    new_mode = InvariantMode(mode)

    _log_transition(previous, new_mode)
    _default_mode = new_mode
    return previous


def checks_enabled() -> bool:
    """True если инварианты проверяются (режим CHECKED)."""
    return get_invariant_mode() is InvariantMode.CHECKED


@contextmanager
def invariant_mode(mode: Union[InvariantMode, str]) -> Iterator[InvariantMode]:
    """
    Временное переключение режима в текущем контексте.

    Действует только в текущем потоке (или asyncio task); другие потоки
    продолжают видеть свой режим. На выходе контекст возвращается к
    состоянию до входа, в том числе при вложенных и пересекающихся блоках.

    Examples:
        >>> with invariant_mode("unchecked"):
        ...     checks_enabled()
        False
    """
    new_mode = InvariantMode(mode)
    _log_transition(get_invariant_mode(), new_mode)
    token = _scoped_mode.set(new_mode)
    try:
        yield new_mode
    finally:
        _scoped_mode.reset(token)
