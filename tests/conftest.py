"""Общие фикстуры для тестов fpguard."""

import pytest

from fpguard.config import InvariantMode, set_invariant_mode


@pytest.fixture
def checked_invariants():
    """Тест выполняется в режиме CHECKED; предыдущий режим восстанавливается."""
    previous = set_invariant_mode(InvariantMode.CHECKED)
    yield
    set_invariant_mode(previous)
