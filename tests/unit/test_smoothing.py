"""
Тесты для модуля Smoothing

Проверяет:
1. Отсутствие движения при dt = 0
2. Монотонное приближение к цели с ростом dt
3. Сходимость при dt → ∞
4. Композицию шагов: x, затем y ≡ x + y
"""

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from fpguard.math.smoothing import smooth_damp, smoothing_factor


class TestSmoothingFactor:
    """Тесты для smoothing_factor"""

    def test_zero_dt_gives_zero(self) -> None:
        """dt = 0 → t = 0"""
        assert smoothing_factor(5.0, 0.0) == 0.0

    def test_large_dt_gives_one(self) -> None:
        """dt → ∞ → t = 1"""
        assert smoothing_factor(5.0, 1e3) == 1.0

    def test_matches_closed_form(self) -> None:
        """t = 1 - exp(-k*dt)"""
        assert float(smoothing_factor(2.0, 0.5)) == pytest.approx(1.0 - np.exp(-1.0), rel=1e-6)

    def test_small_dt_keeps_precision(self) -> None:
        """При малом k*dt t ≈ k*dt (без потери точности 1 - exp)"""
        assert float(smoothing_factor(1.0, 1e-8)) == pytest.approx(1e-8, rel=1e-6)

    @given(
        st.floats(min_value=0.1, max_value=10.0),
        st.floats(min_value=0.0, max_value=1.0),
        st.floats(min_value=0.0, max_value=1.0),
    )
    def test_factors_compose(self, k: float, x: float, y: float) -> None:
        """(1 - t_x) * (1 - t_y) = 1 - t_{x+y}"""
        remaining = (1.0 - float(smoothing_factor(k, x))) * (1.0 - float(smoothing_factor(k, y)))
        assert remaining == pytest.approx(1.0 - float(smoothing_factor(k, x + y)), abs=1e-6)


class TestSmoothDamp:
    """Тесты для smooth_damp"""

    def test_zero_dt_does_not_move(self) -> None:
        """dt = 0 → current без изменений"""
        assert smooth_damp(0.0, 10.0, 5.0, 0.0) == 0.0
        assert smooth_damp(3.5, -7.0, 2.0, 0.0) == np.float32(3.5)

    def test_returns_float32(self) -> None:
        """Результат имеет тип numpy.float32"""
        assert isinstance(smooth_damp(0.0, 1.0, 1.0, 0.1), np.float32)

    def test_strictly_increases_toward_target(self) -> None:
        """При фиксированном k > 0 результат строго растёт к 10.0 с ростом dt"""
        k = 2.0
        results = [smooth_damp(0.0, 10.0, k, dt) for dt in (0.0, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0)]

        assert results[0] == 0.0
        for previous, current in zip(results, results[1:]):
            assert previous < current < 10.0

    def test_moves_down_toward_lower_target(self) -> None:
        """Цель ниже текущего значения: значение уменьшается"""
        result = smooth_damp(10.0, 0.0, 1.0, 0.5)
        assert 0.0 < result < 10.0

    def test_converges_for_large_dt(self) -> None:
        """dt → ∞: значение достигает цели"""
        assert smooth_damp(0.0, 10.0, 5.0, 1e3) == np.float32(10.0)

    def test_target_equal_current_is_fixed_point(self) -> None:
        """current == target: значение не меняется"""
        assert smooth_damp(4.0, 4.0, 3.0, 0.25) == np.float32(4.0)

    @given(
        st.floats(min_value=0.1, max_value=10.0),
        st.floats(min_value=0.0, max_value=1.0),
        st.floats(min_value=0.0, max_value=1.0),
    )
    def test_two_steps_equal_one_combined_step(self, k: float, x: float, y: float) -> None:
        """Шаги dt=x и dt=y эквивалентны одному шагу dt=x+y (frame-rate independence)"""
        two_steps = smooth_damp(smooth_damp(0.0, 10.0, k, x), 10.0, k, y)
        one_step = smooth_damp(0.0, 10.0, k, x + y)
        assert float(two_steps) == pytest.approx(float(one_step), abs=1e-4)
