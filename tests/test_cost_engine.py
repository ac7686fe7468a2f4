"""
Tests for material, labor and surface cost calculation.

Reference surface: 10 m² wall, one coat of budget matt on masonry
(9.8 m²/L, $2.551/m²), Fair condition (3 min/m²), $70/hr, 20% margin.
"""

from types import SimpleNamespace

import pytest

from renopilot.calculators import (
    InvalidInputError,
    UnsupportedCategoryError,
    calculate_labor_cost,
    calculate_material_cost,
    calculate_quick_estimate,
    calculate_surface_cost,
)
from renopilot.calculators.labor_calculator import get_prep_time_rate


# --- Fixtures ---

def _sample_paint():
    return SimpleNamespace(coverage=9.8, cost_per_m2=2.551)


def _sample_condition():
    return SimpleNamespace(prep_time_wall=3.0, prep_time_ceiling=6.0,
                           prep_time_door=4.0, prep_time_linear=4.0)


def _sample_rate(total_rate=70.0, profit_margin=0.20):
    return SimpleNamespace(total_rate=total_rate, profit_margin=profit_margin)


# --- Material ---

def test_material_cost_single_coat():
    result = calculate_material_cost(10.0, 1, _sample_paint())
    assert result["material_cost"] == pytest.approx(25.51)
    assert result["paint_volume"] == pytest.approx(10.0 / 9.8)
    assert result["coverage"] == 9.8
    assert result["cost_per_m2"] == 2.551


def test_material_cost_scales_with_coats():
    one = calculate_material_cost(12.5, 1, _sample_paint())
    two = calculate_material_cost(12.5, 2, _sample_paint())
    assert two["material_cost"] == pytest.approx(2 * one["material_cost"])
    assert two["paint_volume"] == pytest.approx(2 * one["paint_volume"])


def test_material_rejects_zero_coats():
    with pytest.raises(InvalidInputError, match="Area and coats must be positive"):
        calculate_material_cost(10.0, 0, _sample_paint())


def test_material_rejects_zero_coverage():
    with pytest.raises(InvalidInputError, match="coverage"):
        calculate_material_cost(10.0, 2, SimpleNamespace(coverage=0, cost_per_m2=2.0))


# --- Labor ---

def test_labor_cost_for_wall():
    result = calculate_labor_cost(10.0, _sample_condition(), "wall", _sample_rate())
    assert result["prep_time"] == pytest.approx(30.0)
    assert result["labor_cost"] == pytest.approx(35.0)
    assert result["labor_rate"] == 70.0


def test_prep_rate_follows_category():
    condition = _sample_condition()
    assert get_prep_time_rate(condition, "ceiling") == 6.0
    assert get_prep_time_rate(condition, "door") == 4.0
    assert get_prep_time_rate(condition, "linear") == 4.0


def test_unknown_category_rejected():
    with pytest.raises(UnsupportedCategoryError, match="floor"):
        calculate_labor_cost(10.0, _sample_condition(), "floor", _sample_rate())


def test_missing_total_rate_means_free_labor():
    result = calculate_labor_cost(10.0, _sample_condition(), "wall", _sample_rate(total_rate=None))
    assert result["labor_cost"] == 0
    assert result["prep_time"] == pytest.approx(30.0)


def test_labor_rejects_zero_area():
    with pytest.raises(InvalidInputError):
        calculate_labor_cost(0, _sample_condition(), "wall", _sample_rate())


# --- Surface ---

def test_reference_surface_cost():
    result = calculate_surface_cost(10.0, 1, _sample_paint(), _sample_condition(),
                                    "wall", _sample_rate())
    assert result["material_cost"] == pytest.approx(25.51)
    assert result["labor_cost"] == pytest.approx(35.0)
    assert result["subtotal"] == pytest.approx(60.51)
    assert result["profit_margin"] == pytest.approx(12.102)
    assert result["total_cost"] == pytest.approx(72.612)
    assert result["details"]["prep_time"] == pytest.approx(30.0)
    assert result["details"]["labor_rate"] == 70.0


def test_surface_totals_are_consistent():
    for area, coats, category in [(4.2, 2, "ceiling"), (1.8, 3, "door"), (1.4, 1, "linear")]:
        result = calculate_surface_cost(area, coats, _sample_paint(), _sample_condition(),
                                        category, _sample_rate(profit_margin=0.25))
        assert result["subtotal"] == pytest.approx(result["material_cost"] + result["labor_cost"])
        assert result["total_cost"] == pytest.approx(result["subtotal"] + result["profit_margin"])
        assert result["profit_margin"] == pytest.approx(result["subtotal"] * 0.25)


def test_surface_cost_is_repeatable():
    args = (10.0, 2, _sample_paint(), _sample_condition(), "wall", _sample_rate())
    assert calculate_surface_cost(*args) == calculate_surface_cost(*args)


# --- Quick estimate ---

def test_quick_estimate_band():
    result = calculate_quick_estimate(20.0, _sample_paint(), _sample_rate())
    # 20 m² × $2.551 × 2 coats, 20 m² × 5 min at $70/hr, +20%
    assert result["material_cost"] == pytest.approx(102.04)
    assert result["labor_cost"] == pytest.approx(116.6667, rel=1e-4)
    assert result["estimated_cost"] == pytest.approx((102.04 + 116.66667) * 1.2, rel=1e-6)
    assert result["cost_range"]["min"] == pytest.approx(result["estimated_cost"] * 0.8)
    assert result["cost_range"]["max"] == pytest.approx(result["estimated_cost"] * 1.2)


def test_quick_estimate_rejects_zero_area():
    with pytest.raises(InvalidInputError):
        calculate_quick_estimate(0, _sample_paint(), _sample_rate())
