"""Tests for project aggregation (cost_engine.calculate_project_costs)."""

from types import SimpleNamespace

import pytest

from renopilot.calculators import InvalidInputError, calculate_project_costs


def _sample_rate():
    return SimpleNamespace(total_rate=70.0, profit_margin=0.20)


def _sample_surface(id, area, category="wall", coats=1):
    return SimpleNamespace(
        id=id,
        name=f"Surface {id}",
        area=area,
        coats=coats,
        paint_data=SimpleNamespace(coverage=9.8, cost_per_m2=2.551),
        surface_condition=SimpleNamespace(prep_time_wall=3.0, prep_time_ceiling=6.0,
                                          prep_time_door=4.0, prep_time_linear=4.0),
        surface_category=category,
    )


def test_empty_project_is_all_zero():
    result = calculate_project_costs([], _sample_rate())
    assert result["surfaces"] == []
    assert set(result["totals"]) == {
        "total_area", "total_material_cost", "total_labor_cost",
        "total_subtotal", "total_profit_margin", "grand_total",
    }
    assert all(v == 0 for v in result["totals"].values())


def test_single_reference_surface():
    result = calculate_project_costs([_sample_surface("w1", 10.0)], _sample_rate())
    assert result["totals"]["grand_total"] == pytest.approx(72.612)
    assert result["surfaces"][0]["id"] == "w1"
    assert result["surfaces"][0]["cost_breakdown"]["total_cost"] == pytest.approx(72.612)


def test_totals_sum_surfaces_in_order():
    surfaces = [
        _sample_surface("w1", 10.0),
        _sample_surface("c1", 12.0, "ceiling", coats=2),
        _sample_surface("d1", 1.8, "door", coats=2),
    ]
    result = calculate_project_costs(surfaces, _sample_rate())

    assert [s["id"] for s in result["surfaces"]] == ["w1", "c1", "d1"]
    totals = result["totals"]
    breakdowns = [s["cost_breakdown"] for s in result["surfaces"]]
    assert totals["total_area"] == pytest.approx(23.8)
    assert totals["grand_total"] == pytest.approx(sum(b["total_cost"] for b in breakdowns))
    assert totals["total_material_cost"] == pytest.approx(sum(b["material_cost"] for b in breakdowns))
    assert totals["total_labor_cost"] == pytest.approx(sum(b["labor_cost"] for b in breakdowns))
    assert totals["total_subtotal"] == pytest.approx(
        totals["total_material_cost"] + totals["total_labor_cost"]
    )
    assert totals["grand_total"] == pytest.approx(
        totals["total_subtotal"] + totals["total_profit_margin"]
    )


def test_one_bad_surface_aborts_project():
    surfaces = [_sample_surface("w1", 10.0), _sample_surface("w2", 0.0)]
    with pytest.raises(InvalidInputError):
        calculate_project_costs(surfaces, _sample_rate())
