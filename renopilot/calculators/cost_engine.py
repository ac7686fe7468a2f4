"""
Cost engine — combines material and labor into priced breakdowns.

Pure math. Area × coats × price, minutes × rate, subtotal × margin.

Input: net areas + resolved PaintData / SurfaceCondition + one LaborRate
Output: CostBreakdown per surface, ProjectCostSummary per project

Profit margin is applied to the combined (material + labor) subtotal,
never to each component separately.
"""

import logging

from .area import _is_positive
from .errors import InvalidInputError
from .labor_calculator import calculate_labor_cost
from .material_calculator import calculate_material_cost

logger = logging.getLogger(__name__)


_TOTAL_KEYS = (
    "total_area",
    "total_material_cost",
    "total_labor_cost",
    "total_subtotal",
    "total_profit_margin",
    "grand_total",
)


def calculate_surface_cost(area, coats, paint_data, surface_condition,
                           surface_category, labor_rate) -> dict:
    """
    Full cost breakdown for one surface.

    Returns:
        {
            material_cost, labor_cost, subtotal, profit_margin, total_cost,
            details: {paint_volume, coverage, cost_per_m2, prep_time, labor_rate},
        }
    """
    material = calculate_material_cost(area, coats, paint_data)
    labor = calculate_labor_cost(area, surface_condition, surface_category, labor_rate)

    subtotal = material["material_cost"] + labor["labor_cost"]
    profit_amount = subtotal * labor_rate.profit_margin
    total_cost = subtotal + profit_amount

    return {
        "material_cost": material["material_cost"],
        "labor_cost": labor["labor_cost"],
        "subtotal": subtotal,
        "profit_margin": profit_amount,
        "total_cost": total_cost,
        "details": {
            "paint_volume": material["paint_volume"],
            "coverage": material["coverage"],
            "cost_per_m2": material["cost_per_m2"],
            "prep_time": labor["prep_time"],
            "labor_rate": labor["labor_rate"],
        },
    }


def calculate_project_costs(surfaces, labor_rate) -> dict:
    """
    Cost every surface in input order and sum into project totals.

    Args:
        surfaces: iterable of objects with id, name, area, coats, paint_data,
                  surface_condition, surface_category
        labor_rate: the single LaborRate for the whole run

    An empty list is valid and yields all-zero totals. A single bad surface
    raises and aborts the whole calculation.
    """
    surface_results = []
    totals = dict.fromkeys(_TOTAL_KEYS, 0.0)

    for surface in surfaces:
        breakdown = calculate_surface_cost(
            surface.area,
            surface.coats,
            surface.paint_data,
            surface.surface_condition,
            surface.surface_category,
            labor_rate,
        )

        surface_results.append({
            "id": surface.id,
            "name": surface.name,
            "area": surface.area,
            "cost_breakdown": breakdown,
        })

        totals["total_area"] += surface.area
        totals["total_material_cost"] += breakdown["material_cost"]
        totals["total_labor_cost"] += breakdown["labor_cost"]
        totals["total_subtotal"] += breakdown["subtotal"]
        totals["total_profit_margin"] += breakdown["profit_margin"]
        totals["grand_total"] += breakdown["total_cost"]

    logger.info(
        "Project calc: %d surfaces, %.2f m2 → $%.2f total",
        len(surface_results), totals["total_area"], totals["grand_total"],
    )

    return {
        "surfaces": surface_results,
        "totals": totals,
    }


def calculate_quick_estimate(area, paint_data, labor_rate, coats=2,
                             minutes_per_m2=5.0, variance=0.2) -> dict:
    """
    Rough estimate for a single area without a surface condition.

    Uses a flat average prep rate instead of the per-category one and returns
    a ±variance band around the marked-up total.
    """
    if not _is_positive(area):
        raise InvalidInputError("Area must be positive")

    material_cost = area * paint_data.cost_per_m2 * coats
    labor_minutes = area * minutes_per_m2
    labor_cost = (labor_minutes / 60) * (labor_rate.total_rate or 0)

    subtotal = material_cost + labor_cost
    estimated_cost = subtotal * (1 + labor_rate.profit_margin)

    return {
        "estimated_cost": estimated_cost,
        "material_cost": material_cost,
        "labor_cost": labor_cost,
        "cost_range": {
            "min": estimated_cost * (1 - variance),
            "max": estimated_cost * (1 + variance),
        },
    }
