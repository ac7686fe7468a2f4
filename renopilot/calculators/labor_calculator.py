"""
Deterministic labor cost calculator based on surface preparation time.

Prep time comes from the surface condition's per-category rate
(minutes per m²). Every dollar is traceable to area × rate × hourly cost.

Input: net area, surface condition, surface category, labor rate
Output: Dict with labor_cost, prep_time (minutes), labor_rate ($/hr)
"""

import logging

from .area import _is_positive
from .errors import InvalidInputError, UnsupportedCategoryError

logger = logging.getLogger(__name__)


# Surface category → attribute on SurfaceCondition holding its prep rate
_PREP_TIME_FIELDS = {
    "wall": "prep_time_wall",
    "ceiling": "prep_time_ceiling",
    "door": "prep_time_door",
    "linear": "prep_time_linear",
}


def get_prep_time_rate(surface_condition, surface_category):
    # type: (object, str) -> float
    """Minutes per m² for a category. Raises for unknown categories."""
    field = _PREP_TIME_FIELDS.get(surface_category)
    if field is None:
        raise UnsupportedCategoryError(
            f"Unsupported surface category: {surface_category}. "
            f"Available: {list(_PREP_TIME_FIELDS.keys())}"
        )
    return getattr(surface_condition, field)


def calculate_labor_cost(area, surface_condition, surface_category, labor_rate):
    # type: (float, object, str, object) -> dict
    """
    Labor cost for preparing and painting a surface.

    Args:
        area: net area in m²
        surface_condition: has prep_time_wall/ceiling/door/linear
        surface_category: "wall" | "ceiling" | "door" | "linear"
        labor_rate: has total_rate ($/hr, may be None)

    Returns:
        {labor_cost, prep_time, labor_rate}
    """
    if not _is_positive(area):
        raise InvalidInputError("Area must be positive")

    prep_time_per_unit = get_prep_time_rate(surface_condition, surface_category)

    prep_time = area * prep_time_per_unit  # minutes
    total_rate = labor_rate.total_rate or 0
    labor_cost = (prep_time / 60) * total_rate

    logger.debug(
        "Labor calc for %s: %.2f m2 x %.2f min/m2 = %.1f min at $%.2f/hr",
        surface_category, area, prep_time_per_unit, prep_time, total_rate,
    )

    return {
        "labor_cost": labor_cost,
        "prep_time": prep_time,
        "labor_rate": total_rate,
    }
