"""
Material cost — paint volume and paint cost for a surface.

Each coat consumes its own paint, so cost and volume scale with coats.
"""

from .area import _is_positive
from .errors import InvalidInputError


def calculate_material_cost(area, coats, paint_data):
    # type: (float, int, object) -> dict
    """
    Args:
        area: net paintable area in m²
        coats: number of paint applications
        paint_data: anything with .coverage (m²/L) and .cost_per_m2 ($/m²)

    Returns:
        {material_cost, paint_volume, coverage, cost_per_m2}
    """
    if not (_is_positive(area) and _is_positive(coats)):
        raise InvalidInputError("Area and coats must be positive")

    coverage = paint_data.coverage
    if not _is_positive(coverage):
        raise InvalidInputError("Paint coverage must be positive")

    total_area_to_paint = area * coats
    paint_volume = total_area_to_paint / coverage
    material_cost = total_area_to_paint * paint_data.cost_per_m2

    return {
        "material_cost": material_cost,
        "paint_volume": paint_volume,
        "coverage": coverage,
        "cost_per_m2": paint_data.cost_per_m2,
    }
