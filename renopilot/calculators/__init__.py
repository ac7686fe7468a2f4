"""
Calculation engine — deterministic painting cost pipeline.

Pure Python math. No database, no I/O.
Given net areas and resolved reference data, produce an itemised
cost breakdown per surface and per project.
"""

from .area import (
    STANDARD_DIMENSIONS,
    calculate_ceiling_area,
    calculate_door_area,
    calculate_linear_surface_area,
    calculate_room_perimeter,
    calculate_surface_area,
    calculate_wall_area,
)
from .cost_engine import calculate_project_costs, calculate_quick_estimate, calculate_surface_cost
from .errors import (
    CalculationError,
    InvalidDimensionError,
    InvalidInputError,
    LookupNotFoundError,
    UnsupportedCategoryError,
)
from .labor_calculator import calculate_labor_cost
from .material_calculator import calculate_material_cost
from .validation import validate_surface_dimensions
