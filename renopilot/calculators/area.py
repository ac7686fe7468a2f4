"""
Area calculator — converts raw surface dimensions into paintable area.

All dimensions in metres, all areas in m².
Every function returns the same AreaResult dict shape:
    {gross_area, deductions, net_area, breakdown}
"""

import math

from .errors import InvalidDimensionError, UnsupportedCategoryError


STANDARD_DIMENSIONS = {
    "door": {"height": 2.0, "width": 0.9},
    "window": {"height": 1.599, "width": 1.0},
}

DEFAULT_LINEAR_HEIGHT = 0.1  # trim / skirting / cornice band


def _is_positive(value) -> bool:
    """True for finite numbers > 0. NaN and None fail."""
    if value is None or isinstance(value, bool):
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and number > 0


def _is_non_negative(value) -> bool:
    """True for finite numbers >= 0."""
    return value == 0 or _is_positive(value)


def _area_result(gross: float, deductions: float = 0.0, net: float = None,
                 breakdown: dict = None) -> dict:
    return {
        "gross_area": gross,
        "deductions": deductions,
        "net_area": gross if net is None else net,
        "breakdown": breakdown or {},
    }


def standard_door_area() -> float:
    return STANDARD_DIMENSIONS["door"]["height"] * STANDARD_DIMENSIONS["door"]["width"]


def standard_window_area() -> float:
    return STANDARD_DIMENSIONS["window"]["height"] * STANDARD_DIMENSIONS["window"]["width"]


def calculate_wall_area(height: float, length: float, door_count: int = 0,
                        window_count: int = 0, custom_door_area: float = None,
                        custom_window_area: float = None) -> dict:
    """
    Wall area with door and window deductions.

    Custom opening areas replace the count × standard size for that opening
    kind. Net area is clamped at zero: openings larger than the wall yield
    nothing to paint, not an error.
    """
    if not (_is_positive(height) and _is_positive(length)):
        raise InvalidDimensionError("Height and length must be positive numbers")

    door_count = door_count or 0
    window_count = window_count or 0
    if not (_is_non_negative(door_count) and _is_non_negative(window_count)):
        raise InvalidDimensionError("Door and window counts must be non-negative numbers")
    if (custom_door_area is not None and not _is_non_negative(custom_door_area)) or \
            (custom_window_area is not None and not _is_non_negative(custom_window_area)):
        raise InvalidDimensionError("Custom opening areas must be non-negative numbers")

    gross_area = height * length

    if custom_door_area is not None:
        doors = custom_door_area
    else:
        doors = door_count * standard_door_area()

    if custom_window_area is not None:
        windows = custom_window_area
    else:
        windows = window_count * standard_window_area()

    total_deductions = doors + windows
    net_area = max(0.0, gross_area - total_deductions)

    return _area_result(
        gross_area,
        deductions=total_deductions,
        net=net_area,
        breakdown={"doors": doors, "windows": windows},
    )


def calculate_door_area(dimensions: dict) -> dict:
    """
    Door area from an explicit area, or height × width.
    Falls back to the standard 2.0 × 0.9 door when neither is given.
    """
    area = dimensions.get("area")
    height = dimensions.get("height")
    width = dimensions.get("width")

    if area is not None:
        pass
    elif height is not None and width is not None:
        if not (_is_positive(height) and _is_positive(width)):
            raise InvalidDimensionError("Door area must be positive")
        area = height * width
    else:
        area = standard_door_area()

    if not _is_positive(area):
        raise InvalidDimensionError("Door area must be positive")

    return _area_result(area)


def calculate_ceiling_area(dimensions: dict) -> dict:
    """Ceiling area from an explicit area, or width × length. Never assumed."""
    area = dimensions.get("area")
    width = dimensions.get("width")
    length = dimensions.get("length")

    if area is not None:
        pass
    elif width is not None and length is not None:
        if not (_is_positive(width) and _is_positive(length)):
            raise InvalidDimensionError("Ceiling area must be positive")
        area = width * length
    else:
        raise InvalidDimensionError("Ceiling requires either area or width and length")

    if not _is_positive(area):
        raise InvalidDimensionError("Ceiling area must be positive")

    return _area_result(area)


def calculate_linear_surface_area(length: float, height: float = DEFAULT_LINEAR_HEIGHT) -> dict:
    """Trim, skirting, cornice: a thin band of length × height."""
    if height is None:
        height = DEFAULT_LINEAR_HEIGHT
    if not (_is_positive(length) and _is_positive(height)):
        raise InvalidDimensionError("Length and height must be positive")
    return _area_result(length * height)


def calculate_room_perimeter(width: float, length: float) -> float:
    if not (_is_positive(width) and _is_positive(length)):
        raise InvalidDimensionError("Width and length must be positive")
    return 2 * (width + length)


def calculate_surface_area(surface_type: str, dimensions: dict) -> dict:
    """Dispatch to the area function for a surface type."""
    if surface_type == "wall":
        return calculate_wall_area(
            dimensions.get("height"),
            dimensions.get("length"),
            door_count=dimensions.get("door_count") or 0,
            window_count=dimensions.get("window_count") or 0,
            custom_door_area=dimensions.get("custom_door_area"),
            custom_window_area=dimensions.get("custom_window_area"),
        )
    if surface_type == "door":
        return calculate_door_area(dimensions)
    if surface_type == "ceiling":
        return calculate_ceiling_area(dimensions)
    if surface_type == "linear":
        return calculate_linear_surface_area(dimensions.get("length"), dimensions.get("height"))
    raise UnsupportedCategoryError(f"Unsupported surface type: {surface_type}")
