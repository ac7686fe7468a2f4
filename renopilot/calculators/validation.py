"""
Pre-flight dimension checks per surface type.

Never raises. Callers run this before the area calculator so that normal use
never reaches the calculator's exceptions.
"""

from typing import Dict, List

from .area import _is_positive


def _present(value) -> bool:
    """A dimension counts as given when it is set and non-zero."""
    return value is not None and value != 0


def validate_surface_dimensions(surface_type, dimensions: Dict) -> Dict:
    """
    Returns:
        {"is_valid": bool, "errors": [str, ...]}
    """
    errors = []  # type: List[str]
    dims = dimensions or {}

    if surface_type == "wall":
        if not _is_positive(dims.get("height")):
            errors.append("Wall height must be a positive number")
        if not _is_positive(dims.get("length")):
            errors.append("Wall length must be a positive number")

    elif surface_type == "door":
        has_pair = _present(dims.get("height")) and _present(dims.get("width"))
        if not _present(dims.get("area")) and not has_pair:
            errors.append("Door requires either area or height and width")

    elif surface_type == "ceiling":
        has_pair = _present(dims.get("width")) and _present(dims.get("length"))
        if not _present(dims.get("area")) and not has_pair:
            errors.append("Ceiling requires either area or width and length")

    elif surface_type == "linear":
        if not _is_positive(dims.get("length")):
            errors.append("Linear surface length must be positive")

    else:
        errors.append(f"Unsupported surface type: {surface_type}")

    return {
        "is_valid": len(errors) == 0,
        "errors": errors,
    }
