"""Tests for pre-flight dimension validation."""

import math

from renopilot.calculators.validation import validate_surface_dimensions


def test_valid_wall():
    result = validate_surface_dimensions("wall", {"height": 2.4, "length": 4.0})
    assert result == {"is_valid": True, "errors": []}


def test_wall_reports_each_missing_field():
    result = validate_surface_dimensions("wall", {"height": 0})
    assert not result["is_valid"]
    assert result["errors"] == [
        "Wall height must be a positive number",
        "Wall length must be a positive number",
    ]


def test_wall_rejects_nan():
    result = validate_surface_dimensions("wall", {"height": math.nan, "length": 3.0})
    assert result["errors"] == ["Wall height must be a positive number"]


def test_door_needs_area_or_pair():
    assert validate_surface_dimensions("door", {"area": 1.8})["is_valid"]
    assert validate_surface_dimensions("door", {"height": 2.0, "width": 0.9})["is_valid"]
    result = validate_surface_dimensions("door", {"height": 2.0})
    assert result["errors"] == ["Door requires either area or height and width"]


def test_ceiling_needs_area_or_pair():
    assert validate_surface_dimensions("ceiling", {"width": 3, "length": 4})["is_valid"]
    result = validate_surface_dimensions("ceiling", {})
    assert result["errors"] == ["Ceiling requires either area or width and length"]


def test_linear_needs_length():
    assert validate_surface_dimensions("linear", {"length": 14})["is_valid"]
    result = validate_surface_dimensions("linear", {"length": -2})
    assert result["errors"] == ["Linear surface length must be positive"]


def test_unknown_type_is_invalid():
    result = validate_surface_dimensions("floor", {"area": 10})
    assert not result["is_valid"]
    assert result["errors"] == ["Unsupported surface type: floor"]


def test_none_dimensions_never_raise():
    result = validate_surface_dimensions("wall", None)
    assert not result["is_valid"]
    assert len(result["errors"]) == 2
