"""
Calculation endpoints — thin HTTP wrappers around the calculation engine.

Engine errors are translated here:
    InvalidDimensionError / InvalidInputError / UnsupportedCategoryError → 400
    LookupNotFoundError → 404
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import schemas
from ..calculators import (
    CalculationError,
    LookupNotFoundError,
    calculate_surface_area,
    calculate_surface_cost,
    validate_surface_dimensions,
)
from ..database import get_db
from ..estimate_service import PaintingEstimateService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculate", tags=["calculate"])


def http_error(exc: Exception) -> HTTPException:
    """Map an engine or lookup error to an HTTPException."""
    logger.info("Calculation rejected: %s", exc)
    if isinstance(exc, LookupNotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    return HTTPException(status_code=400, detail=str(exc))


@router.post("/area")
def calculate_area(request: schemas.AreaRequest):
    """Net area for a single surface."""
    dimensions = request.dimensions.model_dump(exclude_none=True)
    validation = validate_surface_dimensions(request.surface_type, dimensions)
    if not validation["is_valid"]:
        raise HTTPException(
            status_code=400,
            detail={"error": "Invalid dimensions", "details": validation["errors"]},
        )
    try:
        area = calculate_surface_area(request.surface_type, dimensions)
    except CalculationError as e:
        raise http_error(e)
    return {"success": True, "surface_type": request.surface_type, "area": area}


@router.post("/validate-dimensions")
def validate_dimensions(request: schemas.ValidateDimensionsRequest):
    return {
        "success": True,
        "validation": validate_surface_dimensions(request.surface_type, request.dimensions),
    }


@router.post("/surface-cost")
def surface_cost(request: schemas.SurfaceCostRequest, db: Session = Depends(get_db)):
    """Cost breakdown for a surface whose net area is already known."""
    service = PaintingEstimateService(db)
    reference = service.reference
    try:
        paint_data = reference.get_paint_data_by_combination(
            request.paint_type_id, request.surface_type_id, request.paint_quality_id,
        )
        condition = reference.get_surface_condition(request.surface_condition_id)
        labor_rate = service.resolve_labor_rate(request.labor_rate_id, request.region)
        breakdown = calculate_surface_cost(
            request.area,
            request.coats,
            paint_data,
            condition,
            request.surface_category,
            labor_rate,
        )
    except (CalculationError, LookupNotFoundError) as e:
        raise http_error(e)

    return {
        "success": True,
        "cost_breakdown": breakdown,
        "inputs": {
            "area": request.area,
            "coats": request.coats,
            "paint_data": {
                "cost_per_m2": paint_data.cost_per_m2,
                "coverage": paint_data.coverage,
            },
            "labor_rate": {
                "total_rate": labor_rate.total_rate,
                "profit_margin": labor_rate.profit_margin,
            },
        },
    }


@router.post("/project-cost")
def project_cost(request: schemas.ProjectCostRequest, db: Session = Depends(get_db)):
    """Project totals for surfaces submitted with reference ids and net areas."""
    service = PaintingEstimateService(db)
    try:
        result = service.calculate_project_costs(request)
    except (CalculationError, LookupNotFoundError) as e:
        raise http_error(e)
    return {"success": True, **result}


@router.post("/surface")
def calculate_surface(request: schemas.SurfaceCalculationRequest, db: Session = Depends(get_db)):
    """Full pipeline for one surface: dimensions → area → cost → formatted."""
    service = PaintingEstimateService(db)
    try:
        result = service.calculate_surface(request)
    except (CalculationError, LookupNotFoundError) as e:
        raise http_error(e)
    return {"success": True, **result}


@router.post("/project")
def calculate_project(request: schemas.ProjectCalculationRequest, db: Session = Depends(get_db)):
    """Full pipeline for a project of dimension-based surfaces."""
    service = PaintingEstimateService(db)
    try:
        result = service.calculate_project(request)
    except (CalculationError, LookupNotFoundError) as e:
        raise http_error(e)
    return {"success": True, **result}


@router.post("/quick-estimate")
def quick_estimate(request: schemas.QuickEstimateRequest, db: Session = Depends(get_db)):
    service = PaintingEstimateService(db)
    try:
        estimate = service.quick_estimate(
            request.surface_type, request.area, request.quality_level, request.region,
        )
    except (CalculationError, LookupNotFoundError) as e:
        raise http_error(e)
    return {"success": True, **estimate}
