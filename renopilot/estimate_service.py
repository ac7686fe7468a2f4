"""
Estimate pipeline — dimensions in, priced and formatted estimate out.

Stages:
    1. validate_surface_dimensions  (pre-flight gate)
    2. calculate_surface_area       (net m²)
    3. ReferenceDataService         (ids → rows)
    4. cost engine                  (surface / project breakdown)
    5. formatting                   (display strings)

Errors from any stage propagate unchanged; routers decide the status code.
"""

import logging

from sqlalchemy.orm import Session

from . import models, schemas
from .calculators import (
    InvalidDimensionError,
    InvalidInputError,
    LookupNotFoundError,
    calculate_project_costs,
    calculate_quick_estimate,
    calculate_surface_area,
    calculate_surface_cost,
    validate_surface_dimensions,
)
from .config import settings
from .formatting import format_area, format_currency, format_time, format_volume
from .reference_data import ReferenceDataService

logger = logging.getLogger(__name__)


class PaintingEstimateService:
    """Runs the full estimate pipeline against one database session."""

    def __init__(self, db: Session):
        self.reference = ReferenceDataService(db)

    def resolve_labor_rate(self, labor_rate_id=None, region=None):
        """Explicit id, else the current rate for region or DEFAULT_REGION."""
        return self.reference.resolve_labor_rate(
            labor_rate_id, region or settings.DEFAULT_REGION or None,
        )

    def compute_area(self, surface_type: str, dimensions: dict) -> dict:
        """Validate then measure. Validation failures raise InvalidDimensionError."""
        validation = validate_surface_dimensions(surface_type, dimensions)
        if not validation["is_valid"]:
            raise InvalidDimensionError(
                f"Invalid dimensions: {', '.join(validation['errors'])}"
            )
        return calculate_surface_area(surface_type, dimensions)

    def calculate_surface(self, request: schemas.SurfaceCalculationRequest) -> dict:
        """
        Area and cost for one dimension-based surface.

        Returns:
            {area: AreaResult, cost: CostBreakdown, formatted: {...}}
        """
        dimensions = request.dimensions.model_dump(exclude_none=True)
        area_result = self.compute_area(request.surface_type, dimensions)

        paint_data = self.reference.get_paint_data_by_combination(
            request.paint_type_id, request.surface_type_id, request.paint_quality_id,
        )
        condition = self.reference.get_surface_condition(request.surface_condition_id)
        labor_rate = self.resolve_labor_rate(request.labor_rate_id, request.region)

        cost = calculate_surface_cost(
            area_result["net_area"],
            request.coats,
            paint_data,
            condition,
            request.surface_category or request.surface_type,
            labor_rate,
        )
        return self._surface_result(area_result, cost)

    @staticmethod
    def _surface_result(area_result: dict, cost: dict) -> dict:
        return {
            "area": area_result,
            "cost": cost,
            "formatted": {
                "area": format_area(area_result["net_area"]),
                "total_cost": format_currency(cost["total_cost"]),
                "material_cost": format_currency(cost["material_cost"]),
                "labor_cost": format_currency(cost["labor_cost"]),
                "paint_volume": format_volume(cost["details"]["paint_volume"]),
                "prep_time": format_time(cost["details"]["prep_time"]),
            },
        }

    def calculate_project(self, request: schemas.ProjectCalculationRequest) -> dict:
        """
        Cost every surface under one labor rate and total the project.

        Areas are measured per surface, then the cost engine prices the
        resolved surfaces in a single pass. All-or-nothing: the first
        failing surface aborts the whole project.
        """
        if not request.surfaces:
            raise InvalidInputError("No surfaces provided")

        labor_rate = self.resolve_labor_rate(request.labor_rate_id, request.region)

        area_results = []
        resolved = []
        for surface in request.surfaces:
            area_result = self.compute_area(
                surface.surface_type, surface.dimensions.model_dump(exclude_none=True),
            )
            area_results.append(area_result)

            resolved.append(self.reference.resolve_surface(schemas.RawSurfaceSpec(
                id=surface.id,
                name=surface.name,
                area=area_result["net_area"],
                coats=surface.coats,
                paint_type_id=surface.paint_type_id,
                surface_type_id=surface.surface_type_id,
                paint_quality_id=surface.paint_quality_id,
                surface_condition_id=surface.surface_condition_id,
                surface_category=surface.surface_category or surface.surface_type,
            )))

        summary = calculate_project_costs(resolved, labor_rate)
        totals = summary["totals"]
        surface_results = [
            {
                "id": item["id"],
                "name": item["name"],
                "result": self._surface_result(area_result, item["cost_breakdown"]),
            }
            for item, area_result in zip(summary["surfaces"], area_results)
        ]

        return {
            "summary": summary,
            "surfaces": surface_results,
            "labor_rate": schemas.LaborRate.model_validate(labor_rate).model_dump(),
            "formatted": {
                "grand_total": format_currency(totals["grand_total"]),
                "total_area": format_area(totals["total_area"]),
                "total_material_cost": format_currency(totals["total_material_cost"]),
                "total_labor_cost": format_currency(totals["total_labor_cost"]),
            },
        }

    def calculate_project_costs(self, request: schemas.ProjectCostRequest) -> dict:
        """Area-based project: surfaces arrive with net area already measured."""
        if not request.surfaces:
            raise InvalidInputError("Missing or invalid surfaces array")

        labor_rate = self.resolve_labor_rate(request.labor_rate_id, request.region)
        resolved = [self.reference.resolve_surface(spec) for spec in request.surfaces]
        return {
            "project_costs": calculate_project_costs(resolved, labor_rate),
            "labor_rate": {
                "name": labor_rate.name,
                "region": labor_rate.region,
                "total_rate": labor_rate.total_rate,
                "profit_margin": labor_rate.profit_margin,
            },
        }

    def quick_estimate(self, surface_type: str, area: float, quality_level: str,
                       region: str = None) -> dict:
        """
        Rough cost for an area at a quality level.

        Prices the first catalogued substrate with the first top coat that has
        paint data at that quality (ceiling paint only for ceilings), two
        coats and a flat average prep rate, then quotes a ±20% band.
        """
        quality = self.reference.get_paint_quality_by_level(quality_level)

        surface_types = sorted(self.reference.get_surface_types(), key=lambda s: s.id)
        if not surface_types:
            raise InvalidInputError(f"Surface type '{surface_type}' not found")

        paint_data = self._quick_estimate_paint_data(surface_type, surface_types[0].id, quality)
        labor_rate = self.resolve_labor_rate(region=region)

        estimate = calculate_quick_estimate(
            area,
            paint_data,
            labor_rate,
            coats=settings.QUICK_ESTIMATE_COATS,
            minutes_per_m2=settings.QUICK_ESTIMATE_MINUTES_PER_M2,
            variance=settings.QUICK_ESTIMATE_VARIANCE,
        )
        cost_range = estimate["cost_range"]
        estimate["formatted"] = {
            "estimated_cost": format_currency(estimate["estimated_cost"]),
            "cost_range": f"{format_currency(cost_range['min'])} - {format_currency(cost_range['max'])}",
        }
        logger.info(
            "Quick estimate: %s %.2f m2 at %s → %s",
            surface_type, area, quality.level, estimate["formatted"]["estimated_cost"],
        )
        return estimate

    def _quick_estimate_paint_data(self, surface_type, surface_type_id, quality):
        topcoats = sorted(
            (p for p in self.reference.get_paint_types()
             if p.category == models.PaintCategory.TOPCOAT.value),
            key=lambda p: p.id,
        )
        if not topcoats:
            raise InvalidInputError("No paint types available")

        is_ceiling = surface_type == models.SurfaceCategory.CEILING.value
        topcoats.sort(key=lambda p: ("ceiling" in p.name.lower()) != is_ceiling)

        for paint_type in topcoats:
            try:
                return self.reference.get_paint_data_by_combination(
                    paint_type.id, surface_type_id, quality.id,
                )
            except LookupNotFoundError:
                continue
        raise LookupNotFoundError(f"No paint data found for quick estimate at {quality.name}")

    def form_options(self) -> dict:
        """Select-box options for every reference collection."""
        ref = self.reference
        return {
            "paint_types": [{"value": p.id, "label": p.name} for p in ref.get_paint_types()],
            "surface_types": [{"value": s.id, "label": s.name} for s in ref.get_surface_types()],
            "paint_qualities": [{"value": q.id, "label": q.name} for q in ref.get_paint_qualities()],
            "surface_conditions": [
                {"value": c.id, "label": c.name} for c in ref.get_surface_conditions()
            ],
            "labor_rates": [
                {
                    "value": r.id,
                    "label": f"{r.name} ({r.region})" if r.region else r.name,
                    "region": r.region,
                }
                for r in ref.get_labor_rates()
            ],
        }
