"""
Reference data lookup — the read-only collaborator of the calculation engine.

Resolves ids into PaintData / SurfaceCondition / LaborRate rows.
A missing or inactive row raises LookupNotFoundError — the engine is never
handed a substituted default.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from . import models, schemas
from .calculators.errors import LookupNotFoundError

logger = logging.getLogger(__name__)


class ReferenceDataService:
    """Active reference rows, read through one SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    # --- Catalogue listings ---

    def get_paint_types(self) -> List[models.PaintType]:
        return self.db.query(models.PaintType).filter(
            models.PaintType.is_active.is_(True)
        ).order_by(models.PaintType.name).all()

    def get_surface_types(self) -> List[models.SurfaceType]:
        return self.db.query(models.SurfaceType).filter(
            models.SurfaceType.is_active.is_(True)
        ).order_by(models.SurfaceType.name).all()

    def get_paint_qualities(self) -> List[models.PaintQuality]:
        """Ordered budget → standard → premium."""
        qualities = self.db.query(models.PaintQuality).filter(
            models.PaintQuality.is_active.is_(True)
        ).all()
        return sorted(qualities, key=lambda q: models.QUALITY_LEVEL_ORDER.get(q.level, 99))

    def get_surface_conditions(self) -> List[models.SurfaceCondition]:
        return self.db.query(models.SurfaceCondition).filter(
            models.SurfaceCondition.is_active.is_(True)
        ).order_by(models.SurfaceCondition.name).all()

    def get_labor_rates(self, region: Optional[str] = None) -> List[models.LaborRate]:
        """Active rates, most recent effective date first."""
        query = self.db.query(models.LaborRate).filter(models.LaborRate.is_active.is_(True))
        if region:
            query = query.filter(models.LaborRate.region == region)
        return query.order_by(
            models.LaborRate.effective_date.desc(), models.LaborRate.id
        ).all()

    # --- Single lookups ---

    def get_current_labor_rate(self, region: Optional[str] = None) -> models.LaborRate:
        rates = self.get_labor_rates(region)
        if not rates:
            where = f" for region {region}" if region else ""
            raise LookupNotFoundError(f"No labor rate found{where}")
        return rates[0]

    def get_labor_rate(self, labor_rate_id: int) -> models.LaborRate:
        rate = self.db.get(models.LaborRate, labor_rate_id)
        if rate is None or not rate.is_active:
            raise LookupNotFoundError(f"Labor rate {labor_rate_id} not found")
        return rate

    def resolve_labor_rate(self, labor_rate_id: Optional[int] = None,
                           region: Optional[str] = None) -> models.LaborRate:
        """Explicit id wins; otherwise the current rate for the region."""
        if labor_rate_id:
            return self.get_labor_rate(labor_rate_id)
        return self.get_current_labor_rate(region)

    def get_paint_data_by_combination(self, paint_type_id: int, surface_type_id: int,
                                      paint_quality_id: int) -> models.PaintData:
        data = self.db.query(models.PaintData).filter(
            models.PaintData.paint_type_id == paint_type_id,
            models.PaintData.surface_type_id == surface_type_id,
            models.PaintData.paint_quality_id == paint_quality_id,
            models.PaintData.is_active.is_(True),
        ).first()
        if data is None:
            raise LookupNotFoundError(
                f"No paint data found for paint type {paint_type_id}, "
                f"surface type {surface_type_id}, quality {paint_quality_id}"
            )
        return data

    def get_surface_condition(self, surface_condition_id: int) -> models.SurfaceCondition:
        condition = self.db.get(models.SurfaceCondition, surface_condition_id)
        if condition is None or not condition.is_active:
            raise LookupNotFoundError(f"Surface condition {surface_condition_id} not found")
        return condition

    def get_paint_quality_by_level(self, level: str) -> models.PaintQuality:
        """Match on level or display name, case-insensitive."""
        wanted = (level or "").strip().lower()
        for quality in self.get_paint_qualities():
            if quality.level.lower() == wanted or quality.name.lower() == wanted:
                return quality
        raise LookupNotFoundError(f"Quality level '{level}' not found")

    # --- Search ---

    def search_paint_data(self, paint_type_name: Optional[str] = None,
                          surface_type_name: Optional[str] = None,
                          quality_level: Optional[str] = None,
                          max_cost_per_m2: Optional[float] = None) -> List[models.PaintData]:
        """Active paint data filtered by related names (substring, case-insensitive)."""
        query = self.db.query(models.PaintData).filter(models.PaintData.is_active.is_(True))
        if paint_type_name:
            query = query.join(models.PaintData.paint_type).filter(
                models.PaintType.name.ilike(f"%{paint_type_name}%")
            )
        if surface_type_name:
            query = query.join(models.PaintData.surface_type).filter(
                models.SurfaceType.name.ilike(f"%{surface_type_name}%")
            )
        if quality_level:
            query = query.join(models.PaintData.paint_quality).filter(
                models.PaintQuality.level == quality_level.lower()
            )
        if max_cost_per_m2 is not None:
            query = query.filter(models.PaintData.cost_per_m2 <= max_cost_per_m2)
        return query.order_by(models.PaintData.id).all()

    # --- Two-stage surface resolution ---

    def resolve_surface(self, spec: schemas.RawSurfaceSpec) -> schemas.ResolvedSurface:
        """Turn a surface that carries reference ids into one that carries the rows."""
        try:
            paint_data = self.get_paint_data_by_combination(
                spec.paint_type_id, spec.surface_type_id, spec.paint_quality_id,
            )
            condition = self.get_surface_condition(spec.surface_condition_id)
        except LookupNotFoundError as e:
            logger.warning("Cannot resolve surface %s (%s): %s", spec.id, spec.name, e)
            raise

        return schemas.ResolvedSurface(
            id=spec.id,
            name=spec.name,
            area=spec.area,
            coats=spec.coats,
            paint_data=schemas.PaintData.model_validate(paint_data),
            surface_condition=schemas.SurfaceCondition.model_validate(condition),
            surface_category=spec.surface_category,
        )
