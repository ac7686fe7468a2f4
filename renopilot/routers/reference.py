from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from .. import schemas
from ..database import get_db
from ..estimate_service import PaintingEstimateService
from ..reference_data import ReferenceDataService
from ..seed_data import seed_reference_data

router = APIRouter(prefix="/calculate", tags=["reference-data"])


@router.get("/reference-data")
def reference_data(db: Session = Depends(get_db)):
    """All active reference collections in one payload."""
    ref = ReferenceDataService(db)
    return {
        "success": True,
        "data": {
            "paint_types": [schemas.PaintType.model_validate(p) for p in ref.get_paint_types()],
            "surface_types": [schemas.SurfaceType.model_validate(s) for s in ref.get_surface_types()],
            "paint_qualities": [schemas.PaintQuality.model_validate(q) for q in ref.get_paint_qualities()],
            "surface_conditions": [
                schemas.SurfaceCondition.model_validate(c) for c in ref.get_surface_conditions()
            ],
            "labor_rates": [schemas.LaborRate.model_validate(r) for r in ref.get_labor_rates()],
        },
    }


@router.get("/form-options")
def form_options(db: Session = Depends(get_db)):
    return {"success": True, **PaintingEstimateService(db).form_options()}


@router.get("/paint-data")
def search_paint_data(
    paint_type_name: Optional[str] = None,
    surface_type_name: Optional[str] = None,
    quality_level: Optional[str] = None,
    max_cost_per_m2: Optional[float] = None,
    db: Session = Depends(get_db),
):
    rows = ReferenceDataService(db).search_paint_data(
        paint_type_name=paint_type_name,
        surface_type_name=surface_type_name,
        quality_level=quality_level,
        max_cost_per_m2=max_cost_per_m2,
    )
    data = [schemas.PaintData.model_validate(r) for r in rows]
    return {"success": True, "data": data, "count": len(data)}


@router.get("/seed")
def seed(db: Session = Depends(get_db)):
    """Seed the default catalogue. Safe to run multiple times — skips existing."""
    return {"ok": True, "seeded": seed_reference_data(db)}
