"""
Default reference catalogue — surface conditions, surface/paint types,
paint qualities, paint data and labor rates.

Values come from the estimating spreadsheet the business runs on.
Seeding is idempotent: rows are matched by id and skipped if present.
"""

import logging
from datetime import date

from . import models

logger = logging.getLogger(__name__)


# Prep minutes per m² by category. Worse surfaces take longer to prepare
DEFAULT_SURFACE_CONDITIONS = [
    {"id": 1, "name": "Extremely poor", "prep_time_wall": 5.0, "prep_time_ceiling": 10.0,
     "prep_time_door": 8.0, "prep_time_linear": 8.0},
    {"id": 2, "name": "Poor", "prep_time_wall": 4.0, "prep_time_ceiling": 8.0,
     "prep_time_door": 6.0, "prep_time_linear": 6.0},
    {"id": 3, "name": "Fair", "prep_time_wall": 3.0, "prep_time_ceiling": 6.0,
     "prep_time_door": 4.0, "prep_time_linear": 4.0},
    {"id": 4, "name": "Good", "prep_time_wall": 2.0, "prep_time_ceiling": 4.0,
     "prep_time_door": 2.0, "prep_time_linear": 2.0},
    {"id": 5, "name": "Very good", "prep_time_wall": 1.0, "prep_time_ceiling": 2.0,
     "prep_time_door": 1.0, "prep_time_linear": 1.0},
]

DEFAULT_SURFACE_TYPES = [
    {"id": 1, "name": "Porous (masonry)", "category": "porous",
     "description": "Brick, concrete block, rendered surfaces"},
    {"id": 2, "name": "Semi-porous (gyprock)", "category": "semi_porous",
     "description": "Plasterboard, drywall surfaces"},
    {"id": 3, "name": "Non-porous (plaster)", "category": "non_porous",
     "description": "Smooth plaster, smooth concrete surfaces"},
    {"id": 4, "name": "Weather/VJ boards (timber)", "category": "timber",
     "description": "External timber cladding, weatherboards"},
    {"id": 5, "name": "Other surface 1", "category": None, "description": "Custom surface type 1"},
    {"id": 6, "name": "Other surface 2", "category": None, "description": "Custom surface type 2"},
]

DEFAULT_PAINT_TYPES = [
    {"id": 1, "name": "Primer (never painted/stripped back surfaces)", "category": "primer"},
    {"id": 2, "name": "Primer (substantially restored surfaces)", "category": "primer"},
    {"id": 3, "name": "Undercoat (previously painted)", "category": "undercoat"},
    {"id": 4, "name": "Top coat - ceiling", "category": "topcoat"},
    {"id": 5, "name": "Top coat - matt", "category": "topcoat"},
    {"id": 6, "name": "Top coat - satin", "category": "topcoat"},
    {"id": 7, "name": "Top coat - semi gloss", "category": "topcoat"},
    {"id": 8, "name": "Top coat - full gloss", "category": "topcoat"},
    {"id": 9, "name": "Other top coat 1", "category": "topcoat"},
    {"id": 10, "name": "Other top coat 2", "category": "topcoat"},
]

DEFAULT_PAINT_QUALITIES = [
    {"id": 1, "name": "Budget", "level": models.QualityLevel.BUDGET.value},
    {"id": 2, "name": "Standard", "level": models.QualityLevel.STANDARD.value},
    {"id": 3, "name": "Premium", "level": models.QualityLevel.PREMIUM.value},
]

# (paint_type_id, paint_quality_id) → [(coverage m²/L, $/m²) for surface types 1-4]
# A single tuple means the same figures on every surface type.
_PAINT_DATA_TABLE = {
    # Budget
    (1, 1): [(2.5, 7.0), (3.846, 4.55), (4.167, 4.2), (3.333, 5.25)],
    (2, 1): [(8.0, 2.187), (8.348, 2.096), (8.727, 2.005), (7.68, 2.279)],
    (3, 1): [(7.0, 2.679), (7.636, 2.455), (8.4, 2.232), (7.636, 2.455)],
    (4, 1): (11.2, 0.893),
    (5, 1): (9.8, 2.551),
    (6, 1): (9.1, 2.747),
    (7, 1): (8.4, 2.976),
    (8, 1): (7.0, 3.571),
    # Standard
    (3, 2): [(8.5, 3.22), (9.0, 2.95), (9.5, 2.68), (9.0, 2.95)],
    (4, 2): (12.5, 1.12),
    (5, 2): (10.8, 3.061),
    # Premium
    (3, 3): [(10.0, 4.02), (10.5, 3.69), (11.0, 3.36), (10.5, 3.69)],
    (4, 3): (14.0, 1.43),
    (5, 3): (12.0, 3.826),
}

_PAINT_DATA_SURFACE_TYPES = [1, 2, 3, 4]


def build_default_paint_data() -> list:
    """Expand the compact table into one row per combination."""
    rows = []
    for (paint_type_id, quality_id), figures in _PAINT_DATA_TABLE.items():
        if isinstance(figures, tuple):
            figures = [figures] * len(_PAINT_DATA_SURFACE_TYPES)
        for surface_type_id, (coverage, cost) in zip(_PAINT_DATA_SURFACE_TYPES, figures):
            rows.append({
                "paint_type_id": paint_type_id,
                "surface_type_id": surface_type_id,
                "paint_quality_id": quality_id,
                "coverage": coverage,
                "cost_per_m2": cost,
            })
    return rows


DEFAULT_LABOR_RATES = [
    {"id": 1, "name": "Standard Rate", "region": None, "hourly_rate": 35.0,
     "overhead_rate": 35.0, "profit_margin": 0.20, "effective_date": date(2025, 7, 1)},
    {"id": 2, "name": "Sydney Standard Rate", "region": "Sydney", "hourly_rate": 65.0,
     "overhead_rate": 15.0, "profit_margin": 0.25, "effective_date": date(2025, 1, 1)},
    {"id": 3, "name": "Melbourne Standard Rate", "region": "Melbourne", "hourly_rate": 60.0,
     "overhead_rate": 12.0, "profit_margin": 0.22, "effective_date": date(2025, 1, 1)},
]


def labor_rate_total(hourly_rate, overhead_rate):
    """total_rate is derived, never entered — None unless both parts are known."""
    if hourly_rate is None or overhead_rate is None:
        return None
    return hourly_rate + overhead_rate


def _seed_by_id(db, model, rows) -> int:
    seeded = 0
    for data in rows:
        if db.get(model, data["id"]) is None:
            db.add(model(**data))
            seeded += 1
    return seeded


def seed_reference_data(db) -> dict:
    """Seed the default catalogue. Safe to run multiple times — skips existing."""
    counts = {
        "surface_conditions": _seed_by_id(db, models.SurfaceCondition, DEFAULT_SURFACE_CONDITIONS),
        "surface_types": _seed_by_id(db, models.SurfaceType, DEFAULT_SURFACE_TYPES),
        "paint_types": _seed_by_id(db, models.PaintType, DEFAULT_PAINT_TYPES),
        "paint_qualities": _seed_by_id(db, models.PaintQuality, DEFAULT_PAINT_QUALITIES),
    }
    db.flush()

    paint_seeded = 0
    for data in build_default_paint_data():
        existing = db.query(models.PaintData).filter(
            models.PaintData.paint_type_id == data["paint_type_id"],
            models.PaintData.surface_type_id == data["surface_type_id"],
            models.PaintData.paint_quality_id == data["paint_quality_id"],
        ).first()
        if not existing:
            db.add(models.PaintData(**data))
            paint_seeded += 1
    counts["paint_data"] = paint_seeded

    rate_rows = [
        dict(row, total_rate=labor_rate_total(row["hourly_rate"], row["overhead_rate"]))
        for row in DEFAULT_LABOR_RATES
    ]
    counts["labor_rates"] = _seed_by_id(db, models.LaborRate, rate_rows)

    db.commit()
    logger.info("Reference data seeded: %s", counts)
    return counts
