from sqlalchemy import Column, Integer, String, Float, DateTime, Date, Text, ForeignKey, Boolean, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from .database import Base
import enum


# --- Enums ---

class SurfaceCategory(str, enum.Enum):
    """Selects which prep-time rate applies to a surface."""
    WALL = "wall"
    CEILING = "ceiling"
    DOOR = "door"
    LINEAR = "linear"


class PaintCategory(str, enum.Enum):
    PRIMER = "primer"
    UNDERCOAT = "undercoat"
    TOPCOAT = "topcoat"


class QualityLevel(str, enum.Enum):
    BUDGET = "budget"
    STANDARD = "standard"
    PREMIUM = "premium"


# Quality ordering for sorting. Stored as VARCHAR, not enum.
QUALITY_LEVEL_ORDER = {
    QualityLevel.BUDGET.value: 1,
    QualityLevel.STANDARD.value: 2,
    QualityLevel.PREMIUM.value: 3,
}


# --- Reference data tables (read-only to the calculation engine) ---

class SurfaceCondition(Base):
    """Physical state of a surface before painting — drives prep time."""
    __tablename__ = "surface_conditions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    # Minutes per m² (per linear metre band for linear)
    prep_time_wall = Column(Float, nullable=False)
    prep_time_ceiling = Column(Float, nullable=False)
    prep_time_door = Column(Float, nullable=False)
    prep_time_linear = Column(Float, nullable=False)
    is_active = Column(Boolean, default=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class SurfaceType(Base):
    """Substrate being painted — masonry, plasterboard, timber, etc."""
    __tablename__ = "surface_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=True)  # 'porous' | 'semi_porous' | 'non_porous' | 'timber'
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True)


class PaintType(Base):
    __tablename__ = "paint_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=True)  # PaintCategory value
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True)


class PaintQuality(Base):
    __tablename__ = "paint_qualities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    level = Column(String, nullable=False)  # QualityLevel value
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True)


class PaintData(Base):
    """Coverage and price for one (paint type, surface type, quality) combination."""
    __tablename__ = "paint_data"
    __table_args__ = (
        UniqueConstraint("paint_type_id", "surface_type_id", "paint_quality_id",
                         name="uq_paint_data_combination"),
    )

    id = Column(Integer, primary_key=True, index=True)
    paint_type_id = Column(Integer, ForeignKey("paint_types.id"), nullable=False)
    surface_type_id = Column(Integer, ForeignKey("surface_types.id"), nullable=False)
    paint_quality_id = Column(Integer, ForeignKey("paint_qualities.id"), nullable=False)
    coverage = Column(Float, nullable=False)     # m² per litre
    cost_per_m2 = Column(Float, nullable=False)  # $ per m² per coat
    notes = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    paint_type = relationship("PaintType")
    surface_type = relationship("SurfaceType")
    paint_quality = relationship("PaintQuality")


class LaborRate(Base):
    """Regional hourly labor cost and profit margin."""
    __tablename__ = "labor_rates"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    region = Column(String, nullable=True)
    hourly_rate = Column(Float, nullable=False)     # direct labor $/hr
    overhead_rate = Column(Float, nullable=False)   # $/hr
    total_rate = Column(Float, nullable=True)       # hourly + overhead; None → labor costs 0
    profit_margin = Column(Float, nullable=False)   # decimal, 0.20 = 20% on subtotal
    effective_date = Column(Date, nullable=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
