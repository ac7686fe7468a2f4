from pydantic import BaseModel
from typing import Optional, List, Union
from datetime import date


# --- Reference data (read models) ---

class SurfaceCondition(BaseModel):
    id: Optional[int] = None
    name: str
    description: Optional[str] = None
    prep_time_wall: float
    prep_time_ceiling: float
    prep_time_door: float
    prep_time_linear: float
    class Config:
        from_attributes = True

class SurfaceType(BaseModel):
    id: int
    name: str
    category: Optional[str] = None
    description: Optional[str] = None
    class Config:
        from_attributes = True

class PaintType(BaseModel):
    id: int
    name: str
    category: Optional[str] = None
    description: Optional[str] = None
    class Config:
        from_attributes = True

class PaintQuality(BaseModel):
    id: int
    name: str
    level: str
    description: Optional[str] = None
    class Config:
        from_attributes = True

class PaintData(BaseModel):
    id: Optional[int] = None
    paint_type_id: Optional[int] = None
    surface_type_id: Optional[int] = None
    paint_quality_id: Optional[int] = None
    coverage: float       # m² per litre
    cost_per_m2: float
    notes: Optional[str] = None
    class Config:
        from_attributes = True

class LaborRate(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    region: Optional[str] = None
    hourly_rate: Optional[float] = None
    overhead_rate: float = 0.0
    total_rate: Optional[float] = None
    profit_margin: float
    effective_date: Optional[date] = None
    class Config:
        from_attributes = True


# --- Calculation inputs ---

class SurfaceDimensions(BaseModel):
    """Any subset of these, depending on surface type."""
    height: Optional[float] = None
    width: Optional[float] = None
    length: Optional[float] = None
    area: Optional[float] = None
    door_count: Optional[int] = None
    window_count: Optional[int] = None
    custom_door_area: Optional[float] = None
    custom_window_area: Optional[float] = None

class ResolvedSurface(BaseModel):
    """Engine input — reference data already looked up."""
    id: Union[str, int]
    name: str
    area: float
    coats: int
    paint_data: PaintData
    surface_condition: SurfaceCondition
    surface_category: str

class RawSurfaceSpec(BaseModel):
    """Surface as submitted by a client, before reference ids are resolved."""
    id: Union[str, int]
    name: str
    area: float
    coats: int
    paint_type_id: int
    surface_type_id: int
    paint_quality_id: int
    surface_condition_id: int
    surface_category: str


# --- Request bodies ---

class AreaRequest(BaseModel):
    surface_type: str
    dimensions: SurfaceDimensions

class ValidateDimensionsRequest(BaseModel):
    surface_type: str
    dimensions: dict

class SurfaceCostRequest(BaseModel):
    area: float
    coats: int
    paint_type_id: int
    surface_type_id: int
    paint_quality_id: int
    surface_condition_id: int
    surface_category: str
    labor_rate_id: Optional[int] = None
    region: Optional[str] = None

class ProjectCostRequest(BaseModel):
    surfaces: List[RawSurfaceSpec] = []
    labor_rate_id: Optional[int] = None
    region: Optional[str] = None

class SurfaceCalculationRequest(BaseModel):
    """Dimension-based surface — area is computed, not supplied."""
    surface_type: str
    dimensions: SurfaceDimensions
    paint_type_id: int
    surface_type_id: int
    paint_quality_id: int
    surface_condition_id: int
    surface_category: Optional[str] = None  # defaults to surface_type
    coats: int = 2
    labor_rate_id: Optional[int] = None
    region: Optional[str] = None

class ProjectSurfaceRequest(SurfaceCalculationRequest):
    id: Union[str, int]
    name: str

class ProjectCalculationRequest(BaseModel):
    surfaces: List[ProjectSurfaceRequest] = []
    labor_rate_id: Optional[int] = None
    region: Optional[str] = None

class QuickEstimateRequest(BaseModel):
    surface_type: str
    area: float
    quality_level: str
    region: Optional[str] = None

class ReportRequest(ProjectCalculationRequest):
    project_name: Optional[str] = None
    client_name: Optional[str] = None
    notes: Optional[str] = None
