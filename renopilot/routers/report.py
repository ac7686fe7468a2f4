"""
PDF download endpoint.

POST /api/report/pdf — calculate a project and return the painting cost report.
"""

import re
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from .. import schemas
from ..calculators import CalculationError, LookupNotFoundError
from ..database import get_db
from ..estimate_service import PaintingEstimateService
from ..pdf_generator import generate_report_pdf
from .calculate import http_error

router = APIRouter(prefix="/report", tags=["report"])


def _report_filename(project_name) -> str:
    slug = re.sub(r"[^A-Za-z0-9]+", "-", project_name or "").strip("-")
    stamp = datetime.utcnow().strftime("%Y-%m-%d")
    return f"painting-cost-report-{slug or 'project'}-{stamp}.pdf"


@router.post("/pdf")
def download_pdf(request: schemas.ReportRequest, db: Session = Depends(get_db)):
    """
    Calculate the project and render it as a PDF.

    Returns: application/pdf
    """
    service = PaintingEstimateService(db)
    try:
        project = service.calculate_project(request)
    except (CalculationError, LookupNotFoundError) as e:
        raise http_error(e)

    meta = {
        "project_name": request.project_name,
        "client_name": request.client_name,
        "notes": request.notes,
    }
    pdf_bytes = generate_report_pdf(project, meta)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{_report_filename(request.project_name)}"',
        },
    )
