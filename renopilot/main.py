from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .database import engine, Base
from .routers import calculate, reference, report

logger = logging.getLogger("renopilot")

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="RenoPilot Painting Estimator",
    description="Painting cost estimation for residential and commercial jobs",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculate.router, prefix="/api")
app.include_router(reference.router, prefix="/api")
app.include_router(report.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "renopilot"}


@app.on_event("startup")
def auto_seed():
    """Auto-seed the paint and labor catalogue on first run."""
    if not settings.SEED_ON_STARTUP:
        logger.info("SEED_ON_STARTUP disabled, skipping reference data seed")
        return
    from .database import SessionLocal
    from .seed_data import seed_reference_data
    db = SessionLocal()
    try:
        seed_reference_data(db)
    finally:
        db.close()
