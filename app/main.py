"""
FastAPI application entrypoint.

Run locally:  uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI

from app.api.routes import router
from app.compliance.engine import get_engine
from app.config import settings
from app.models.compliance import ComplianceCheck  # noqa: F401  (registers the table)
from app.models.database import Base, engine

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(levelname)s | %(name)s | %(message)s",
)

app = FastAPI(
    title="Multi-Jurisdiction Compliance API",
    description=(
        "Merges state documentation requirements for home-health agencies, "
        "validates and scores documentation records, and generates "
        "jurisdiction-aware form templates."
    ),
    version="1.0.0",
)

app.include_router(router, prefix="/api/v1")


@app.on_event("startup")
def on_startup():
    # Fail fast on a missing or malformed rule table
    get_engine()
    Base.metadata.create_all(bind=engine)
