"""
FastAPI routes – a thin transport layer over the compliance engine.

The engine computes; routes parse jurisdiction lists, shape responses
and, for the reporting flow, persist check outcomes.
"""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.compliance.engine import ComplianceEngine, get_engine
from app.config import settings
from app.models.database import get_db
from app.schemas.api import (
    ComplianceReportResponse,
    FormTemplateResponse,
    FormValidationRequest,
    FormValidationResponse,
    HealthResponse,
    JurisdictionRuleSetResponse,
    JurisdictionSummary,
    MergedRequirementsResponse,
    ValidationRequest,
    ValidationResultResponse,
)
from app.services.reporting import aggregate_checks, record_check

logger = logging.getLogger(__name__)

router = APIRouter()


def parse_codes(raw: str | None) -> list[str]:
    """Split a comma separated jurisdiction list, e.g. 'GA,TX'."""
    if not raw:
        return []
    return [code.strip() for code in raw.split(",") if code.strip()]


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@router.get("/health", response_model=HealthResponse)
def health_check(
    db: Session = Depends(get_db),
    engine: ComplianceEngine = Depends(get_engine),
):
    """Basic health endpoint – verifies DB connectivity and loaded rules."""
    try:
        db.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception:
        logger.exception("Database health check failed")
        db_status = "disconnected"
    return HealthResponse(
        status="healthy",
        environment=settings.ENVIRONMENT,
        database=db_status,
        jurisdictions=len(engine.repository),
    )


# ---------------------------------------------------------------------------
# Jurisdictions and requirements
# ---------------------------------------------------------------------------

@router.get("/compliance/jurisdictions", response_model=list[JurisdictionSummary])
def list_jurisdictions(engine: ComplianceEngine = Depends(get_engine)):
    return engine.repository.supported_jurisdictions()


@router.get("/compliance/jurisdictions/{code}", response_model=JurisdictionRuleSetResponse)
def get_jurisdiction(code: str, engine: ComplianceEngine = Depends(get_engine)):
    rule_set = engine.repository.get(code)
    if rule_set is None:
        raise HTTPException(status_code=404, detail=f"Unknown jurisdiction '{code}'")
    return asdict(rule_set)


@router.get("/compliance/requirements/{codes}", response_model=MergedRequirementsResponse)
def merged_requirements(codes: str, engine: ComplianceEngine = Depends(get_engine)):
    """Union of requirements across a comma separated jurisdiction list."""
    return asdict(engine.get_merged_requirements(parse_codes(codes)))


# ---------------------------------------------------------------------------
# Form templates
# ---------------------------------------------------------------------------

@router.get(
    "/compliance/template/{codes}/{documentation_type}",
    response_model=FormTemplateResponse,
)
def form_template(
    codes: str,
    documentation_type: str,
    engine: ComplianceEngine = Depends(get_engine),
):
    return asdict(engine.generate_form_template(parse_codes(codes), documentation_type))


@router.post("/compliance/validate-form", response_model=FormValidationResponse)
def validate_form(request: FormValidationRequest, engine: ComplianceEngine = Depends(get_engine)):
    """Regenerate the template for the submission and validate against it."""
    template = engine.generate_form_template(request.jurisdictions, request.documentation_type)
    return asdict(engine.validate_form_data(request.form_data, template))


# ---------------------------------------------------------------------------
# Documentation validation
# ---------------------------------------------------------------------------

@router.post("/compliance/validate", response_model=ValidationResultResponse)
def validate_documentation(
    request: ValidationRequest,
    db: Session = Depends(get_db),
    engine: ComplianceEngine = Depends(get_engine),
):
    """
    Validate a documentation record against the merged requirements of
    the requested jurisdictions. With an agency_id the outcome is stored
    for later reporting.
    """
    result = engine.validate_documentation(request.documentation, request.jurisdictions)

    if request.agency_id:
        record_check(
            db,
            agency_id=request.agency_id,
            jurisdictions=request.jurisdictions,
            documentation=request.documentation,
            result=result,
        )
        db.commit()

    return asdict(result)


# ---------------------------------------------------------------------------
# Compliance report
# ---------------------------------------------------------------------------

@router.get("/compliance/report/{agency_id}", response_model=ComplianceReportResponse)
def compliance_report(
    agency_id: str,
    jurisdictions: str | None = Query(default=None, description="Comma separated codes"),
    time_range: int = Query(default=settings.REPORT_TIME_RANGE_DAYS, ge=1, le=3650),
    db: Session = Depends(get_db),
    engine: ComplianceEngine = Depends(get_engine),
):
    codes = parse_codes(jurisdictions) or list(settings.DEFAULT_JURISDICTIONS)
    summary, issues = aggregate_checks(db, agency_id, time_range)
    report = engine.generate_compliance_report(
        agency_id, codes, time_range, summary=summary, issues=issues
    )
    return asdict(report)
