"""Tests for the compliance report shape and check aggregation."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.compliance.models import ReportIssue, ReportSummary, ValidationResult
from app.compliance.report import GENERAL_RECOMMENDATION
from app.models.compliance import ComplianceCheck
from app.models.database import Base
from app.services.reporting import aggregate_checks, record_check


@pytest.fixture
def db():
    sqlite = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=sqlite)
    session = sessionmaker(bind=sqlite)()
    try:
        yield session
    finally:
        session.close()


def test_report_shape_without_counts(engine):
    report = engine.generate_compliance_report("agency-1", ["GA", "TX"])

    assert report.agency_id == "agency-1"
    assert report.time_range == "Last 30 days"
    assert report.jurisdictions == ["GA", "TX"]
    assert report.summary == ReportSummary()
    assert report.requirements.required_fields == 5
    assert report.requirements.documentation_types == 3
    assert report.requirements.signature_requirements == 2
    assert report.issues == []
    assert report.recommendations == []


def test_report_uses_supplied_counts(engine):
    summary = ReportSummary(
        total_documents=150,
        compliant_documents=142,
        compliance_rate=94.7,
        average_compliance_score=96.2,
    )
    issues = [
        ReportIssue(type="missing_field", field="emergency_contacts", count=5, severity="high"),
        ReportIssue(type="invalid_signature", count=3, severity="critical"),
    ]
    report = engine.generate_compliance_report("agency-1", ["GA"], 7, summary=summary, issues=issues)

    assert report.time_range == "Last 7 days"
    assert report.summary is summary
    assert report.issues == issues
    assert report.recommendations == [
        "Ensure all emergency contacts information is collected during intake",
        "Review signature validation process with staff",
        GENERAL_RECOMMENDATION,
    ]


def test_unresolvable_jurisdictions_give_zero_requirement_counts(engine):
    report = engine.generate_compliance_report("agency-1", ["ZZ"])
    assert report.requirements.required_fields == 0
    assert report.requirements.signature_requirements == 0


def test_aggregate_checks(db):
    record_check(
        db,
        agency_id="agency-1",
        jurisdictions=["GA"],
        documentation={"type": "visit_note"},
        result=ValidationResult(is_valid=True, compliance_score=100),
    )
    record_check(
        db,
        agency_id="agency-1",
        jurisdictions=["GA"],
        documentation={"type": "visit_note"},
        result=ValidationResult(
            is_valid=False,
            errors=[
                "Required field missing: emergency contacts",
                "Invalid or missing required signature",
            ],
            compliance_score=50,
        ),
    )
    record_check(
        db,
        agency_id="agency-2",
        jurisdictions=["TX"],
        documentation={},
        result=ValidationResult(is_valid=False, compliance_score=0),
    )
    db.commit()

    summary, issues = aggregate_checks(db, "agency-1", 30)

    assert summary == ReportSummary(
        total_documents=2,
        compliant_documents=1,
        compliance_rate=50.0,
        average_compliance_score=75.0,
    )
    assert issues == [
        ReportIssue(type="missing_field", field="emergency_contacts", count=1, severity="high"),
        ReportIssue(type="invalid_signature", count=1, severity="critical"),
    ]


def test_aggregate_respects_time_range(db):
    old = ComplianceCheck(
        agency_id="agency-1",
        jurisdictions=["GA"],
        is_valid=True,
        compliance_score=90,
        errors=[],
        checked_at=datetime.now(timezone.utc) - timedelta(days=45),
    )
    db.add(old)
    db.commit()

    assert aggregate_checks(db, "agency-1", 30) == (ReportSummary(), [])
    summary, _ = aggregate_checks(db, "agency-1", 60)
    assert summary.total_documents == 1


def test_record_check_stores_no_document_content(db):
    check = record_check(
        db,
        agency_id="agency-1",
        jurisdictions=["GA"],
        documentation={"type": "visit_note", "patient_demographics": "Jane Doe"},
        result=ValidationResult(is_valid=True, compliance_score=80),
    )
    assert check.documentation_type == "visit_note"
    assert "Jane Doe" not in str(
        [check.agency_id, check.jurisdictions, check.errors, check.documentation_type]
    )
