"""
Report aggregation over stored compliance checks.

Supplies the document counts and issue tallies that the engine's report
shape leaves to an outside collaborator.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.compliance.models import ReportIssue, ReportSummary, ValidationResult
from app.compliance.validation import MISSING_SIGNATURE_ERROR
from app.models.compliance import ComplianceCheck

logger = logging.getLogger(__name__)

MISSING_FIELD_PREFIX = "Required field missing: "


def record_check(
    db: Session,
    *,
    agency_id: str,
    jurisdictions: list[str],
    documentation: Mapping[str, Any],
    result: ValidationResult,
) -> ComplianceCheck:
    """Store the outcome of one documentation check (no record content)."""
    doc_type = documentation.get("type")
    check = ComplianceCheck(
        agency_id=agency_id,
        jurisdictions=list(jurisdictions),
        documentation_type=doc_type if isinstance(doc_type, str) else None,
        is_valid=result.is_valid,
        compliance_score=result.compliance_score,
        errors=list(result.errors),
    )
    db.add(check)
    db.flush()
    logger.info("Recorded compliance check for agency %s (score %d)", agency_id, result.compliance_score)
    return check


def _issues_from_errors(error_lists: list[list[str]]) -> list[ReportIssue]:
    missing: Counter[str] = Counter()
    signature_failures = 0
    for errors in error_lists:
        for message in errors or []:
            if message.startswith(MISSING_FIELD_PREFIX):
                field_label = message[len(MISSING_FIELD_PREFIX):]
                missing[field_label.replace(" ", "_")] += 1
            elif message == MISSING_SIGNATURE_ERROR:
                signature_failures += 1

    issues = [
        ReportIssue(type="missing_field", field=name, count=count, severity="high")
        for name, count in missing.most_common()
    ]
    if signature_failures:
        issues.append(ReportIssue(type="invalid_signature", count=signature_failures, severity="critical"))
    return issues


def aggregate_checks(
    db: Session,
    agency_id: str,
    time_range_days: int = 30,
    now: datetime | None = None,
) -> tuple[ReportSummary, list[ReportIssue]]:
    """Summarize an agency's checks within the last ``time_range_days`` days."""
    since = (now or datetime.now(timezone.utc)) - timedelta(days=time_range_days)
    checks = db.scalars(
        select(ComplianceCheck).where(
            ComplianceCheck.agency_id == agency_id,
            ComplianceCheck.checked_at >= since,
        )
    ).all()

    total = len(checks)
    if not total:
        return ReportSummary(), []

    compliant = sum(1 for check in checks if check.is_valid)
    summary = ReportSummary(
        total_documents=total,
        compliant_documents=compliant,
        compliance_rate=round(compliant / total * 100, 1),
        average_compliance_score=round(sum(c.compliance_score for c in checks) / total, 1),
    )
    return summary, _issues_from_errors([check.errors for check in checks])
