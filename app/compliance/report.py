"""
Compliance report shape.

The engine owns the layout of a report and the requirement counts; the
document counts and issue tallies come from an aggregation collaborator
(see app.services.reporting).
"""

from __future__ import annotations

from typing import Iterable

from app.compliance.dates import utcnow
from app.compliance.models import (
    ComplianceReport,
    MergedRequirements,
    ReportIssue,
    ReportSummary,
    RequirementCounts,
)

_RECOMMENDATIONS = {
    "missing_field": "Ensure all {field} information is collected during intake",
    "invalid_signature": "Review signature validation process with staff",
}
GENERAL_RECOMMENDATION = "Consider implementing automated compliance checks"


def recommendations_for(issues: Iterable[ReportIssue]) -> list[str]:
    recommendations: list[str] = []
    for issue in issues:
        template = _RECOMMENDATIONS.get(issue.type)
        if template is None:
            continue
        label = (issue.field or "required").replace("_", " ")
        text = template.format(field=label)
        if text not in recommendations:
            recommendations.append(text)
    if recommendations:
        recommendations.append(GENERAL_RECOMMENDATION)
    return recommendations


def build_compliance_report(
    agency_id: str,
    jurisdictions: list[str],
    requirements: MergedRequirements,
    time_range_days: int = 30,
    summary: ReportSummary | None = None,
    issues: Iterable[ReportIssue] = (),
) -> ComplianceReport:
    issues = list(issues)
    return ComplianceReport(
        agency_id=agency_id,
        report_date=utcnow(),
        time_range=f"Last {time_range_days} days",
        jurisdictions=list(jurisdictions),
        summary=summary or ReportSummary(),
        requirements=RequirementCounts(
            required_fields=len(requirements.all_required_fields),
            documentation_types=len(requirements.all_documentation_types),
            signature_requirements=len(requirements.all_signature_requirements),
        ),
        issues=issues,
        recommendations=recommendations_for(issues),
    )
