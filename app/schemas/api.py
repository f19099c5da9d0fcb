"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Jurisdictions and requirements
# ---------------------------------------------------------------------------

class JurisdictionSummary(BaseModel):
    code: str
    name: str


class JurisdictionRuleSetResponse(BaseModel):
    code: str
    name: str
    required_fields: list[str]
    documentation_types: list[str]
    visit_frequency_options: list[str]
    signature_requirements: list[str]
    special_requirements: list[str]


class MergedRequirementsResponse(BaseModel):
    all_required_fields: list[str]
    all_documentation_types: list[str]
    all_visit_frequencies: list[str]
    all_signature_requirements: list[str]
    all_special_requirements: list[str]


# ---------------------------------------------------------------------------
# Documentation validation
# ---------------------------------------------------------------------------

class ValidationRequest(BaseModel):
    """A documentation record plus the jurisdictions it must satisfy."""
    documentation: dict[str, Any]
    jurisdictions: list[str] = Field(default_factory=list, max_length=100)
    agency_id: str | None = Field(
        default=None,
        description="When set, the outcome is recorded for compliance reporting.",
    )


class ValidationResultResponse(BaseModel):
    is_valid: bool
    errors: list[str]
    warnings: list[str]
    compliance_score: int = Field(..., ge=0, le=100)


# ---------------------------------------------------------------------------
# Form templates
# ---------------------------------------------------------------------------

class FieldSpecResponse(BaseModel):
    name: str
    type: str
    required: bool
    label: str
    options: list[str] | None = None


class SectionResponse(BaseModel):
    title: str
    fields: list[FieldSpecResponse]


class ValidationRuleResponse(BaseModel):
    required: bool = False
    min_length: int | None = None
    pattern: str | None = None
    max_date: datetime | None = None


class FormTemplateResponse(BaseModel):
    documentation_type: str
    jurisdictions: list[str]
    sections: list[SectionResponse]
    required_fields: list[str]
    validation_rules: dict[str, ValidationRuleResponse]


class FormValidationRequest(BaseModel):
    """Submitted form data; the template is regenerated from the same inputs."""
    jurisdictions: list[str] = Field(default_factory=list, max_length=100)
    documentation_type: str
    form_data: dict[str, Any]


class FormValidationResponse(BaseModel):
    is_valid: bool
    errors: dict[str, str]
    warnings: list[str]


# ---------------------------------------------------------------------------
# Compliance report
# ---------------------------------------------------------------------------

class ReportSummaryResponse(BaseModel):
    total_documents: int
    compliant_documents: int
    compliance_rate: float
    average_compliance_score: float


class RequirementCountsResponse(BaseModel):
    required_fields: int
    documentation_types: int
    signature_requirements: int


class ReportIssueResponse(BaseModel):
    type: str
    count: int
    severity: str
    field: str | None = None


class ComplianceReportResponse(BaseModel):
    agency_id: str
    report_date: datetime
    time_range: str
    jurisdictions: list[str]
    summary: ReportSummaryResponse
    requirements: RequirementCountsResponse
    issues: list[ReportIssueResponse]
    recommendations: list[str]


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str = "healthy"
    environment: str
    database: str = "connected"
    jurisdictions: int = 0
