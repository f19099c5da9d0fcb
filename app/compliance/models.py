"""
Value types for the compliance engine.

Every type here is constructed per call and handed back to the caller.
Requirement categories are ordered tuples of string identifiers; the
per-field lookups (documentation records, form data, rule maps) stay
plain string-keyed mappings because their keys come from reference data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class JurisdictionRuleSet:
    """Documentation requirements for one governed region (e.g. a state)."""

    code: str
    name: str
    required_fields: tuple[str, ...] = ()
    documentation_types: tuple[str, ...] = ()
    visit_frequency_options: tuple[str, ...] = ()
    signature_requirements: tuple[str, ...] = ()
    special_requirements: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, code: str, data: dict[str, Any]) -> JurisdictionRuleSet:
        return cls(
            code=data.get("code", code),
            name=data.get("name") or code,
            required_fields=tuple(data.get("requiredFields", ())),
            documentation_types=tuple(data.get("documentationTypes", ())),
            visit_frequency_options=tuple(data.get("visitFrequencyOptions", ())),
            signature_requirements=tuple(data.get("signatureRequirements", ())),
            special_requirements=tuple(data.get("specialRequirements", ())),
        )


@dataclass(frozen=True)
class MergedRequirements:
    """Union of every requirement category across the requested jurisdictions."""

    all_required_fields: tuple[str, ...] = ()
    all_documentation_types: tuple[str, ...] = ()
    all_visit_frequencies: tuple[str, ...] = ()
    all_signature_requirements: tuple[str, ...] = ()
    all_special_requirements: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not any(
            (
                self.all_required_fields,
                self.all_documentation_types,
                self.all_visit_frequencies,
                self.all_signature_requirements,
                self.all_special_requirements,
            )
        )


# ---------------------------------------------------------------------------
# Documentation validation
# ---------------------------------------------------------------------------

@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    compliance_score: int = 0


# ---------------------------------------------------------------------------
# Form templates
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationRule:
    required: bool = False
    min_length: int | None = None
    pattern: str | None = None
    max_date: datetime | None = None


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: str
    required: bool
    label: str
    options: tuple[str, ...] | None = None


@dataclass(frozen=True)
class Section:
    title: str
    fields: tuple[FieldSpec, ...]


@dataclass
class FormTemplate:
    """
    A generated form schema.

    ``required_fields`` holds the category-level requirement names
    (``patient_demographics``, ``care_plan`` ...), while ``sections`` hold the
    concrete input fields (``firstName``, ``goals`` ...). The two vocabularies
    are kept side by side on purpose.
    """

    documentation_type: str
    jurisdictions: list[str]
    sections: list[Section] = field(default_factory=list)
    required_fields: list[str] = field(default_factory=list)
    validation_rules: dict[str, ValidationRule] = field(default_factory=dict)


@dataclass
class FormValidationResult:
    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Compliance report
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReportSummary:
    """Document counts supplied by the aggregation layer."""

    total_documents: int = 0
    compliant_documents: int = 0
    compliance_rate: float = 0.0
    average_compliance_score: float = 0.0


@dataclass(frozen=True)
class ReportIssue:
    type: str
    count: int
    severity: str
    field: str | None = None


@dataclass(frozen=True)
class RequirementCounts:
    required_fields: int
    documentation_types: int
    signature_requirements: int


@dataclass
class ComplianceReport:
    agency_id: str
    report_date: datetime
    time_range: str
    jurisdictions: list[str]
    summary: ReportSummary
    requirements: RequirementCounts
    issues: list[ReportIssue] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
