"""
Compliance engine facade.

Binds the pure requirement, validation, scoring and form functions to one
immutable RuleRepository. The engine holds no per-call state, so a single
instance is shared by every request handler.

Usage:
    engine = ComplianceEngine(load_repository())
    requirements = engine.get_merged_requirements(["GA", "TX"])
    result = engine.validate_documentation(record, ["GA", "TX"])
    template = engine.generate_form_template(["GA"], "Skilled Nursing Notes")
    form_result = engine.validate_form_data(submitted, template)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Iterable, Mapping, Sequence

from app.compliance import forms, report, requirements, scoring, signatures, validation
from app.compliance.models import (
    ComplianceReport,
    FormTemplate,
    FormValidationResult,
    JurisdictionRuleSet,
    MergedRequirements,
    ReportIssue,
    ReportSummary,
    ValidationResult,
    ValidationRule,
)
from app.compliance.repository import RuleRepository, load_repository
from app.config import settings

logger = logging.getLogger(__name__)


class ComplianceEngine:
    def __init__(self, repository: RuleRepository):
        self.repository = repository

    # -- requirements -------------------------------------------------------

    def get_state_requirements(self, codes: Iterable[str]) -> list[JurisdictionRuleSet]:
        return requirements.get_state_requirements(self.repository, codes)

    def get_merged_requirements(self, codes: Iterable[str]) -> MergedRequirements:
        return requirements.get_merged_requirements(self.repository, codes)

    # -- documentation ------------------------------------------------------

    def validate_documentation(
        self, doc: Mapping[str, Any], codes: Iterable[str]
    ) -> ValidationResult:
        merged = self.get_merged_requirements(codes)
        return validation.validate_against_requirements(doc, merged)

    @staticmethod
    def validate_signature(
        signature: Mapping[str, Any] | None, signature_requirements: Sequence[str] = ()
    ) -> bool:
        return signatures.validate_signature(signature, signature_requirements)

    @staticmethod
    def calculate_compliance_score(
        doc: Mapping[str, Any], merged: MergedRequirements
    ) -> int:
        return scoring.calculate_compliance_score(doc, merged)

    # -- forms --------------------------------------------------------------

    @staticmethod
    def get_validation_rules(merged: MergedRequirements) -> dict[str, ValidationRule]:
        return forms.get_validation_rules(merged)

    def generate_form_template(
        self, codes: Iterable[str], documentation_type: str
    ) -> FormTemplate:
        codes = list(codes)
        merged = self.get_merged_requirements(codes)
        return forms.build_form_template(merged, codes, documentation_type)

    @staticmethod
    def validate_form_data(
        form_data: Mapping[str, Any], template: FormTemplate
    ) -> FormValidationResult:
        return forms.validate_form_data(form_data, template)

    # -- reporting ----------------------------------------------------------

    def generate_compliance_report(
        self,
        agency_id: str,
        codes: Iterable[str],
        time_range_days: int = 30,
        summary: ReportSummary | None = None,
        issues: Iterable[ReportIssue] = (),
    ) -> ComplianceReport:
        codes = list(codes)
        merged = self.get_merged_requirements(codes)
        return report.build_compliance_report(
            agency_id, codes, merged, time_range_days, summary=summary, issues=issues
        )


@lru_cache(maxsize=1)
def get_engine() -> ComplianceEngine:
    """Process-wide engine, built on first use from the configured rule table."""
    repository = load_repository(settings.JURISDICTION_RULES_PATH or None)
    logger.info("Compliance engine ready for %s", ", ".join(repository.codes()))
    return ComplianceEngine(repository)
