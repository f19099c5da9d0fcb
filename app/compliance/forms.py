"""
Jurisdiction-aware form templates.

- get_validation_rules: per-name rules derived from merged requirements
- build_form_template: sectioned schema gated on requirement membership
- validate_form_data: checks a submission against a generated template
"""

from __future__ import annotations

import dataclasses
import logging
import re
from typing import Any, Mapping

from app.compliance.dates import parse_instant, utcnow
from app.compliance.models import (
    FieldSpec,
    FormTemplate,
    FormValidationResult,
    MergedRequirements,
    Section,
    ValidationRule,
)

logger = logging.getLogger(__name__)

PHONE_PATTERN = r"^\(\d{3}\) \d{3}-\d{4}$"
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


# ---------------------------------------------------------------------------
# Validation rules
# ---------------------------------------------------------------------------

def get_validation_rules(requirements: MergedRequirements) -> dict[str, ValidationRule]:
    """
    One rule per required category, plus fixed phone/email/dateOfBirth
    overlays that apply whether or not those names are required.
    """
    rules = {
        name: ValidationRule(required=True, min_length=2 if "name" in name else 1)
        for name in requirements.all_required_fields
    }

    overlays = {
        "phone": {"pattern": PHONE_PATTERN},
        "email": {"pattern": EMAIL_PATTERN},
        "dateOfBirth": {"max_date": utcnow()},
    }
    for name, changes in overlays.items():
        rules[name] = dataclasses.replace(rules.get(name, ValidationRule()), **changes)

    return rules


# ---------------------------------------------------------------------------
# Template generation
# ---------------------------------------------------------------------------

def _patient_demographics_section() -> Section:
    return Section(
        title="Patient Demographics",
        fields=(
            FieldSpec("firstName", "text", True, "First Name"),
            FieldSpec("lastName", "text", True, "Last Name"),
            FieldSpec("dateOfBirth", "date", True, "Date of Birth"),
            FieldSpec("address", "textarea", True, "Address"),
            FieldSpec("phone", "tel", True, "Phone Number"),
        ),
    )


def _physician_orders_section(visit_frequencies: tuple[str, ...]) -> Section:
    return Section(
        title="Physician Orders",
        fields=(
            FieldSpec("physicianName", "text", True, "Physician Name"),
            FieldSpec("orderDate", "date", True, "Order Date"),
            FieldSpec("orders", "textarea", True, "Orders"),
            FieldSpec("frequency", "select", True, "Visit Frequency", options=visit_frequencies),
        ),
    )


def _care_plan_section() -> Section:
    return Section(
        title="Care Plan",
        fields=(
            FieldSpec("goals", "textarea", True, "Care Goals"),
            FieldSpec("interventions", "textarea", True, "Interventions"),
            FieldSpec("expectedOutcomes", "textarea", True, "Expected Outcomes"),
        ),
    )


def _signatures_section() -> Section:
    return Section(
        title="Signatures",
        fields=(
            FieldSpec("nurseSignature", "signature", True, "Nurse Signature"),
            FieldSpec("supervisorSignature", "signature", False, "Supervisor Signature"),
            FieldSpec("signatureDate", "datetime-local", True, "Signature Date"),
        ),
    )


def build_form_template(
    requirements: MergedRequirements,
    jurisdictions: list[str],
    documentation_type: str,
) -> FormTemplate:
    """Sections are emitted in a fixed order, each gated on its requirement."""
    required = requirements.all_required_fields
    sections: list[Section] = []

    if "patient_demographics" in required:
        sections.append(_patient_demographics_section())
    if "physician_orders" in required:
        sections.append(_physician_orders_section(requirements.all_visit_frequencies))
    if "care_plan" in required:
        sections.append(_care_plan_section())
    if requirements.all_signature_requirements:
        sections.append(_signatures_section())

    return FormTemplate(
        documentation_type=documentation_type,
        jurisdictions=list(jurisdictions),
        sections=sections,
        required_fields=list(required),
        validation_rules=get_validation_rules(requirements),
    )


# ---------------------------------------------------------------------------
# Form data validation
# ---------------------------------------------------------------------------

def _has_value(value: Any) -> bool:
    # None, "", False, 0 and NaN count as no value; other objects are present
    if value is None or isinstance(value, (str, int, float)):
        return bool(value) and value == value
    return True


def _is_empty(value: Any) -> bool:
    return not _has_value(value) or str(value).strip() == ""


def validate_form_data(form_data: Mapping[str, Any], template: FormTemplate) -> FormValidationResult:
    """
    Validate submitted values field by field.

    Checks run in order required -> pattern -> min length -> max date, and a
    later failing check replaces the message of an earlier one, so each
    field reports at most one error: the last one that failed.
    """
    errors: dict[str, str] = {}
    warnings: list[str] = []

    for section in template.sections:
        for spec in section.fields:
            value = form_data.get(spec.name)
            rule = template.validation_rules.get(spec.name, ValidationRule())
            present = _has_value(value)

            if (spec.required or rule.required) and _is_empty(value):
                errors[spec.name] = f"{spec.label} is required"

            if present and rule.pattern and not re.fullmatch(rule.pattern, str(value), re.ASCII):
                errors[spec.name] = f"{spec.label} format is invalid"

            if present and rule.min_length and len(str(value)) < rule.min_length:
                errors[spec.name] = f"{spec.label} must be at least {rule.min_length} characters"

            if present and rule.max_date:
                submitted = parse_instant(value)
                if submitted is not None and submitted > parse_instant(rule.max_date):
                    errors[spec.name] = f"{spec.label} cannot be in the future"

    if errors:
        logger.info("Form submission has %d invalid fields", len(errors))
    return FormValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
