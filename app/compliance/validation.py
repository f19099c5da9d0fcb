"""
Documentation validation against merged jurisdiction requirements.

Problems are returned as data: errors make a record invalid, warnings
never do.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from app.compliance.models import MergedRequirements, ValidationResult
from app.compliance.scoring import calculate_compliance_score
from app.compliance.signatures import is_blank, validate_signature

logger = logging.getLogger(__name__)

MISSING_SIGNATURE_ERROR = "Invalid or missing required signature"


def missing_field_error(field_name: str) -> str:
    return f"Required field missing: {field_name.replace('_', ' ')}"


def validate_against_requirements(
    doc: Mapping[str, Any], requirements: MergedRequirements
) -> ValidationResult:
    errors: list[str] = []
    warnings: list[str] = []

    for field_name in requirements.all_required_fields:
        if is_blank(doc.get(field_name)):
            errors.append(missing_field_error(field_name))

    doc_type = doc.get("type")
    if doc_type not in requirements.all_documentation_types:
        type_label = "unspecified" if doc_type is None else doc_type
        warnings.append(
            f"Documentation type '{type_label}' may not be compliant in all operating states"
        )

    if doc.get("requiresSignature"):
        if not validate_signature(doc.get("signature"), requirements.all_signature_requirements):
            errors.append(MISSING_SIGNATURE_ERROR)

    result = ValidationResult(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        compliance_score=calculate_compliance_score(doc, requirements),
    )
    if not result.is_valid:
        logger.info(
            "Documentation failed validation: %d errors, %d warnings, score %d",
            len(errors),
            len(warnings),
            result.compliance_score,
        )
    return result
