"""
Compliance scoring.

Weights:
- required-field coverage   40
- documentation type        20
- valid signature           20
- valid timestamp           10
- record completeness       10
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from app.compliance.dates import is_after_epoch
from app.compliance.models import MergedRequirements
from app.compliance.signatures import is_blank, validate_signature

REQUIRED_FIELDS_WEIGHT = 40
DOCUMENTATION_TYPE_WEIGHT = 20
SIGNATURE_WEIGHT = 20
TIMESTAMP_WEIGHT = 10
COMPLETENESS_WEIGHT = 10


def calculate_completeness(doc: Mapping[str, Any]) -> float:
    """Fraction of the record's own keys whose value is neither None nor ""."""
    if not doc:
        return 0.0
    filled = [key for key, value in doc.items() if value is not None and value != ""]
    return len(filled) / len(doc)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_compliance_score(
    doc: Mapping[str, Any], requirements: MergedRequirements
) -> int:
    """Weighted 0-100 score of ``doc`` against ``requirements``."""
    score = 0.0

    required = requirements.all_required_fields
    if required:
        present = sum(1 for name in required if not is_blank(doc.get(name)))
        score += (present / len(required)) * REQUIRED_FIELDS_WEIGHT

    if doc.get("type") in requirements.all_documentation_types:
        score += DOCUMENTATION_TYPE_WEIGHT

    signature = doc.get("signature")
    if signature and validate_signature(signature, requirements.all_signature_requirements):
        score += SIGNATURE_WEIGHT

    if is_after_epoch(doc.get("timestamp")):
        score += TIMESTAMP_WEIGHT

    score += calculate_completeness(doc) * COMPLETENESS_WEIGHT

    return max(0, min(100, _round_half_up(score)))
