"""Shared fixtures: a small, fully known jurisdiction table."""

import pytest

from app.compliance.engine import ComplianceEngine
from app.compliance.repository import RuleRepository

TEST_RULES = {
    "GA": {
        "name": "Georgia",
        "requiredFields": ["patient_demographics", "care_plan", "emergency_contacts"],
        "documentationTypes": ["visit_note", "Skilled Nursing Notes"],
        "visitFrequencyOptions": ["Daily", "Weekly", "PRN"],
        "signatureRequirements": ["Electronic signature required"],
        "specialRequirements": ["OASIS assessments required"],
    },
    "TX": {
        "name": "Texas",
        "requiredFields": ["patient_demographics", "physician_orders", "pain_assessment"],
        "documentationTypes": ["visit_note", "DAP Notes"],
        "visitFrequencyOptions": ["Daily", "Bi-weekly", "Monthly"],
        "signatureRequirements": ["Digital signature with timestamp"],
        "specialRequirements": ["Mandatory infection control protocols"],
    },
    "WY": {
        "name": "Wyoming",
        "requiredFields": ["care_plan"],
        "documentationTypes": ["visit_note"],
        "visitFrequencyOptions": ["Weekly"],
        "signatureRequirements": [],
        "specialRequirements": [],
    },
}


@pytest.fixture
def repository():
    return RuleRepository.from_mapping(TEST_RULES)


@pytest.fixture
def engine(repository):
    return ComplianceEngine(repository)
