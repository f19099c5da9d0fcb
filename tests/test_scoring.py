"""Tests for the weighted compliance score."""

from datetime import datetime, timezone

from app.compliance.models import MergedRequirements
from app.compliance.scoring import calculate_completeness, calculate_compliance_score

REQUIREMENTS = MergedRequirements(
    all_required_fields=("patient_demographics",),
    all_documentation_types=("visit_note",),
    all_signature_requirements=("nurse",),
)


def _now():
    return datetime.now(timezone.utc).isoformat()


def test_full_score():
    doc = {
        "patient_demographics": "present",
        "type": "visit_note",
        "timestamp": _now(),
        "signature": {"timestamp": _now(), "signerId": "n1", "data": "sig"},
    }
    assert calculate_compliance_score(doc, REQUIREMENTS) == 100


def test_partial_score():
    """Only the completeness term contributes: one key, filled."""
    doc = {"type": "phone_call"}
    assert calculate_compliance_score(doc, REQUIREMENTS) == 10


def test_each_term_is_independent():
    doc = {
        "patient_demographics": "present",
        "type": "visit_note",
        "timestamp": "",
        "signature": None,
    }
    # 40 required + 20 type + 0 signature + 0 timestamp + 10 * 2/4 completeness
    assert calculate_compliance_score(doc, REQUIREMENTS) == 65


def test_no_required_fields_contributes_zero():
    doc = {"type": "visit_note", "timestamp": "2024-01-01T00:00:00Z"}
    requirements = MergedRequirements(all_documentation_types=("visit_note",))
    # 0 required + 20 type + 10 timestamp + 10 completeness
    assert calculate_compliance_score(doc, requirements) == 40


def test_empty_inputs_score_zero():
    assert calculate_compliance_score({}, MergedRequirements()) == 0
    assert calculate_completeness({}) == 0.0


def test_rounds_half_up():
    requirements = MergedRequirements(all_required_fields=tuple(f"f{i}" for i in range(16)))
    # 40 * 1/16 = 2.5 required + 10 completeness = 12.5
    assert calculate_compliance_score({"f0": "x"}, requirements) == 13


def test_fractional_coverage():
    requirements = MergedRequirements(
        all_required_fields=("a", "b", "c"),
        all_documentation_types=("t",),
    )
    doc = {"a": "x", "b": "", "type": "t"}
    # 40/3 + 20 + 10 * 2/3
    assert calculate_compliance_score(doc, requirements) == 40


def test_epoch_timestamp_does_not_count():
    doc = {"type": "other", "timestamp": "1970-01-01T00:00:00Z"}
    assert calculate_compliance_score(doc, MergedRequirements()) == 10


def test_completeness_counts_only_none_and_empty_string_as_unfilled():
    doc = {"a": None, "b": "", "c": False, "d": 0, "e": "x"}
    assert calculate_completeness(doc) == 3 / 5


def test_score_is_deterministic():
    doc = {"patient_demographics": "x", "type": "visit_note", "extra": None}
    scores = {calculate_compliance_score(doc, REQUIREMENTS) for _ in range(5)}
    assert len(scores) == 1
    assert 0 <= scores.pop() <= 100


def test_short_fraction_timestamp_counts():
    doc = {"type": "other", "timestamp": "2024-03-01T14:30:00.12Z"}
    # 10 timestamp + 10 completeness
    assert calculate_compliance_score(doc, MergedRequirements()) == 20
