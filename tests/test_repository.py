"""Tests for loading the jurisdiction rule repository."""

import json

import pytest

from app.compliance.models import JurisdictionRuleSet
from app.compliance.repository import RuleRepository, RuleRepositoryError, load_repository


def _entry(name, required):
    return {
        "name": name,
        "requiredFields": required,
        "documentationTypes": [],
        "visitFrequencyOptions": [],
        "signatureRequirements": [],
        "specialRequirements": [],
    }


def test_built_in_table_loads_five_states():
    repository = load_repository()
    assert sorted(repository.codes()) == ["CA", "FL", "GA", "NY", "TX"]
    assert repository.get("GA").name == "Georgia"
    assert "patient_demographics" in repository.get("TX").required_fields


def test_code_defaults_to_table_key():
    repository = RuleRepository.from_mapping({"OR": _entry("Oregon", ["care_plan"])})
    assert repository.get("OR").code == "OR"
    assert repository.supported_jurisdictions() == [{"code": "OR", "name": "Oregon"}]


def test_unknown_code_returns_none():
    repository = load_repository()
    assert repository.get("ZZ") is None
    assert "ZZ" not in repository


def test_empty_table_is_a_startup_fault():
    with pytest.raises(RuleRepositoryError, match="empty"):
        RuleRepository.from_mapping({})


def test_invalid_entry_names_the_jurisdiction():
    with pytest.raises(RuleRepositoryError, match="WA"):
        RuleRepository.from_mapping({"WA": {"requiredFields": "care_plan"}})


def test_load_from_json_file(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"NV": _entry("Nevada", ["care_plan"])}))

    repository = load_repository(path)
    assert repository.codes() == ["NV"]
    assert repository.get("NV").required_fields == ("care_plan",)


def test_unreadable_file_raises(tmp_path):
    with pytest.raises(RuleRepositoryError, match="Cannot load"):
        RuleRepository.from_json_file(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(RuleRepositoryError):
        RuleRepository.from_json_file(broken)


def test_code_must_match_table_key():
    entry = {**_entry("Georgia", ["care_plan"]), "code": "TX"}
    with pytest.raises(RuleRepositoryError, match="GA: code 'TX' does not match"):
        RuleRepository.from_mapping({"GA": entry, "TX": _entry("Texas", ["pain_assessment"])})


def test_duplicate_codes_rejected():
    georgia = JurisdictionRuleSet(code="GA", name="Georgia")
    with pytest.raises(RuleRepositoryError, match="Duplicate jurisdiction code 'GA'"):
        RuleRepository([georgia, JurisdictionRuleSet(code="GA", name="Georgia (new)")])
