"""
Rule repository: jurisdiction code -> JurisdictionRuleSet.

Loaded once at process start and read-only afterwards, so concurrent
request handlers can share one instance without locking.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from app.compliance.models import JurisdictionRuleSet
from app.compliance.rules import STATE_RULES
from app.schemas.jurisdiction import JURISDICTION_RULE_SET_SCHEMA
from app.services.validation import validate_against_schema

logger = logging.getLogger(__name__)


class RuleRepositoryError(ValueError):
    """The reference data is missing or malformed (a startup-time fault)."""


class RuleRepository:
    """Immutable lookup table of jurisdiction rule sets."""

    def __init__(self, rule_sets: Iterable[JurisdictionRuleSet]):
        table: dict[str, JurisdictionRuleSet] = {}
        for rule_set in rule_sets:
            if rule_set.code in table:
                raise RuleRepositoryError(f"Duplicate jurisdiction code '{rule_set.code}'")
            table[rule_set.code] = rule_set
        if not table:
            raise RuleRepositoryError("Rule repository is empty")
        self._rules: Mapping[str, JurisdictionRuleSet] = MappingProxyType(table)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RuleRepository:
        """Build a repository from a ``{code: rule-set-dict}`` mapping."""
        if not isinstance(data, Mapping):
            raise RuleRepositoryError("Rule table must be a mapping of code -> rule set")

        problems: list[str] = []
        rule_sets = []
        for code, entry in data.items():
            errors = validate_against_schema(entry, JURISDICTION_RULE_SET_SCHEMA)
            if errors:
                problems.extend(f"{code}: {message}" for message in errors)
                continue
            if entry.get("code", code) != code:
                problems.append(f"{code}: code '{entry['code']}' does not match its table key")
                continue
            rule_sets.append(JurisdictionRuleSet.from_dict(code, entry))

        if problems:
            raise RuleRepositoryError("Invalid jurisdiction rules: " + "; ".join(problems))
        return cls(rule_sets)

    @classmethod
    def from_json_file(cls, path: str | Path) -> RuleRepository:
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise RuleRepositoryError(f"Cannot load jurisdiction rules from {path}: {exc}") from exc
        return cls.from_mapping(data)

    def get(self, code: str) -> JurisdictionRuleSet | None:
        return self._rules.get(code)

    def codes(self) -> list[str]:
        return list(self._rules)

    def supported_jurisdictions(self) -> list[dict[str, str]]:
        return [{"code": code, "name": rules.name} for code, rules in self._rules.items()]

    def __contains__(self, code: object) -> bool:
        return code in self._rules

    def __len__(self) -> int:
        return len(self._rules)


def load_repository(path: str | Path | None = None) -> RuleRepository:
    """Load the rule table from ``path`` if given, else the built-in state table."""
    if path:
        repository = RuleRepository.from_json_file(path)
        source = str(path)
    else:
        repository = RuleRepository.from_mapping(STATE_RULES)
        source = "built-in table"
    logger.info("Loaded %d jurisdiction rule sets from %s", len(repository), source)
    return repository
