"""Requirement merger: resolve jurisdiction codes and union their categories."""

from __future__ import annotations

import logging
from typing import Iterable

from app.compliance.models import JurisdictionRuleSet, MergedRequirements
from app.compliance.repository import RuleRepository

logger = logging.getLogger(__name__)


def _union(groups: Iterable[Iterable[str]]) -> tuple[str, ...]:
    # dict keeps first-seen order while dropping duplicates
    return tuple(dict.fromkeys(value for group in groups for value in group))


def get_state_requirements(
    repository: RuleRepository, codes: Iterable[str]
) -> list[JurisdictionRuleSet]:
    """Resolve each code; unknown codes are dropped without error."""
    resolved = []
    for code in codes:
        rule_set = repository.get(code)
        if rule_set is None:
            logger.debug("Ignoring unknown jurisdiction code %r", code)
            continue
        resolved.append(rule_set)
    return resolved


def merge_rule_sets(rule_sets: Iterable[JurisdictionRuleSet]) -> MergedRequirements:
    rule_sets = list(rule_sets)
    return MergedRequirements(
        all_required_fields=_union(r.required_fields for r in rule_sets),
        all_documentation_types=_union(r.documentation_types for r in rule_sets),
        all_visit_frequencies=_union(r.visit_frequency_options for r in rule_sets),
        all_signature_requirements=_union(r.signature_requirements for r in rule_sets),
        all_special_requirements=_union(r.special_requirements for r in rule_sets),
    )


def get_merged_requirements(
    repository: RuleRepository, codes: Iterable[str]
) -> MergedRequirements:
    """
    Union every requirement category over the resolvable codes.
    Empty or fully unresolvable input yields all-empty categories.
    """
    return merge_rule_sets(get_state_requirements(repository, codes or ()))
