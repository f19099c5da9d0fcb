"""Structural checks for signature records and required values."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from app.compliance.dates import is_after_epoch


def is_blank(value: Any) -> bool:
    """True for None, whitespace-only strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return not value
    return False


def validate_signature(
    signature: Mapping[str, Any] | None,
    signature_requirements: Sequence[str] = (),
) -> bool:
    """
    Check that a signature record is structurally complete.

    Requires a timestamp after the epoch, a non-blank ``signerId`` and
    non-blank ``data``. ``signature_requirements`` is accepted so that
    per-jurisdiction policies (biometric verification, co-signatures ...)
    can be plugged in later; it does not change the outcome today.
    """
    if not signature or not isinstance(signature, Mapping):
        return False

    has_timestamp = is_after_epoch(signature.get("timestamp"))
    has_signer_id = isinstance(signature.get("signerId"), str) and not is_blank(
        signature["signerId"]
    )
    has_data = isinstance(signature.get("data"), str) and not is_blank(signature["data"])

    return has_timestamp and has_signer_id and has_data
