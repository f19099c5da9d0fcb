"""
JSON Schema validation service.

Used to check externally supplied reference data (jurisdiction rule
tables) before it is loaded. All errors are collected rather than
stopping at the first one.
"""

from typing import Any

import jsonschema


def validate_against_schema(data: Any, schema: dict[str, Any]) -> list[str]:
    """
    Validate a value against a JSON schema.
    Returns a list of error messages (empty list = valid), each prefixed
    with the path of the offending element when it is not the root.
    """
    validator = jsonschema.Draft7Validator(schema)
    messages = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]):
        location = "/".join(str(part) for part in error.path)
        messages.append(f"{location}: {error.message}" if location else error.message)
    return messages
