"""
JSON schema for jurisdiction rule sets.

Rule tables are static configuration supplied from outside the engine
(the built-in table or a JSON file), so each entry is checked against
this contract before the repository accepts it.
"""

_STRING_LIST: dict = {
    "type": "array",
    "items": {"type": "string", "minLength": 1},
}

JURISDICTION_RULE_SET_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Jurisdiction rule set",
    "description": "Documentation requirements for one governed region.",
    "type": "object",
    "required": [
        "requiredFields",
        "documentationTypes",
        "visitFrequencyOptions",
        "signatureRequirements",
        "specialRequirements",
    ],
    "properties": {
        "code": {
            "type": "string",
            "minLength": 1,
            "description": "Jurisdiction code, e.g. 'GA'. Defaults to the table key.",
        },
        "name": {
            "type": "string",
            "minLength": 1,
            "description": "Display name, e.g. 'Georgia'.",
        },
        "requiredFields": {
            **_STRING_LIST,
            "description": "Requirement categories a record must carry, e.g. 'care_plan'.",
        },
        "documentationTypes": _STRING_LIST,
        "visitFrequencyOptions": _STRING_LIST,
        "signatureRequirements": _STRING_LIST,
        "specialRequirements": _STRING_LIST,
    },
    "additionalProperties": False,
}
