from typing import Any, Dict

Translations = Dict[str, str]


class InvalidTranslationsError(ValueError):
    """A JSON document that is not a flat string-to-string mapping."""


def validate_translations(data: Any) -> bool:
    """
    Checks that a parsed JSON value has the expected translations structure:
    an object whose values are all plain strings.
    """
    if not isinstance(data, dict):
        return False

    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            return False

    return True
