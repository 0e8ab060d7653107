from typing import Any

# Tokens HTML forms and JS clients send for "no value"
NULL_TOKENS = ("", "undefined", "null")


def to_null(value: Any) -> Any:
    """
    Turns the textual stand-ins for a missing value into None.

    Anything else, including non-string values, is returned unchanged.
    """
    if isinstance(value, str) and value in NULL_TOKENS:
        return None
    return value
