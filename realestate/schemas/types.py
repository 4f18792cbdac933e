"""Value types shared by request and response schemas."""

from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, WithJsonSchema

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_big_int(value: Any) -> int:
    """
    Parse a 64-bit identifier from its transport form.

    Accepts a decimal string (the canonical JSON form) or an int coming from
    the ORM. Floats and booleans are rejected because they cannot carry
    values above 2**53 exactly.
    """
    if isinstance(value, bool):
        raise ValueError("identifier must be a decimal string")
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text or not text.lstrip("-").isdigit():
            raise ValueError("identifier must be a decimal string")
        parsed = int(text)
    else:
        raise ValueError("identifier must be a decimal string")

    if not INT64_MIN <= parsed <= INT64_MAX:
        raise ValueError("identifier is out of the 64-bit range")
    return parsed


def format_big_int(value: int) -> str:
    return str(value)


BigIntId = Annotated[
    int,
    BeforeValidator(parse_big_int),
    PlainSerializer(format_big_int, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "pattern": r"^-?\d+$"}),
]
