"""
Turns a raw JSON request body into a RiskInput.

Required fields must be present and truthy (null, false, 0, "" and NaN all
count as missing). Numbers may arrive as JSON numbers or as strings; strings
are read up to the first character that is not part of the number, so
"72 kg" parses as 72.
"""

import math
import re
from typing import Any, List

from risk_api.risk.exceptions import MissingParametersError
from risk_api.risk.schemas import RiskInput

REQUIRED_FIELDS = ("age", "height", "weight", "systolic", "diastolic")

# ASCII digits only: "١٨٠" is not a number here
_INT_PREFIX = re.compile(r"^\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"^\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def _is_missing(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0 or math.isnan(value)
    if isinstance(value, str):
        return value == ""
    return False


def parse_int(value: Any, field: str) -> int:
    """Leading integer of a string, or a number truncated toward zero."""
    if isinstance(value, bool):
        raise ValueError(f"{field}: expected a number, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{field}: {value} is not a finite number")
        return math.trunc(value)
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if match:
            return int(match.group(1))
    raise ValueError(f"{field}: cannot parse {value!r} as an integer")


def parse_float(value: Any, field: str) -> float:
    """Leading decimal literal of a string, or a number as float."""
    if isinstance(value, bool):
        raise ValueError(f"{field}: expected a number, got a boolean")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match:
            return float(match.group(1))
    raise ValueError(f"{field}: cannot parse {value!r} as a number")


def parse_family_history(value: Any) -> List[str]:
    """String items of a JSON array; anything that is not an array is empty."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def parse_risk_request(body: Any) -> RiskInput:
    """
    Validate and normalize a request body.

    Raises:
        MissingParametersError: body is not an object or a required field is missing
        ValueError: a required field is present but not numeric, or out of range
            (pydantic.ValidationError is a ValueError)
    """
    if not isinstance(body, dict):
        raise MissingParametersError()

    if any(_is_missing(body.get(field)) for field in REQUIRED_FIELDS):
        raise MissingParametersError()

    return RiskInput(
        age=parse_int(body["age"], "age"),
        height=parse_float(body["height"], "height"),
        weight=parse_float(body["weight"], "weight"),
        systolic=parse_int(body["systolic"], "systolic"),
        diastolic=parse_int(body["diastolic"], "diastolic"),
        family_history=tuple(parse_family_history(body.get("familyHistory"))),
    )
