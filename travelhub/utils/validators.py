from typing import Dict, Any, List, Optional, Tuple
from fastapi import HTTPException

# field -> (min, max); None means unbounded
HOTEL_BOUNDS: Dict[str, Tuple[Optional[float], Optional[float]]] = {
    "stars": (1, 5),
    "rating": (0, 5),
    "priceFrom": (0, None),
    "pricePerNight": (0, None),
}

DESTINATION_REQUIRED = ["name", "country", "description"]
HOTEL_REQUIRED = ["name", "destinationId", "description", "address", "stars", "rating", "priceFrom"]


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def range_message(field: str) -> str:
    """Human readable range for a bounded field, shared by every validation path"""
    low, high = HOTEL_BOUNDS[field]
    if high is None:
        return f"{field} must be greater than or equal to {_fmt(low)}"
    return f"{field} must be between {_fmt(low)} and {_fmt(high)}"


def missing_fields_message(fields: List[str]) -> str:
    return f"Missing required fields: {', '.join(fields)}"


def find_missing_fields(data: Dict[str, Any], required: List[str]) -> List[str]:
    missing = []
    for field in required:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    return missing


def check_required(data: Dict[str, Any], required: List[str]):
    missing = find_missing_fields(data, required)
    if missing:
        raise HTTPException(status_code=400, detail=missing_fields_message(missing))


def check_hotel_bounds(data: Dict[str, Any]):
    """
    Rejects any bounded hotel field that is present and out of range.
    Absent fields are skipped so the same check serves create and partial update.
    """
    for field, (low, high) in HOTEL_BOUNDS.items():
        value = data.get(field)
        if value is None:
            continue

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise HTTPException(status_code=400, detail=range_message(field))
        if field == "stars" and not float(value).is_integer():
            raise HTTPException(status_code=400, detail=range_message(field))
        if low is not None and value < low:
            raise HTTPException(status_code=400, detail=range_message(field))
        if high is not None and value > high:
            raise HTTPException(status_code=400, detail=range_message(field))


def describe_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """
    Turns pydantic error entries into the same messages the explicit checks produce.
    Missing fields win over bounds errors, bounds errors over everything else.
    """
    missing = []
    bounded = []
    other = []

    for err in errors:
        loc = [part for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        field = str(loc[-1]) if loc else ""
        err_type = err.get("type", "")

        if len(loc) == 1 and (err_type == "missing" or err_type == "string_too_short"):
            missing.append(field)
        elif len(loc) == 1 and field in HOTEL_BOUNDS:
            bounded.append(field)
        else:
            where = ".".join(str(part) for part in loc) or "request"
            other.append(f"{where}: {err.get('msg', 'invalid value')}")

    if missing:
        return missing_fields_message(missing)
    if bounded:
        return range_message(bounded[0])
    return "; ".join(other) or "Invalid request"
