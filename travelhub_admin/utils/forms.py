"""
Pre-submit checks and payload builders for the admin forms.

The checks mirror the API's validation so editors get feedback before a
round trip, and are stricter in two places: both language tabs must be
filled in, and a hotel's starting price must be above zero.
"""
from typing import Any, Dict, List, Optional
from travelhub.utils.localization import assemble
from travelhub.utils.validators import range_message

LANGUAGE_FIELDS = ["enName", "enDescription", "arName", "arDescription"]


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _language_errors(values: Dict[str, Any]) -> List[str]:
    errors = []
    if _blank(values.get("enName")) or _blank(values.get("enDescription")):
        errors.append("English name and description are required")
    if _blank(values.get("arName")) or _blank(values.get("arDescription")):
        errors.append("Arabic name and description are required")
    return errors


def validate_destination_form(values: Dict[str, Any]) -> List[str]:
    errors = []
    if any(_blank(values.get(field)) for field in ("name", "country", "description")):
        errors.append("Please fill in all required fields")
    errors.extend(_language_errors(values))
    return errors


def validate_hotel_form(values: Dict[str, Any]) -> List[str]:
    errors = []
    if any(_blank(values.get(field)) for field in ("name", "destinationId", "description", "address")):
        errors.append("Please fill in all required fields")

    price_from = values.get("priceFrom") or 0
    if price_from <= 0:
        errors.append("priceFrom must be greater than 0")

    rating = values.get("rating")
    if rating is None or rating < 0 or rating > 5:
        errors.append(range_message("rating"))

    stars = values.get("stars")
    if stars is None or stars < 1 or stars > 5:
        errors.append(range_message("stars"))

    price_per_night = values.get("pricePerNight")
    if price_per_night is not None and price_per_night < 0:
        errors.append(range_message("pricePerNight"))

    errors.extend(_language_errors(values))
    return errors


def bilingual_content(values: Dict[str, Any]) -> Dict[str, Dict[str, str]]:
    """Each blank tab field falls back to the form's root name/description"""
    name = (values.get("name") or "").strip()
    description = (values.get("description") or "").strip()
    return assemble(
        (values.get("enName") or "").strip() or name,
        (values.get("enDescription") or "").strip() or description,
        (values.get("arName") or "").strip() or name,
        (values.get("arDescription") or "").strip() or description,
    )


def language_form_values(record: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Initial tab values when editing an existing record"""
    record = record or {}
    language = record.get("language") or {}
    values = {}
    for lang in ("en", "ar"):
        content = language.get(lang) or {}
        values[f"{lang}Name"] = content.get("name") or record.get("name", "")
        values[f"{lang}Description"] = content.get("description") or record.get("description", "")
    return values


def build_destination_payload(values: Dict[str, Any]) -> Dict[str, Any]:
    payload = {
        "name": values["name"].strip(),
        "country": values["country"].strip(),
        "description": values["description"].strip(),
        "language": bilingual_content(values),
    }
    if not _blank(values.get("imageUrl")):
        payload["imageUrl"] = values["imageUrl"].strip()
    return payload


def build_hotel_payload(values: Dict[str, Any]) -> Dict[str, Any]:
    payload = {
        "name": values["name"].strip(),
        "destinationId": values["destinationId"],
        "description": values["description"].strip(),
        "address": values["address"].strip(),
        "stars": int(values["stars"]),
        "rating": float(values["rating"]),
        "priceFrom": float(values["priceFrom"]),
        # legacy price follows priceFrom when left empty
        "pricePerNight": float(values.get("pricePerNight") or values["priceFrom"]),
        "amenities": list(values.get("amenities") or []),
        "language": bilingual_content(values),
    }
    if not _blank(values.get("imageUrl")):
        payload["imageUrl"] = values["imageUrl"].strip()
    return payload


def add_amenity(amenities: List[str], amenity: str) -> List[str]:
    amenity = (amenity or "").strip()
    if not amenity or amenity in amenities:
        return list(amenities)
    return list(amenities) + [amenity]


def remove_amenity(amenities: List[str], amenity: str) -> List[str]:
    return [item for item in amenities if item != amenity]
