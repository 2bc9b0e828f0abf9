from typing import Any, Dict, Literal
from pydantic import BaseModel

LANGUAGES = ("en", "ar")
LOCALIZED_FIELDS = ("name", "description")

LocalizedField = Literal["name", "description"]


def _as_dict(record) -> Dict[str, Any]:
    if isinstance(record, BaseModel):
        return record.model_dump()
    return record or {}


def resolve(record, language: str, field: LocalizedField) -> str:
    """
    Effective display text of `field` for `language`.

    The language entry wins only when it is present and non-empty; otherwise the
    root value is returned. There is no fallback from one language to the other,
    so an empty `ar.name` resolves to the root `name`, never to `en.name`.
    """
    data = _as_dict(record)
    content = (data.get("language") or {}).get(language) or {}
    value = content.get(field)
    if value:
        return value
    return data.get(field)


def localized_view(record, language: str) -> Dict[str, str]:
    return {field: resolve(record, language, field) for field in LOCALIZED_FIELDS}


def assemble(en_name: str, en_description: str, ar_name: str, ar_description: str) -> Dict[str, Dict[str, str]]:
    return {
        "en": {"name": en_name, "description": en_description},
        "ar": {"name": ar_name, "description": ar_description},
    }


def apply_language_defaults(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Bilingual defaults: fills every missing or empty language
    name/description with the record's root value. Mutates and returns `record`.
    """
    language = dict(record.get("language") or {})

    for lang in LANGUAGES:
        content = dict(language.get(lang) or {})
        for field in LOCALIZED_FIELDS:
            if not content.get(field):
                content[field] = record.get(field)
        language[lang] = content

    record["language"] = language
    return record
