from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Literal, Optional

Language = Literal["en", "ar"]

# keys the system owns, never accepted as extension fields
RESERVED_FIELDS = {"id", "createdAt", "updatedAt", "hotelsCount", "destination", "extras"}


class LanguageContent(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class LanguageMap(BaseModel):
    en: Optional[LanguageContent] = None
    ar: Optional[LanguageContent] = None


class Coordinates(BaseModel):
    lat: float = Field(..., ge=-90, le=90, description="Latitude must be between -90 and 90")
    lon: float = Field(..., ge=-180, le=180, description="Longitude must be between -180 and 180")


class Photo(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    url: str = Field(..., min_length=1)
    caption: Optional[str] = Field(None, max_length=200)


class RecordPayload(BaseModel):
    """
    Typed core of a record as it arrives over the wire.
    Unknown keys are collected by pydantic and handed to the extension sidecar.
    """
    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    def core(self, exclude_unset: bool = False) -> Dict[str, Any]:
        data = self.model_dump(exclude_unset=exclude_unset, exclude_none=True)
        return {key: value for key, value in data.items() if key in type(self).model_fields}

    def extras(self, exclude_none: bool = False) -> Dict[str, Any]:
        """Extension fields as sent. Partial updates pass `exclude_none` so null never overwrites."""
        return {
            key: value for key, value in (self.model_extra or {}).items()
            if key not in RESERVED_FIELDS and not (exclude_none and value is None)
        }


class ApiResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None
    error: Optional[str] = None
    count: Optional[int] = None
