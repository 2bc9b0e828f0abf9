from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional
from travelhub.models.common import RecordPayload, Photo, LanguageMap
from travelhub.utils.validators import HOTEL_BOUNDS

STARS_MIN, STARS_MAX = HOTEL_BOUNDS["stars"]
RATING_MIN, RATING_MAX = HOTEL_BOUNDS["rating"]
PRICE_MIN = HOTEL_BOUNDS["priceFrom"][0]


def _clean_strings(values: Optional[List[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    return [value.strip() for value in values if value and value.strip()]


def _numbers_only(value):
    # JSON true and numeric strings are not coerced into bounded fields
    if isinstance(value, (bool, str)):
        raise ValueError("expected a number")
    return value


class RoomType(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    facilities: List[str] = []

    @field_validator("facilities")
    @classmethod
    def unique_facilities(cls, value: List[str]) -> List[str]:
        # keep first occurrence order
        return list(dict.fromkeys(_clean_strings(value)))


class NearbyAttraction(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    distance: str = Field(..., min_length=1)


class HotelCreate(RecordPayload):
    name: str = Field(..., min_length=1)
    destinationId: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    stars: int = Field(..., ge=STARS_MIN, le=STARS_MAX)
    rating: float = Field(..., ge=RATING_MIN, le=RATING_MAX)
    priceFrom: float = Field(..., ge=PRICE_MIN)
    pricePerNight: Optional[float] = Field(None, ge=PRICE_MIN)
    roomTypes: List[RoomType] = []
    nearbyAttractions: List[NearbyAttraction] = []
    amenities: List[str] = []
    imageUrl: Optional[str] = None
    photos: List[Photo] = []
    language: Optional[LanguageMap] = None

    @field_validator("amenities")
    @classmethod
    def clean_amenities(cls, value):
        return _clean_strings(value)

    @field_validator("stars", "rating", "priceFrom", "pricePerNight", mode="before")
    @classmethod
    def bounded_numbers(cls, value):
        return _numbers_only(value)


class HotelUpdate(RecordPayload):
    name: Optional[str] = Field(None, min_length=1)
    destinationId: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = Field(None, min_length=1)
    stars: Optional[int] = Field(None, ge=STARS_MIN, le=STARS_MAX)
    rating: Optional[float] = Field(None, ge=RATING_MIN, le=RATING_MAX)
    priceFrom: Optional[float] = Field(None, ge=PRICE_MIN)
    pricePerNight: Optional[float] = Field(None, ge=PRICE_MIN)
    roomTypes: Optional[List[RoomType]] = None
    nearbyAttractions: Optional[List[NearbyAttraction]] = None
    amenities: Optional[List[str]] = None
    imageUrl: Optional[str] = None
    photos: Optional[List[Photo]] = None
    language: Optional[LanguageMap] = None

    @field_validator("amenities")
    @classmethod
    def clean_amenities(cls, value):
        return _clean_strings(value)

    @field_validator("stars", "rating", "priceFrom", "pricePerNight", mode="before")
    @classmethod
    def bounded_numbers(cls, value):
        return _numbers_only(value)


class HotelFilter(BaseModel):
    destinationId: Optional[str] = None
    minPrice: Optional[float] = None
    maxPrice: Optional[float] = None
    minRating: Optional[float] = None
    maxRating: Optional[float] = None
    amenities: Optional[List[str]] = None
    sortBy: str = "createdAt"
    sortOrder: Literal["asc", "desc"] = "desc"
