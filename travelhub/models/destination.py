from pydantic import BaseModel, Field
from typing import List, Optional
from travelhub.models.common import RecordPayload, Coordinates, Photo, LanguageMap

class DestinationCreate(RecordPayload):
    name: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    imageUrl: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    photos: List[Photo] = []
    language: Optional[LanguageMap] = None

class DestinationUpdate(RecordPayload):
    name: Optional[str] = Field(None, min_length=1)
    country: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    imageUrl: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    photos: Optional[List[Photo]] = None
    language: Optional[LanguageMap] = None

# reduced view attached to hotel reads
class DestinationSummary(BaseModel):
    id: str
    name: str
    country: str
    description: str
    imageUrl: Optional[str] = None
    language: Optional[LanguageMap] = None
