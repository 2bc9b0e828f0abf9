from fastapi import APIRouter, Depends, Query, status
from typing import List, Literal, Optional
from travelhub.models.hotel import HotelCreate, HotelUpdate, HotelFilter
from travelhub.services.hotel_service import HotelService, get_hotel_service
from travelhub.utils.crud_utils import api_response, list_response
from travelhub.utils.validators import check_hotel_bounds
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

# get all hotels
@router.get("")
def get_all_hotels(
    includeDestination: bool = Query(True, description="Attach the reduced destination view"),
    service: HotelService = Depends(get_hotel_service)
):
    return list_response(service.list_all(include_destination=includeDestination))

# filter and sort hotels
@router.get("/search/filter")
def filter_hotels(
    destinationId: Optional[str] = Query(None),
    minPrice: Optional[float] = Query(None, description="Lower bound on pricePerNight"),
    maxPrice: Optional[float] = Query(None, description="Upper bound on pricePerNight"),
    minRating: Optional[float] = Query(None),
    maxRating: Optional[float] = Query(None),
    amenities: Optional[List[str]] = Query(None, description="Matches hotels having any of these"),
    sortBy: str = Query("createdAt"),
    sortOrder: Literal["asc", "desc"] = Query("desc"),
    includeDestination: bool = Query(True),
    service: HotelService = Depends(get_hotel_service)
):
    filters = HotelFilter(
        destinationId=destinationId,
        minPrice=minPrice,
        maxPrice=maxPrice,
        minRating=minRating,
        maxRating=maxRating,
        amenities=amenities,
        sortBy=sortBy,
        sortOrder=sortOrder
    )
    hotels = service.filter(filters, include_destination=includeDestination)

    echoed = filters.model_dump(include={"destinationId", "minPrice", "maxPrice", "minRating", "maxRating", "amenities"})
    return list_response(hotels, filters=echoed)

# get hotels by destination id
@router.get("/destination/{destinationId}")
def get_hotels_byDestination(
    destinationId: str,
    includeDestination: bool = Query(True),
    service: HotelService = Depends(get_hotel_service)
):
    return list_response(service.list_by_destination(destinationId, include_destination=includeDestination))

# get hotel by id
@router.get("/{hotel_id}")
def get_hotel_byId(
    hotel_id: str,
    includeDestination: bool = Query(True),
    service: HotelService = Depends(get_hotel_service)
):
    return api_response(data=service.get(hotel_id, include_destination=includeDestination))

# add hotel
@router.post("", status_code=status.HTTP_201_CREATED)
def create_hotel(
    hotel: HotelCreate,
    service: HotelService = Depends(get_hotel_service)
):
    check_hotel_bounds(hotel.core())
    record = service.create(hotel)
    return api_response(data=record, message="Hotel created successfully")

# update hotel by id
@router.put("/{hotel_id}")
def update_hotel(
    hotel_id: str,
    hotel: HotelUpdate,
    service: HotelService = Depends(get_hotel_service)
):
    check_hotel_bounds(hotel.core(exclude_unset=True))
    record = service.update(hotel_id, hotel)
    return api_response(data=record, message="Hotel updated successfully")

# delete hotel
@router.delete("/{hotel_id}")
def delete_hotel(
    hotel_id: str,
    service: HotelService = Depends(get_hotel_service)
):
    service.delete(hotel_id)
    return api_response(message="Hotel deleted successfully")
