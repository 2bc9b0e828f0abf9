from fastapi import APIRouter, Depends, Query, status
from travelhub.models.destination import DestinationCreate, DestinationUpdate
from travelhub.services.destination_service import DestinationService, get_destination_service
from travelhub.services.hotel_service import HotelService, get_hotel_service
from travelhub.utils.crud_utils import api_response, list_response
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

# get all destinations
@router.get("")
def get_all_destinations(
    includeHotelsCount: bool = Query(True, description="Attach the hotelsCount aggregation"),
    service: DestinationService = Depends(get_destination_service)
):
    destinations = service.list_all(include_hotels_count=includeHotelsCount)
    return list_response(destinations)

# get destination by id
@router.get("/{destination_id}")
def get_destination_byId(
    destination_id: str,
    includeHotelsCount: bool = Query(True, description="Attach the hotelsCount aggregation"),
    service: DestinationService = Depends(get_destination_service)
):
    return api_response(data=service.get(destination_id, include_hotels_count=includeHotelsCount))

# add destination
@router.post("", status_code=status.HTTP_201_CREATED)
def create_destination(
    destination: DestinationCreate,
    service: DestinationService = Depends(get_destination_service)
):
    record = service.create(destination)
    return api_response(data=record, message="Destination created successfully")

# update destination by id
@router.put("/{destination_id}")
def update_destination(
    destination_id: str,
    destination: DestinationUpdate,
    service: DestinationService = Depends(get_destination_service)
):
    record = service.update(destination_id, destination)
    return api_response(data=record, message="Destination updated successfully")

# delete destination
@router.delete("/{destination_id}")
def delete_destination(
    destination_id: str,
    service: DestinationService = Depends(get_destination_service)
):
    service.delete(destination_id)
    return api_response(message="Destination deleted successfully")

# get hotels of a destination
@router.get("/{destination_id}/hotels")
def get_destination_hotels(
    destination_id: str,
    includeDestination: bool = Query(True, description="Attach the reduced destination view"),
    hotel_service: HotelService = Depends(get_hotel_service)
):
    hotels = hotel_service.list_by_destination(destination_id, include_destination=includeDestination)
    return list_response(hotels)
