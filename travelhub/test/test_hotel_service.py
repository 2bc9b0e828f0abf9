import pytest
from fastapi import HTTPException

from travelhub.models.destination import DestinationCreate
from travelhub.models.hotel import HotelCreate, HotelUpdate, HotelFilter


@pytest.fixture
def rome(destination_service):
    return destination_service.create(DestinationCreate(name="Rome", country="Italy", description="Eternal City"))


def test_create_with_unknown_destination_is_rejected(hotel_service, hotel_payload, store):
    with pytest.raises(HTTPException) as err:
        hotel_service.create(HotelCreate(**hotel_payload("missing-destination")))

    assert err.value.status_code == 400
    assert err.value.detail == "Destination not found"
    assert list(store.hotels.stream()) == []


def test_create_applies_defaults_and_cleans_lists(hotel_service, hotel_payload, rome):
    hotel = hotel_service.create(HotelCreate(**hotel_payload(
        rome["id"],
        amenities=[" WiFi ", "", "Pool"],
        roomTypes=[{"name": "Double", "price": 200, "facilities": ["TV", "TV", "Minibar"]}],
        nearbyAttractions=[{"name": "Colosseum", "distance": "1.2 km"}],
    )))

    assert hotel["amenities"] == ["WiFi", "Pool"]
    assert hotel["roomTypes"][0]["facilities"] == ["TV", "Minibar"]
    assert hotel["language"]["ar"] == {"name": "Hotel Artemide", "description": "Boutique hotel on Via Nazionale"}


def test_get_attaches_reduced_destination_view(hotel_service, hotel_payload, rome):
    hotel = hotel_service.create(HotelCreate(**hotel_payload(rome["id"])))
    fetched = hotel_service.get(hotel["id"])

    assert fetched["destinationId"] == rome["id"]
    assert fetched["destination"]["name"] == "Rome"
    assert fetched["destination"]["country"] == "Italy"
    assert set(fetched["destination"]) <= {"id", "name", "country", "description", "imageUrl", "language"}
    assert "destination" not in hotel_service.get(hotel["id"], include_destination=False)


def test_orphaned_hotel_still_reads(hotel_service, destination_service, hotel_payload, rome):
    hotel = hotel_service.create(HotelCreate(**hotel_payload(rome["id"])))
    destination_service.delete(rome["id"])

    fetched = hotel_service.get(hotel["id"])
    assert fetched["destination"] is None
    assert hotel_service.list_all()[0]["destination"] is None


def test_update_keeps_unprovided_price(hotel_service, hotel_payload, rome):
    hotel = hotel_service.create(HotelCreate(**hotel_payload(rome["id"])))
    updated = hotel_service.update(hotel["id"], HotelUpdate(pricePerNight=None, rating=4.9))

    assert updated["pricePerNight"] == 210
    assert updated["rating"] == 4.9


def test_update_rejects_unknown_destination(hotel_service, hotel_payload, rome):
    hotel = hotel_service.create(HotelCreate(**hotel_payload(rome["id"])))
    with pytest.raises(HTTPException) as err:
        hotel_service.update(hotel["id"], HotelUpdate(destinationId="gone"))
    assert err.value.status_code == 400


def test_update_same_destination_is_not_rechecked(hotel_service, destination_service, hotel_payload, rome):
    hotel = hotel_service.create(HotelCreate(**hotel_payload(rome["id"])))
    destination_service.delete(rome["id"])

    updated = hotel_service.update(hotel["id"], HotelUpdate(destinationId=rome["id"], name="Renamed"))
    assert updated["name"] == "Renamed"


def test_update_missing_hotel_is_not_found(hotel_service):
    with pytest.raises(HTTPException) as err:
        hotel_service.update("nope", HotelUpdate(name="x"))
    assert err.value.status_code == 404
    assert err.value.detail == "Hotel not found"


def test_filter_by_destination_and_price(hotel_service, destination_service, hotel_payload, rome):
    cairo = destination_service.create(DestinationCreate(name="Cairo", country="Egypt", description="Nile"))
    cheap = hotel_service.create(HotelCreate(**hotel_payload(rome["id"], name="Cheap", pricePerNight=90)))
    mid = hotel_service.create(HotelCreate(**hotel_payload(rome["id"], name="Mid", pricePerNight=150)))
    hotel_service.create(HotelCreate(**hotel_payload(cairo["id"], name="Cairo Mid", pricePerNight=150)))

    found = hotel_service.filter(HotelFilter(destinationId=rome["id"], minPrice=100))
    assert [h["id"] for h in found] == [mid["id"]]

    by_price = hotel_service.filter(HotelFilter(destinationId=rome["id"], sortBy="pricePerNight", sortOrder="asc"))
    assert [h["id"] for h in by_price] == [cheap["id"], mid["id"]]


def test_list_by_destination_newest_first(hotel_service, hotel_payload, rome):
    first = hotel_service.create(HotelCreate(**hotel_payload(rome["id"], name="First")))
    second = hotel_service.create(HotelCreate(**hotel_payload(rome["id"], name="Second")))
    assert [h["id"] for h in hotel_service.list_by_destination(rome["id"])] == [second["id"], first["id"]]
