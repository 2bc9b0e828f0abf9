import pytest
from travelhub.config.settings import settings

API = settings.API_PREFIX


@pytest.fixture
def destination_id(client, destination_payload):
    return client.post(f"{API}/destinations", json=destination_payload).json()["data"]["id"]


def test_create_hotel(client, destination_id, hotel_payload):
    response = client.post(f"{API}/hotels", json=hotel_payload(destination_id, parking="valet"))
    assert response.status_code == 201

    data = response.json()["data"]
    assert data["parking"] == "valet"
    assert data["language"]["en"]["name"] == "Hotel Artemide"


def test_unknown_destination_is_validation_error(client, hotel_payload):
    response = client.post(f"{API}/hotels", json=hotel_payload("does-not-exist"))

    assert response.status_code == 400
    assert response.json()["message"] == "Destination not found"
    assert client.get(f"{API}/hotels").json()["count"] == 0


@pytest.mark.parametrize("field, value, message", [
    ("rating", 5.1, "rating must be between 0 and 5"),
    ("stars", 6, "stars must be between 1 and 5"),
    ("priceFrom", -5, "priceFrom must be greater than or equal to 0"),
    ("stars", True, "stars must be between 1 and 5"),
    ("stars", "4", "stars must be between 1 and 5"),
    ("rating", "4.5", "rating must be between 0 and 5"),
])
def test_out_of_range_rejected(client, destination_id, hotel_payload, field, value, message):
    response = client.post(f"{API}/hotels", json=hotel_payload(destination_id, **{field: value}))
    assert response.status_code == 400
    assert response.json()["message"] == message


def test_lowest_valid_values_accepted(client, destination_id, hotel_payload):
    response = client.post(f"{API}/hotels", json=hotel_payload(destination_id, rating=0, stars=1))
    assert response.status_code == 201


def test_missing_fields_listed(client, destination_id):
    response = client.post(f"{API}/hotels", json={"name": "Bare", "destinationId": destination_id})
    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields: description, address, stars, rating, priceFrom"


def test_update_keeps_absent_and_null_fields(client, destination_id, hotel_payload):
    hotel_id = client.post(f"{API}/hotels", json=hotel_payload(destination_id)).json()["data"]["id"]

    response = client.put(f"{API}/hotels/{hotel_id}", json={"pricePerNight": None, "stars": 5})
    assert response.status_code == 200
    assert response.json()["data"]["pricePerNight"] == 210
    assert response.json()["data"]["stars"] == 5


def test_update_out_of_range(client, destination_id, hotel_payload):
    hotel_id = client.post(f"{API}/hotels", json=hotel_payload(destination_id)).json()["data"]["id"]
    response = client.put(f"{API}/hotels/{hotel_id}", json={"rating": 7})
    assert response.status_code == 400
    assert response.json()["message"] == "rating must be between 0 and 5"


def test_update_rejects_numeric_strings(client, destination_id, hotel_payload):
    hotel_id = client.post(f"{API}/hotels", json=hotel_payload(destination_id)).json()["data"]["id"]
    response = client.put(f"{API}/hotels/{hotel_id}", json={"stars": "5"})
    assert response.status_code == 400
    assert response.json()["message"] == "stars must be between 1 and 5"
    assert client.get(f"{API}/hotels/{hotel_id}").json()["data"]["stars"] == 4


def test_deleting_destination_leaves_hotel_readable(client, destination_id, hotel_payload):
    hotel_id = client.post(f"{API}/hotels", json=hotel_payload(destination_id)).json()["data"]["id"]

    assert client.delete(f"{API}/destinations/{destination_id}").status_code == 200

    response = client.get(f"{API}/hotels/{hotel_id}")
    assert response.status_code == 200
    assert response.json()["data"].get("destination") is None
    assert response.json()["data"]["destinationId"] == destination_id


def test_filter_price_range_and_amenities(client, destination_id, hotel_payload):
    for name, price, amenities in [
        ("Budget", 80, ["WiFi"]),
        ("Classic", 100, ["Parking"]),
        ("Grand", 300, ["Pool", "Spa"]),
        ("Palace", 450, ["WiFi", "Pool"]),
    ]:
        client.post(f"{API}/hotels", json=hotel_payload(destination_id, name=name, pricePerNight=price, amenities=amenities))

    priced = client.get(f"{API}/hotels/search/filter", params={"minPrice": 100, "maxPrice": 300, "sortBy": "pricePerNight", "sortOrder": "asc"})
    assert [h["name"] for h in priced.json()["data"]] == ["Classic", "Grand"]
    assert priced.json()["count"] == 2

    by_amenity = client.get(f"{API}/hotels/search/filter", params={"amenities": ["WiFi", "Pool"], "sortBy": "name", "sortOrder": "asc"})
    assert [h["name"] for h in by_amenity.json()["data"]] == ["Budget", "Grand", "Palace"]


def test_filter_rejects_bad_sort_order(client):
    response = client.get(f"{API}/hotels/search/filter", params={"sortOrder": "sideways"})
    assert response.status_code == 400


def test_hotels_by_destination_route(client, destination_id, hotel_payload):
    client.post(f"{API}/hotels", json=hotel_payload(destination_id))
    body = client.get(f"{API}/hotels/destination/{destination_id}").json()
    assert body["success"] is True
    assert body["count"] == 1

    empty = client.get(f"{API}/hotels/destination/elsewhere").json()
    assert empty["count"] == 0
    assert empty["data"] == []


def test_delete_hotel(client, destination_id, hotel_payload):
    hotel_id = client.post(f"{API}/hotels", json=hotel_payload(destination_id)).json()["data"]["id"]
    assert client.delete(f"{API}/hotels/{hotel_id}").status_code == 200
    assert client.get(f"{API}/hotels/{hotel_id}").status_code == 404
    assert client.delete(f"{API}/hotels/{hotel_id}").json()["message"] == "Hotel not found"
