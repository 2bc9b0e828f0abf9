from travelhub.config.settings import settings

API = settings.API_PREFIX


def test_create_rome_end_to_end(client):
    response = client.post(f"{API}/destinations", json={"name": "Rome", "country": "Italy", "description": "Eternal City"})

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Destination created successfully"
    assert body["data"]["language"]["en"] == {"name": "Rome", "description": "Eternal City"}
    assert body["data"]["language"]["ar"] == {"name": "Rome", "description": "Eternal City"}

    fetched = client.get(f"{API}/destinations/{body['data']['id']}").json()["data"]
    assert fetched["language"] == body["data"]["language"]
    assert fetched["hotelsCount"] == 0


def test_create_missing_fields_is_400(client):
    response = client.post(f"{API}/destinations", json={"name": "Rome"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Missing required fields: country, description"}


def test_create_rejects_bad_coordinates(client, destination_payload):
    response = client.post(f"{API}/destinations", json={**destination_payload, "coordinates": {"lat": 91, "lon": 12}})
    assert response.status_code == 400
    assert "coordinates.lat" in response.json()["message"]


def test_create_requires_both_coordinates(client, destination_payload):
    response = client.post(f"{API}/destinations", json={**destination_payload, "coordinates": {"lat": 10}})
    assert response.status_code == 400
    assert "coordinates.lon" in response.json()["message"]
    assert client.get(f"{API}/destinations").json()["count"] == 0


def test_create_rejects_long_caption(client, destination_payload):
    photos = [{"url": "https://img/1.jpg", "caption": "x" * 201}]
    response = client.post(f"{API}/destinations", json={**destination_payload, "photos": photos})
    assert response.status_code == 400


def test_dynamic_fields_round_trip(client, destination_payload):
    created = client.post(f"{API}/destinations", json={**destination_payload, "currency": "EUR", "visa": {"required": False}})
    destination_id = created.json()["data"]["id"]

    data = client.get(f"{API}/destinations/{destination_id}").json()["data"]
    assert data["currency"] == "EUR"
    assert data["visa"] == {"required": False}
    assert "extras" not in data


def test_list_returns_count(client, destination_payload):
    client.post(f"{API}/destinations", json=destination_payload)
    client.post(f"{API}/destinations", json={**destination_payload, "name": "Milan"})

    body = client.get(f"{API}/destinations").json()
    assert body["count"] == 2
    assert [d["name"] for d in body["data"]] == ["Milan", "Rome"]


def test_update_and_not_found(client, destination_payload):
    destination_id = client.post(f"{API}/destinations", json=destination_payload).json()["data"]["id"]

    response = client.put(f"{API}/destinations/{destination_id}", json={"description": "Caput Mundi"})
    assert response.status_code == 200
    assert response.json()["data"]["description"] == "Caput Mundi"
    assert response.json()["data"]["name"] == "Rome"

    missing = client.put(f"{API}/destinations/unknown", json={"description": "x"})
    assert missing.status_code == 404
    assert missing.json()["message"] == "Destination not found"


def test_delete_twice_gives_not_found(client, destination_payload):
    destination_id = client.post(f"{API}/destinations", json=destination_payload).json()["data"]["id"]

    assert client.delete(f"{API}/destinations/{destination_id}").json() == {
        "success": True, "message": "Destination deleted successfully"
    }
    assert client.delete(f"{API}/destinations/{destination_id}").status_code == 404
    assert client.get(f"{API}/destinations/{destination_id}").status_code == 404


def test_destination_hotels_endpoint(client, destination_payload, hotel_payload):
    destination_id = client.post(f"{API}/destinations", json=destination_payload).json()["data"]["id"]
    client.post(f"{API}/hotels", json=hotel_payload(destination_id))

    body = client.get(f"{API}/destinations/{destination_id}/hotels").json()
    assert body["count"] == 1
    assert body["data"][0]["destination"]["name"] == "Rome"

    assert client.get(f"{API}/destinations/{destination_id}").json()["data"]["hotelsCount"] == 1


def test_null_dynamic_fields_kept_on_create_ignored_on_update(client, destination_payload):
    created = client.post(f"{API}/destinations", json={**destination_payload, "note": None, "meta": {"a": None}})
    destination_id = created.json()["data"]["id"]

    data = client.get(f"{API}/destinations/{destination_id}").json()["data"]
    assert "note" in data and data["note"] is None
    assert data["meta"] == {"a": None}

    client.put(f"{API}/destinations/{destination_id}", json={"note": "ferry pass"})
    client.put(f"{API}/destinations/{destination_id}", json={"note": None})
    assert client.get(f"{API}/destinations/{destination_id}").json()["data"]["note"] == "ferry pass"
