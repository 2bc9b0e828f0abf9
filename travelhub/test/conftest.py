"""Pytest configuration and shared fixtures."""

import os

# settings are read at import time; the store itself is replaced below
os.environ.setdefault("FIREBASE_KEY_PATH", "test-service-account.json")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FILE", os.devnull)

import pytest
from fastapi.testclient import TestClient

from main import app
from travelhub.database.connection import FirestoreStore, get_store
from travelhub.services.destination_service import DestinationService
from travelhub.services.hotel_service import HotelService
from travelhub.test.fake_firestore import FakeFirestoreClient



@pytest.fixture
def store():
    return FirestoreStore(FakeFirestoreClient())


@pytest.fixture
def client(store):
    """API client wired to the in-memory store. Lifespan is not entered."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def destination_service(store):
    return DestinationService(store)


@pytest.fixture
def hotel_service(store):
    return HotelService(store)


@pytest.fixture
def destination_payload():
    return {"name": "Rome", "country": "Italy", "description": "Eternal City"}


@pytest.fixture
def hotel_payload():
    def build(destination_id, **overrides):
        payload = {
            "name": "Hotel Artemide",
            "destinationId": destination_id,
            "description": "Boutique hotel on Via Nazionale",
            "address": "Via Nazionale 22, Rome",
            "stars": 4,
            "rating": 4.6,
            "priceFrom": 180,
            "pricePerNight": 210,
            "amenities": ["WiFi", "Spa"],
        }
        payload.update(overrides)
        return payload
    return build
