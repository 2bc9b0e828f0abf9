# Preview records shown when the API cannot be reached. Never sent to the backend.

SAMPLE_DESTINATIONS = [
    {
        "id": "sample-paris",
        "name": "Paris",
        "country": "France",
        "description": "The City of Light, famous for art, fashion, and culture",
        "imageUrl": "https://images.unsplash.com/photo-1502602898536-47ad22581b52",
        "language": {
            "en": {"name": "Paris", "description": "The City of Light, famous for art, fashion, and culture"},
            "ar": {"name": "باريس", "description": "مدينة النور، الشهيرة بالفن والأزياء والثقافة"},
        },
        "hotelsCount": 1,
    },
    {
        "id": "sample-tokyo",
        "name": "Tokyo",
        "country": "Japan",
        "description": "A bustling metropolis blending tradition and modernity",
        "language": {
            "en": {"name": "Tokyo", "description": "A bustling metropolis blending tradition and modernity"},
            "ar": {"name": "طوكيو", "description": "مدينة صاخبة تمزج بين التقاليد والحداثة"},
        },
        "hotelsCount": 1,
    },
]

SAMPLE_HOTELS = [
    {
        "id": "sample-ritz",
        "name": "Hotel Ritz Paris",
        "destinationId": "sample-paris",
        "description": "Luxury hotel in the heart of Paris",
        "address": "15 Place Vendôme, 75001 Paris",
        "stars": 5,
        "rating": 4.8,
        "priceFrom": 500,
        "pricePerNight": 500,
        "amenities": ["WiFi", "Spa", "Restaurant", "Room Service"],
        "roomTypes": [{"name": "Deluxe Room", "price": 500, "facilities": ["King Bed", "City View"]}],
        "nearbyAttractions": [{"name": "Louvre Museum", "distance": "1.2 km"}],
        "language": {
            "en": {"name": "Hotel Ritz Paris", "description": "Luxury hotel in the heart of Paris"},
            "ar": {"name": "فندق ريتز باريس", "description": "فندق فاخر في قلب باريس"},
        },
        "destination": {"id": "sample-paris", "name": "Paris", "country": "France", "description": "The City of Light"},
    },
    {
        "id": "sample-park-hyatt",
        "name": "Park Hyatt Tokyo",
        "destinationId": "sample-tokyo",
        "description": "Modern luxury with stunning city views",
        "address": "3-7-1-2 Nishi Shinjuku, Tokyo",
        "stars": 5,
        "rating": 4.7,
        "priceFrom": 400,
        "pricePerNight": 400,
        "amenities": ["WiFi", "Pool", "Gym", "Restaurant"],
        "roomTypes": [],
        "nearbyAttractions": [],
        "language": {
            "en": {"name": "Park Hyatt Tokyo", "description": "Modern luxury with stunning city views"},
            "ar": {"name": "بارك حياة طوكيو", "description": "فخامة عصرية مع إطلالات خلابة على المدينة"},
        },
        "destination": {"id": "sample-tokyo", "name": "Tokyo", "country": "Japan", "description": "A bustling metropolis"},
    },
]


def sample_hotels_for(destination_id: str):
    return [hotel for hotel in SAMPLE_HOTELS if hotel["destinationId"] == destination_id]
