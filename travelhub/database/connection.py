import firebase_admin, json, logging
from firebase_admin import credentials, firestore
from fastapi import Request
from travelhub.config.settings import Settings

logger = logging.getLogger(__name__)

class FirestoreStore:
    """
    Explicit handle on the document store.
    Opened once at process start and closed on shutdown, then passed
    to the services instead of module-level collection globals.
    """

    def __init__(self, client, destination_collection: str = "destinations", hotel_collection: str = "hotels", firebase_app=None):
        self.client = client
        self.firebase_app = firebase_app
        self.destination_collection_name = destination_collection
        self.hotel_collection_name = hotel_collection

    @property
    def destinations(self):
        return self.client.collection(self.destination_collection_name)

    @property
    def hotels(self):
        return self.client.collection(self.hotel_collection_name)

    def close(self):
        close = getattr(self.client, "close", None)
        if close:
            close()
        if self.firebase_app is not None:
            firebase_admin.delete_app(self.firebase_app)
            self.firebase_app = None
        logger.info("Firestore connection closed")


def open_store(settings: Settings) -> FirestoreStore:

    if settings.FIREBASE_JSON:
        # Running on RAILWAY
        cred = credentials.Certificate(json.loads(settings.FIREBASE_JSON))
    else:
        # Running LOCALLY → load from file
        cred = credentials.Certificate(settings.FIREBASE_KEY_PATH)

    options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
    firebase_app = firebase_admin.initialize_app(cred, options, name="travelhub")
    client = firestore.client(app=firebase_app)

    logger.info(f"Firestore connected: project={firebase_app.project_id}")
    return FirestoreStore(
        client,
        destination_collection=settings.DESTINATION_COLLECTION,
        hotel_collection=settings.HOTEL_COLLECTION,
        firebase_app=firebase_app
    )


def get_store(request: Request) -> FirestoreStore:
    return request.app.state.store
