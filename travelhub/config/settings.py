from pydantic import model_validator
from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # document store credentials, one of the two is required
    FIREBASE_JSON: Optional[str] = None
    FIREBASE_KEY_PATH: Optional[str] = None
    FIREBASE_PROJECT_ID: Optional[str] = None

    DESTINATION_COLLECTION: str = "destinations"
    HOTEL_COLLECTION: str = "hotels"

    ENVIRONMENT: str = "development"
    DEVELOPMENT_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8080", "http://localhost:8501"]
    PRODUCTION_ORIGINS: List[str] = []

    API_PREFIX: str = "/api"
    PORT: int = 5000
    LOG_FILE: str = "app.log"

    class Config:
        env_file = ".env"
        # the admin client reads its own keys from the same file
        extra = "ignore"

    @model_validator(mode="after")
    def check_store_credentials(self):
        if not self.FIREBASE_JSON and not self.FIREBASE_KEY_PATH:
            raise ValueError("FIREBASE_JSON or FIREBASE_KEY_PATH must be set to connect to Firestore")
        return self

    @property
    def allowed_origins(self) -> List[str]:
        if self.ENVIRONMENT == "production":
            return self.PRODUCTION_ORIGINS
        return self.DEVELOPMENT_ORIGINS

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

settings = Settings()
