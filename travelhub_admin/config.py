import os
from dotenv import load_dotenv

load_dotenv()

# Backend API configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))  # seconds

# Active language preference, read once at startup
PREFERENCES_FILE = os.getenv("PREFERENCES_FILE", os.path.join(os.path.expanduser("~"), ".travelhub", "preferences.json"))
DEFAULT_LANGUAGE = "en"
LANGUAGE_LABELS = {"en": "English", "ar": "العربية"}

# Streamlit configuration
PAGE_TITLE = "TravelHub Admin"
PAGE_ICON = "✈️"
LAYOUT = "wide"
