import json, logging, os
from travelhub_admin.config import PREFERENCES_FILE, DEFAULT_LANGUAGE, LANGUAGE_LABELS

logger = logging.getLogger(__name__)


def load_language(path: str = PREFERENCES_FILE) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            language = json.load(f).get("language")
    except FileNotFoundError:
        return DEFAULT_LANGUAGE
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable preferences file {path}: {e}")
        return DEFAULT_LANGUAGE

    return language if language in LANGUAGE_LABELS else DEFAULT_LANGUAGE


def save_language(language: str, path: str = PREFERENCES_FILE):
    if language not in LANGUAGE_LABELS:
        raise ValueError(f"Unsupported language: {language}")

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"language": language}, f)
