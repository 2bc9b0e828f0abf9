import pytest

from travelhub_admin.utils.preferences import load_language, save_language


def test_missing_file_uses_default(tmp_path):
    assert load_language(str(tmp_path / "missing.json")) == "en"


def test_round_trip(tmp_path):
    path = str(tmp_path / "nested" / "preferences.json")
    save_language("ar", path)
    assert load_language(path) == "ar"


def test_unreadable_file_uses_default(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_language(str(path)) == "en"


def test_unknown_stored_language_uses_default(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text('{"language": "fr"}', encoding="utf-8")
    assert load_language(str(path)) == "en"


def test_unsupported_language_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        save_language("fr", str(tmp_path / "preferences.json"))
