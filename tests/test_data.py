import json

import pytest

from huaweiwall.data import DataManager


@pytest.fixture
def project(tmp_path):
    (tmp_path / "data").mkdir()
    return tmp_path


def write(project, name, text):
    (project / "data" / name).write_text(text, encoding="utf-8")


def test_api_map_loaded_and_queried(project):
    write(project, "api.txt", json.dumps({"get_user": "http://localhost/users", "post": "http://localhost/p/"}))
    manager = DataManager(project)
    manager.load_data()
    assert manager.get_api("get_user") == "http://localhost/users"
    assert manager.get_api("post") == "http://localhost/p/"


def test_get_api_missing_key_returns_empty():
    manager = DataManager()
    assert manager.get_api("absent") == ""


def test_api_map_skips_values_without_string_form(project):
    write(project, "api.txt", json.dumps({"a": "x", "b": None, "c": {"d": 1}, "e": [1]}))
    manager = DataManager(project)
    manager.load_data()
    assert manager.api_map == {"a": "x"}


def test_api_map_converts_scalars(project):
    write(project, "api.txt", json.dumps({"n": 5, "flag": True}))
    manager = DataManager(project)
    manager.load_data()
    assert manager.get_api("n") == "5"
    assert manager.get_api("flag") == "true"


def test_api_map_not_an_object_is_ignored(project):
    write(project, "api.txt", json.dumps(["a", "b"]))
    manager = DataManager(project)
    manager.load_data()
    assert manager.api_map == {}


def test_window_settings(project):
    write(project, "common.txt", json.dumps({"width": 1920, "height": 1080}))
    manager = DataManager(project)
    manager.load_data()
    assert (manager.window_width, manager.window_height) == (1920, 1080)


def test_window_settings_missing_field_is_zero(project):
    write(project, "common.txt", json.dumps({"width": 800}))
    manager = DataManager(project)
    manager.load_data()
    assert (manager.window_width, manager.window_height) == (800, 0)


def test_sentences_escaped_newlines_replaced(project):
    write(project, "sentence.txt", "first\\nline\nsecond\\Nline\n\nthird\n")
    manager = DataManager(project)
    manager.load_data()
    assert manager.sentences == ["first\nline", "second\nline", "third"]


def test_missing_files_keep_defaults(project):
    manager = DataManager(project)
    manager.load_data()
    assert manager.api_map == {}
    assert (manager.window_width, manager.window_height) == (0, 0)
    assert manager.sentences == []


def test_invalid_json_is_ignored(project):
    write(project, "api.txt", "{not json")
    write(project, "common.txt", "")
    manager = DataManager(project)
    manager.load_data()
    assert manager.api_map == {}
    assert manager.window_width == 0


def test_reload_replaces_sentences(project):
    write(project, "sentence.txt", "a\nb\n")
    manager = DataManager(project)
    manager.load_data()
    write(project, "sentence.txt", "c\n")
    manager.load_data()
    assert manager.sentences == ["c"]