"""Tests for configuration persistence and the config endpoints"""

import json

from services.config_manager import DEFAULT_CONFIG, ConfigManager


def test_defaults_without_config_file(isolated_config):
    config = ConfigManager.get_instance().get_config()

    assert config == DEFAULT_CONFIG
    assert ConfigManager.get_instance().config_file == isolated_config / "config.json"


def test_singleton():
    assert ConfigManager.get_instance() is ConfigManager.get_instance()


def test_save_and_reload(isolated_config):
    manager = ConfigManager.get_instance()
    manager.save_config({"report": {"title": "Changes"}})

    stored = json.loads((isolated_config / "config.json").read_text(encoding="utf-8"))
    assert stored["report"]["title"] == "Changes"

    ConfigManager.reset_instance()
    config = ConfigManager.get_instance().get_config()
    assert config["report"]["title"] == "Changes"
    # Untouched keys keep their defaults
    assert config["report"]["downloadFilename"] == "diff_result.html"


def test_partial_file_is_merged_with_defaults(isolated_config):
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text(
        json.dumps({"limits": {"maxTableCells": 99}}), encoding="utf-8"
    )

    config = ConfigManager.get_instance().get_config()
    assert config["limits"]["maxTableCells"] == 99
    assert config["report"] == DEFAULT_CONFIG["report"]


def test_corrupt_file_falls_back_to_defaults(isolated_config):
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text("{not json", encoding="utf-8")

    assert ConfigManager.get_instance().get_config() == DEFAULT_CONFIG


def test_get_config_returns_a_copy():
    manager = ConfigManager.get_instance()
    config = manager.get_config()
    config["report"]["title"] = "mutated"

    assert manager.get_config()["report"]["title"] == DEFAULT_CONFIG["report"]["title"]


def test_get_config_endpoint(client):
    r = client.get("/api/config")
    assert r.status_code == 200
    data = r.json()
    assert data["report"]["downloadFilename"] == "diff_result.html"
    assert data["limits"]["maxTableCells"] == DEFAULT_CONFIG["limits"]["maxTableCells"]


def test_update_config_endpoint(client):
    r = client.put("/api/config", json={"report": {"title": "Nightly"}})
    assert r.status_code == 200
    assert r.json()["status"] == "success"

    data = client.get("/api/config").json()
    assert data["report"]["title"] == "Nightly"
    assert data["report"]["timestampFormat"] == DEFAULT_CONFIG["report"]["timestampFormat"]


def test_update_config_rejects_bad_filename(client):
    r = client.put("/api/config", json={"report": {"downloadFilename": "../evil.html"}})
    assert r.status_code == 400

    r = client.put("/api/config", json={"report": {"downloadFilename": "  "}})
    assert r.status_code == 400


def test_update_config_rejects_non_integer_limit(client):
    r = client.put("/api/config", json={"limits": {"maxTableCells": "lots"}})
    assert r.status_code == 400


def test_update_config_rejects_non_ascii_filename(client):
    r = client.put("/api/config", json={"report": {"downloadFilename": "差分.html"}})
    assert r.status_code == 400

    r = client.put("/api/config", json={"report": {"downloadFilename": "diff\r\nX-Injected: 1.html"}})
    assert r.status_code == 400

    # Rejected names never reach the report endpoint
    r = client.post("/api/diff/report", json={"left_text": "a", "right_text": "b"})
    assert r.status_code == 200
    assert r.headers["content-disposition"] == 'attachment; filename="diff_result.html"'


def test_hand_edited_non_ascii_filename_is_encoded(client, isolated_config):
    (isolated_config / "config.json").write_text(
        json.dumps({"report": {"downloadFilename": "差分.html"}}), encoding="utf-8"
    )

    r = client.post("/api/diff/report", json={"left_text": "a", "right_text": "b"})
    assert r.status_code == 200
    assert r.headers["content-disposition"] == (
        "attachment; filename=\"diff_result.html\"; filename*=UTF-8''%E5%B7%AE%E5%88%86.html"
    )


def test_stored_values_of_wrong_type_keep_defaults(isolated_config):
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text(
        json.dumps({"limits": {"maxTableCells": "10"}, "report": "x", "server": {"port": 9000}}),
        encoding="utf-8",
    )

    config = ConfigManager.get_instance().get_config()
    assert config["limits"] == DEFAULT_CONFIG["limits"]
    assert config["report"] == DEFAULT_CONFIG["report"]
    assert config["server"]["port"] == 9000


def test_wrong_type_limits_section_does_not_break_comparisons(client, isolated_config):
    (isolated_config / "config.json").write_text(json.dumps({"limits": "x"}), encoding="utf-8")

    r = client.post("/api/diff/compare", json={"left_text": "a", "right_text": "b"})
    assert r.status_code == 200
