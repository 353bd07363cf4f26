"""Unit tests for the JSON config store."""

import json
from unittest.mock import patch

from versync.services.config_store import ConfigStore


class TestReadConfig:
    """Tests for ConfigStore.read_config."""

    def test_init(self, tmp_path):
        store = ConfigStore(str(tmp_path / "version.json"))
        assert store.path == tmp_path / "version.json"

    def test_reads_object(self, write_config):
        path = write_config({"year": 2024, "update": "up1.0", "name": "product"})
        assert ConfigStore(path).read_config() == {
            "year": 2024,
            "update": "up1.0",
            "name": "product",
        }

    def test_missing_file(self, tmp_path):
        assert ConfigStore(tmp_path / "missing.json").read_config() is None

    def test_directory_path(self, tmp_path):
        assert ConfigStore(tmp_path).read_config() is None

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "version.json"
        path.write_text("{year: 2024", encoding="utf-8")
        assert ConfigStore(path).read_config() is None

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "version.json"
        path.write_bytes(b'{"year": "\xff"}')
        assert ConfigStore(path).read_config() is None

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "version.json"
        path.write_text("[2024, \"up1.0\"]", encoding="utf-8")
        assert ConfigStore(path).read_config() is None

    def test_logs_path(self, write_config, caplog):
        path = write_config({"year": 2024, "update": "up1.0"})
        with caplog.at_level("INFO", logger="versync"):
            ConfigStore(path).read_config()
        assert f"Reading config at {path}" in caplog.text


class TestWriteConfig:
    """Tests for ConfigStore.write_config."""

    def test_writes_indented_json(self, tmp_path):
        path = tmp_path / "version.json"
        assert ConfigStore(path).write_config({"year": 2024, "update": "up2.3"}) is True
        assert path.read_text(encoding="utf-8") == (
            '{\n  "year": 2024,\n  "update": "up2.3"\n}\n'
        )

    def test_preserves_key_order_and_unicode(self, tmp_path):
        path = tmp_path / "version.json"
        config = {"name": "Produkt ü", "year": 2024, "update": "up2.3"}
        ConfigStore(path).write_config(config)
        text = path.read_text(encoding="utf-8")
        assert "Produkt ü" in text
        assert list(json.loads(text)) == ["name", "year", "update"]

    def test_round_trips_through_read(self, tmp_path):
        store = ConfigStore(tmp_path / "version.json")
        config = {"year": 2024, "update": "up2.3", "extra": {"a": [1, None, True]}}
        store.write_config(config)
        assert store.read_config() == config

    def test_missing_directory_fails(self, tmp_path):
        store = ConfigStore(tmp_path / "missing" / "version.json")
        assert store.write_config({"year": 2024, "update": "up2.3"}) is False

    def test_os_error_fails(self, tmp_path):
        store = ConfigStore(tmp_path / "version.json")
        with patch("pathlib.Path.write_text", side_effect=PermissionError("denied")):
            assert store.write_config({"year": 2024, "update": "up2.3"}) is False

    def test_unserializable_value_fails(self, tmp_path):
        path = tmp_path / "version.json"
        assert ConfigStore(path).write_config({"year": 2024, "update": object()}) is False
        assert not path.exists()
