"""Tests for YAML encoder profiles."""

import pytest
from loguru import logger

from src.tagmarshal import Encoder
from src.tagmarshal.profiles import ProfileRegistry
from tests.test_utils import create_simple


@pytest.fixture
def profiles_file(tmp_path):
    path = tmp_path / "profiles.yaml"
    path.write_text(
        """
profiles:
  - name: public
    target_tag: custom
    ignore_value: "-"
  - name: api
    target_tag: json
  - name: broken
    ignore_value: "-"
"""
    )
    return path


@pytest.fixture
def captured_logs():
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg), format="{level}|{message}")
    try:
        yield messages
    finally:
        logger.remove(handler_id)


class TestProfileLoading:
    def test_profiles_loaded_in_file_order(self, profiles_file):
        registry = ProfileRegistry(str(profiles_file))

        assert registry.names() == ["public", "api"]

    def test_profile_builds_encoder(self, profiles_file):
        encoder = ProfileRegistry(str(profiles_file)).get("public")

        assert encoder == Encoder("custom", "-")
        assert encoder.marshal(create_simple("haze")) == b'{"field_4":"haze"}\n'

    def test_ignore_value_defaults_from_config(self, profiles_file, monkeypatch):
        from src.tagmarshal import profiles as profiles_module

        monkeypatch.setattr(profiles_module.Config, "IGNORE_VALUE", "skip")

        assert ProfileRegistry(str(profiles_file)).get("api").ignore_value == "skip"

    def test_invalid_entry_is_skipped_and_logged(self, profiles_file, captured_logs):
        registry = ProfileRegistry(str(profiles_file))

        assert "broken" not in registry.names()
        assert any(m.startswith("ERROR|Invalid profile") for m in captured_logs)

    def test_non_string_name_is_skipped(self, tmp_path, captured_logs):
        path = tmp_path / "profiles.yaml"
        path.write_text(
            "profiles:\n"
            "  - {name: [a, b], target_tag: custom}\n"
            "  - {name: ok, target_tag: json}\n"
        )

        registry = ProfileRegistry(str(path))

        assert registry.names() == ["ok"]
        assert any("name must be a string" in m for m in captured_logs)

    def test_unknown_profile(self, profiles_file):
        with pytest.raises(KeyError, match="Unknown profile: nope"):
            ProfileRegistry(str(profiles_file)).get("nope")

    def test_reload_picks_up_changes(self, profiles_file):
        registry = ProfileRegistry(str(profiles_file))
        profiles_file.write_text("profiles:\n  - name: only\n    target_tag: db\n")

        registry.reload()

        assert registry.names() == ["only"]
        assert registry.get("only").target_tag == "db"


class TestFailSafeLoading:
    def test_missing_file(self, tmp_path):
        registry = ProfileRegistry(str(tmp_path / "absent.yaml"))

        assert registry.names() == []

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ProfileRegistry(str(path)).names() == []

    def test_invalid_yaml(self, tmp_path, captured_logs):
        path = tmp_path / "bad.yaml"
        path.write_text("profiles: [unclosed\n")

        registry = ProfileRegistry(str(path))

        assert registry.names() == []
        assert any("Failed to parse profiles file" in m for m in captured_logs)

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        assert ProfileRegistry(str(path)).names() == []

    def test_default_path_from_config(self, tmp_path, monkeypatch):
        from src.tagmarshal import profiles as profiles_module

        path = tmp_path / "p.yaml"
        path.write_text("profiles:\n  - name: x\n    target_tag: t\n")
        monkeypatch.setattr(profiles_module.Config, "PROFILES_PATH", str(path))

        registry = ProfileRegistry()

        assert registry.names() == ["x"]
