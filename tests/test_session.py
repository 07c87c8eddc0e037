"""Tests for server session startup."""
import json
import tempfile
from pathlib import Path
from classmcp.core.config import Settings
from classmcp.core.session import ServerSession


def _settings(project_dir: Path, **overrides) -> Settings:
    return Settings(project_dir=project_dir, _env_file=None, **overrides)


def test_defaults_to_tailwind():
    with tempfile.TemporaryDirectory() as temp_dir:
        session = ServerSession.start(_settings(Path(temp_dir)))

        assert session.current_framework == "tailwind"
        assert session.config_path is None
        assert session.registry.get_custom_patterns() == []


def test_detects_framework_from_project_files():
    with tempfile.TemporaryDirectory() as temp_dir:
        (Path(temp_dir) / "uno.config.ts").write_text("", encoding="utf-8")
        session = ServerSession.start(_settings(Path(temp_dir)))
        assert session.current_framework == "unocss"


def test_detection_can_be_disabled():
    with tempfile.TemporaryDirectory() as temp_dir:
        (Path(temp_dir) / "uno.config.ts").write_text("", encoding="utf-8")
        session = ServerSession.start(_settings(Path(temp_dir), detect_framework=False))
        assert session.current_framework == "tailwind"


def test_config_is_applied_before_start_returns():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        (temp_path / "uno.config.ts").write_text("", encoding="utf-8")
        (temp_path / ".classmcp.json").write_text(json.dumps({
            "defaultFramework": "bootstrap",
            "overrideBuiltins": True,
            "customPatterns": [{"id": "btn-primary", "classes": "btn btn-brand"}],
        }), encoding="utf-8")

        session = ServerSession.start(_settings(temp_path))

        assert session.current_framework == "bootstrap"
        assert session.config_path == str(temp_path / ".classmcp.json")
        assert session.registry.get_pattern("bootstrap", "btn-primary").classes == "btn btn-brand"


def test_settings_override_wins_over_config():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        (temp_path / ".classmcp.json").write_text(json.dumps({"defaultFramework": "bootstrap"}), encoding="utf-8")

        session = ServerSession.start(_settings(temp_path, default_framework="tachyons"))

        assert session.current_framework == "tachyons"


def test_invalid_config_keeps_defaults():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        (temp_path / ".classmcp.json").write_text(json.dumps({
            "defaultFramework": "bootstrap",
            "customPatterns": [{"id": "", "classes": "p-1"}],
        }), encoding="utf-8")

        session = ServerSession.start(_settings(temp_path))

        assert session.current_framework == "tailwind"
        assert session.registry.get_custom_patterns() == []
        assert session.config_path == str(temp_path / ".classmcp.json")


def test_set_framework():
    session = ServerSession(project_dir=Path("."))
    assert session.set_framework("tachyons")
    assert session.display_name == "Tachyons"
    assert not session.set_framework("foundation")
    assert session.current_framework == "tachyons"
