"""Tests for finding and loading project config files."""
import json
import tempfile
from pathlib import Path
from classmcp.userconfig.loader import DEFAULT_CONFIG, load_config, reload_config


def _write_json(path: Path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


BRAND_CONFIG = {"customPatterns": [{"id": "brand-btn", "classes": "px-4 py-2"}]}


class TestLoadConfig:
    """Test the config search order."""

    def test_nothing_found(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            result = load_config(Path(temp_dir))

            assert not result.found
            assert result.config_path is None
            assert result.config == DEFAULT_CONFIG
            assert result.config.default_framework == "tailwind"
            assert result.validation.valid

    def test_dot_file_comes_first(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            _write_json(temp_path / ".classmcp.json", BRAND_CONFIG)
            _write_json(temp_path / "classmcp.config.json", {"defaultFramework": "bootstrap"})

            result = load_config(temp_path)

            assert result.found
            assert result.config_path == str(temp_path / ".classmcp.json")
            assert result.config.custom_patterns[0].id == "brand-btn"

    def test_second_file_name(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            _write_json(temp_path / "classmcp.config.json", {"defaultFramework": "bootstrap"})

            result = load_config(temp_path)

            assert result.config_path == str(temp_path / "classmcp.config.json")
            assert result.config.default_framework == "bootstrap"

    def test_package_json_section(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            _write_json(temp_path / "package.json", {"name": "app", "classmcp": BRAND_CONFIG})

            result = load_config(temp_path)

            assert result.found
            assert result.config_path == f"{temp_path / 'package.json'}#classmcp"
            assert len(result.config.custom_patterns) == 1

    def test_package_json_without_section(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            _write_json(temp_path / "package.json", {"name": "app"})

            assert not load_config(temp_path).found

    def test_malformed_json_is_skipped(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            (temp_path / ".classmcp.json").write_text("{not json", encoding="utf-8")
            _write_json(temp_path / "classmcp.config.json", BRAND_CONFIG)

            result = load_config(temp_path)

            assert result.config_path == str(temp_path / "classmcp.config.json")

    def test_invalid_config_falls_back_to_default(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            _write_json(temp_path / ".classmcp.json", {"customPatterns": [{"id": "9lives", "classes": "p-1"}]})

            result = load_config(temp_path)

            assert result.found
            assert not result.validation.valid
            assert result.config == DEFAULT_CONFIG
            assert result.validation.errors[0].path == "customPatterns[0].id"

    def test_empty_object_is_a_valid_config(self):
        """An empty config file still wins over package.json."""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            _write_json(temp_path / ".classmcp.json", {})
            _write_json(temp_path / "package.json", {"name": "app", "classmcp": BRAND_CONFIG})

            result = load_config(temp_path)

            assert result.found
            assert result.config_path == str(temp_path / ".classmcp.json")
            assert result.validation.valid
            assert result.config.custom_patterns == []

    def test_empty_array_is_reported_invalid(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            _write_json(temp_path / ".classmcp.json", [])
            _write_json(temp_path / "classmcp.config.json", BRAND_CONFIG)

            result = load_config(temp_path)

            assert result.found
            assert result.config_path == str(temp_path / ".classmcp.json")
            assert not result.validation.valid
            assert result.validation.errors[0].message == "config must be an object"
            assert result.config == DEFAULT_CONFIG


class TestReloadConfig:
    """Test re-reading a previously loaded config."""

    def test_reload_picks_up_changes(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            config_file = temp_path / ".classmcp.json"
            _write_json(config_file, BRAND_CONFIG)
            first = load_config(temp_path)

            _write_json(config_file, {"customPatterns": [
                {"id": "brand-btn", "classes": "px-4 py-2"},
                {"id": "brand-card", "classes": "p-6"},
            ]})
            second = reload_config(first.config_path, temp_path)

            assert second.found
            assert [p.id for p in second.config.custom_patterns] == ["brand-btn", "brand-card"]

    def test_reload_after_file_removed(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            config_file = temp_path / ".classmcp.json"
            _write_json(config_file, BRAND_CONFIG)
            first = load_config(temp_path)

            config_file.unlink()
            result = reload_config(first.config_path, temp_path)

            assert not result.found
            assert result.config == DEFAULT_CONFIG

    def test_reload_without_previous_path_searches(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            _write_json(temp_path / "classmcp.config.json", BRAND_CONFIG)

            result = reload_config(None, temp_path)

            assert result.found
            assert result.config_path == str(temp_path / "classmcp.config.json")

    def test_reload_package_json_section(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            _write_json(temp_path / "package.json", {"classmcp": BRAND_CONFIG})
            first = load_config(temp_path)

            _write_json(temp_path / "package.json", {"classmcp": {"defaultFramework": "tachyons"}})
            result = reload_config(first.config_path, temp_path)

            assert result.found
            assert result.config.default_framework == "tachyons"
            assert result.config_path == first.config_path
