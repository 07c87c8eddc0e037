"""Tests for user config validation."""
from classmcp.userconfig.schema import is_valid_user_config, validate_user_config


def _single_error(data):
    validation = validate_user_config(data)
    assert not validation.valid
    assert validation.config is None
    assert len(validation.errors) == 1, validation.errors
    return validation.errors[0]


class TestValidConfigs:
    """Test configs that should pass."""

    def test_minimal_config(self):
        validation = validate_user_config({"customPatterns": [{"id": "brand-btn", "classes": "px-4 py-2"}]})
        assert validation.valid
        assert validation.errors == []
        assert validation.config.custom_patterns[0].id == "brand-btn"
        assert validation.config.override_builtins is False
        assert validation.config.default_framework is None

    def test_empty_object_is_valid(self):
        validation = validate_user_config({})
        assert validation.valid
        assert validation.config.custom_patterns == []

    def test_full_config(self):
        data = {
            "overrideBuiltins": True,
            "defaultFramework": "bootstrap",
            "customPatterns": [
                {
                    "id": "brand_card",
                    "classes": {"base": "p-4", "hover": "shadow-lg"},
                    "name": "Brand Card",
                    "description": "Card in brand colors",
                    "category": "cards",
                    "frameworks": ["tailwind", "unocss"],
                    "ssr": {"safe": False, "warning": "Needs JS", "clientOnly": "open"},
                }
            ],
        }
        validation = validate_user_config(data)
        assert validation.valid, validation.errors

        pattern = validation.config.custom_patterns[0]
        assert pattern.classes.hover == "shadow-lg"
        assert pattern.frameworks == ["tailwind", "unocss"]
        assert pattern.ssr.client_only == "open"
        assert validation.config.default_framework == "bootstrap"
        assert is_valid_user_config(data)

    def test_duplicate_ids_warn(self):
        validation = validate_user_config({"customPatterns": [
            {"id": "a", "classes": "p-1"},
            {"id": "b", "classes": "p-2"},
            {"id": "a", "classes": "p-3"},
        ]})
        assert validation.valid
        assert validation.warnings == ['Duplicate pattern id "a" at index 2 - later definition will be used']


class TestInvalidConfigs:
    """Test error paths and messages."""

    def test_not_an_object(self):
        error = _single_error(["not", "an", "object"])
        assert error.path == ""
        assert error.message == "config must be an object"
        assert not is_valid_user_config(None)

    def test_invalid_id(self):
        error = _single_error({"customPatterns": [{"id": "1btn", "classes": "p-1"}]})
        assert error.path == "customPatterns[0].id"
        assert error.message == (
            'id "1btn" is invalid - must start with letter and contain only letters, numbers, hyphens, underscores'
        )

    def test_empty_id(self):
        error = _single_error({"customPatterns": [{"id": "", "classes": "p-1"}]})
        assert error.path == "customPatterns[0].id"
        assert error.message == "id cannot be empty"

    def test_empty_classes(self):
        error = _single_error({"customPatterns": [{"id": "ok", "classes": "   "}]})
        assert error.path == "customPatterns[0].classes"
        assert error.message == "classes cannot be empty"

    def test_empty_state_base(self):
        error = _single_error({"customPatterns": [{"id": "ok", "classes": {"base": ""}}]})
        assert error.path == "customPatterns[0].classes.base"
        assert error.message == "classes.base is required and must be a non-empty string"

    def test_classes_of_wrong_type(self):
        error = _single_error({"customPatterns": [{"id": "ok", "classes": 42}]})
        assert error.path == "customPatterns[0].classes"
        assert error.message.startswith("classes must be a string or an object")

    def test_unknown_default_framework(self):
        error = _single_error({"defaultFramework": "foundation"})
        assert error.path == "defaultFramework"
        assert error.message == "invalid value 'foundation' - must be one of: tailwind, bootstrap, unocss, tachyons"

    def test_unknown_pattern_framework(self):
        error = _single_error({"customPatterns": [{"id": "ok", "classes": "p-1", "frameworks": ["tailwind", "bulma"]}]})
        assert error.path == "customPatterns[0].frameworks[1]"
        assert "bulma" in error.message

    def test_override_builtins_must_be_boolean(self):
        error = _single_error({"overrideBuiltins": "yes"})
        assert error.path == "overrideBuiltins"

    def test_ssr_safe_is_required(self):
        error = _single_error({"customPatterns": [{"id": "ok", "classes": "p-1", "ssr": {"warning": "x"}}]})
        assert error.path == "customPatterns[0].ssr.safe"

    def test_errors_are_reported_per_pattern(self):
        validation = validate_user_config({"customPatterns": [
            {"id": "good", "classes": "p-1"},
            {"id": "-bad", "classes": "p-1"},
            {"classes": "p-1"},
        ]})
        assert not validation.valid
        assert [e.path for e in validation.errors] == ["customPatterns[1].id", "customPatterns[2].id"]
