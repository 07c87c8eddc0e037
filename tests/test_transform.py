"""Tests for turning config patterns into catalog patterns."""
from classmcp.catalog.types import StateClasses
from classmcp.userconfig.schema import CustomPatternInput
from classmcp.userconfig.transform import (
    default_pattern_name,
    transform_pattern,
    transform_patterns_with_meta,
)


def test_default_pattern_name():
    assert default_pattern_name("brand-btn") == "Brand Btn"
    assert default_pattern_name("brand_btn-lg") == "Brand Btn Lg"
    assert default_pattern_name("card") == "Card"


def test_defaults_for_minimal_input():
    pattern = transform_pattern(CustomPatternInput(id="brand-btn", classes="px-4 py-2"))

    assert pattern.name == "Brand Btn"
    assert pattern.description == "Custom pattern: Brand Btn"
    assert pattern.category == "custom"
    assert pattern.classes == "px-4 py-2"
    assert pattern.ssr.safe is True
    assert pattern.usage == '<div class="{{class}}">...</div>'
    assert pattern.is_custom
    assert pattern.frameworks is None


def test_explicit_fields_are_kept():
    pattern_input = CustomPatternInput.model_validate({
        "id": "brand-card",
        "classes": {"base": "p-4", "hover": "shadow-lg"},
        "name": "Brand Card",
        "description": "Card in brand colors",
        "category": "cards",
        "frameworks": ["tailwind"],
        "ssr": {"safe": False, "warning": "Needs JS"},
    })
    pattern = transform_pattern(pattern_input)

    assert pattern.name == "Brand Card"
    assert pattern.category == "cards"
    assert isinstance(pattern.classes, StateClasses)
    assert pattern.classes.base == "p-4"
    assert pattern.classes.hover == "shadow-lg"
    assert pattern.ssr.safe is False
    assert pattern.ssr.warning == "Needs JS"
    assert pattern.frameworks == ["tailwind"]


def test_later_duplicate_wins_at_later_position():
    patterns = transform_patterns_with_meta([
        CustomPatternInput(id="a", classes="first"),
        CustomPatternInput(id="b", classes="middle"),
        CustomPatternInput(id="a", classes="second"),
    ])

    assert [p.id for p in patterns] == ["b", "a"]
    assert patterns[1].classes == "second"
