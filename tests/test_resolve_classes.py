"""Tests for flattening pattern classes into a single string."""
from classmcp.catalog.registry import resolve_classes
from classmcp.catalog.types import ComponentPattern, StateClasses


def _pattern(classes):
    return ComponentPattern(id="thing", name="Thing", description="A thing", category="misc", classes=classes)


STATEFUL = _pattern(StateClasses(
    base="base",
    hover="hov",
    focus="foc",
    active="act",
    disabled="dis",
    group_hover="grp",
    aria_expanded="exp",
))


def test_string_classes_ignore_options():
    pattern = _pattern("px-4 py-2")
    assert resolve_classes(pattern) == "px-4 py-2"
    assert resolve_classes(pattern, include_states=True, states=["hover"], ssr_safe=True) == "px-4 py-2"


def test_base_only_by_default():
    assert resolve_classes(STATEFUL) == "base"


def test_include_states_adds_all_states_in_fixed_order():
    assert resolve_classes(STATEFUL, include_states=True) == "base hov foc act dis grp"


def test_include_states_ignores_explicit_list():
    assert resolve_classes(STATEFUL, include_states=True, states=["aria_expanded"]) == "base hov foc act dis grp"


def test_explicit_states_in_given_order():
    assert resolve_classes(STATEFUL, states=["focus", "hover"]) == "base foc hov"


def test_ssr_safe_disables_automatic_states():
    """ssr_safe suppresses include_states, leaving only explicitly listed states."""
    assert resolve_classes(STATEFUL, include_states=True, ssr_safe=True) == "base"
    assert resolve_classes(STATEFUL, include_states=True, ssr_safe=True, states=["hover"]) == "base hov"


def test_states_accept_camel_case_names():
    assert resolve_classes(STATEFUL, states=["groupHover", "ariaExpanded"]) == "base grp exp"


def test_missing_and_unknown_states_are_skipped():
    pattern = _pattern(StateClasses(base="base", hover="hov"))
    assert resolve_classes(pattern, states=["focus", "bogus", "hover"]) == "base hov"
