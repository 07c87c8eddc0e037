"""Framework registry: built-in patterns merged with user-defined ones."""
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple
from classmcp.catalog.loader import FrameworkModule, builtin_frameworks
from classmcp.catalog.types import ComponentPattern, FrameworkConfig

log = logging.getLogger(__name__)

DEFAULT_FRAMEWORK = "tailwind"

# Order used when every state variant is requested
ALL_STATES = ("hover", "focus", "active", "disabled", "group_hover")


class UnknownFrameworkError(ValueError):
    def __init__(self, framework_id: str):
        super().__init__(f"Unknown framework: {framework_id}")
        self.framework_id = framework_id


@dataclass(frozen=True)
class CustomPatternSet:
    """User-defined patterns and whether they replace built-ins with the same id."""
    patterns: Tuple[ComponentPattern, ...] = ()
    override_builtins: bool = False

    def for_framework(self, framework_id: str) -> List[ComponentPattern]:
        return filter_patterns_for_framework(self.patterns, framework_id)


@dataclass(frozen=True)
class FrameworkStats:
    total_patterns: int
    built_in_patterns: int
    custom_patterns: int
    categories: int
    ssr_safe_patterns: int
    client_only_patterns: int


def filter_patterns_for_framework(
    patterns: Sequence[ComponentPattern], framework_id: str
) -> List[ComponentPattern]:
    """Keep patterns with no framework restriction or one naming framework_id."""
    return [p for p in patterns if not p.frameworks or framework_id in p.frameworks]


def resolve_classes(
    pattern: ComponentPattern,
    include_states: bool = False,
    states: Optional[Sequence[str]] = None,
    ssr_safe: bool = False,
) -> str:
    """
    Flatten a pattern's classes into one space-separated string.

    String classes are returned as-is. For state variants the base classes are
    followed by either every defined hover/focus/active/disabled/groupHover
    addition (include_states without ssr_safe), or by the explicitly listed
    states in the order given.
    """
    if isinstance(pattern.classes, str):
        return pattern.classes

    variant = pattern.classes
    parts = [variant.base]

    if include_states and not ssr_safe:
        selected: Sequence[str] = ALL_STATES
    else:
        selected = states or ()

    for state in selected:
        state_classes = variant.state(state)
        if state_classes:
            parts.append(state_classes)

    return " ".join(parts)


def is_ssr_safe(pattern: ComponentPattern) -> bool:
    return pattern.ssr is None or pattern.ssr.safe is not False


def get_ssr_warning(pattern: ComponentPattern) -> Optional[str]:
    return pattern.ssr.warning if pattern.ssr else None


def get_client_only_classes(pattern: ComponentPattern) -> Optional[str]:
    return pattern.ssr.client_only if pattern.ssr else None


def group_by_category(patterns: Sequence[ComponentPattern]) -> Dict[str, List[ComponentPattern]]:
    """Group patterns by category, keeping first-seen category order."""
    grouped: Dict[str, List[ComponentPattern]] = {}
    for pattern in patterns:
        grouped.setdefault(pattern.category, []).append(pattern)
    return grouped


class FrameworkRegistry:
    """
    Lookup over the built-in catalog plus one replaceable set of custom patterns.

    The custom set is swapped wholesale by replace_custom_patterns; callers
    never see a partially applied config.
    """

    def __init__(
        self,
        frameworks: Optional[Mapping[str, FrameworkModule]] = None,
        custom: Optional[CustomPatternSet] = None,
    ):
        self._frameworks = dict(frameworks) if frameworks is not None else builtin_frameworks()
        self._custom = custom or CustomPatternSet()

    # Frameworks

    def framework_ids(self) -> List[str]:
        return list(self._frameworks)

    def has_framework(self, framework_id: str) -> bool:
        return framework_id in self._frameworks

    def get_framework_config(self, framework_id: str) -> Optional[FrameworkConfig]:
        module = self._frameworks.get(framework_id)
        return module.config if module else None

    def display_name(self, framework_id: str) -> str:
        config = self.get_framework_config(framework_id)
        return config.display_name if config else framework_id

    def list_frameworks(self) -> List[Dict[str, str]]:
        return [
            {"id": framework_id, "name": module.config.display_name, "description": module.config.description}
            for framework_id, module in self._frameworks.items()
        ]

    def detect_framework(self, project_dir: Path) -> str:
        """Return the first framework whose config file exists in project_dir."""
        for framework_id, module in self._frameworks.items():
            for config_file in module.config.config_files:
                if (project_dir / config_file).exists():
                    log.info("Detected %s from %s", framework_id, config_file,
                             extra={"framework": framework_id})
                    return framework_id
        return DEFAULT_FRAMEWORK

    # Custom patterns

    @property
    def custom(self) -> CustomPatternSet:
        return self._custom

    def replace_custom_patterns(self, custom: CustomPatternSet) -> None:
        self._custom = custom

    def clear_custom_patterns(self) -> None:
        self._custom = CustomPatternSet()

    def get_custom_patterns(self) -> List[ComponentPattern]:
        return list(self._custom.patterns)

    def get_custom_patterns_for_framework(self, framework_id: str) -> List[ComponentPattern]:
        return self._custom.for_framework(framework_id)

    @staticmethod
    def is_custom_pattern(pattern: ComponentPattern) -> bool:
        return pattern.is_custom

    # Patterns

    def _builtin_patterns(self, framework_id: str) -> Tuple[ComponentPattern, ...]:
        module = self._frameworks.get(framework_id)
        return module.patterns if module else ()

    def get_patterns(self, framework_id: str) -> List[ComponentPattern]:
        """Built-in plus custom patterns; custom ones replace same-id built-ins when overriding."""
        builtin = self._builtin_patterns(framework_id)
        custom = self.get_custom_patterns_for_framework(framework_id)

        if self._custom.override_builtins:
            custom_ids = {p.id for p in custom}
            return [p for p in builtin if p.id not in custom_ids] + custom

        return list(builtin) + custom

    def get_pattern(self, framework_id: str, pattern_id: str) -> Optional[ComponentPattern]:
        builtin = next((p for p in self._builtin_patterns(framework_id) if p.id == pattern_id), None)
        custom = next((p for p in self.get_custom_patterns_for_framework(framework_id) if p.id == pattern_id), None)

        if self._custom.override_builtins:
            return custom or builtin
        return builtin or custom

    def get_patterns_by_category(self, framework_id: str, category: str) -> List[ComponentPattern]:
        return [p for p in self.get_patterns(framework_id) if p.category == category]

    def search_patterns(self, framework_id: str, query: str) -> List[ComponentPattern]:
        q = query.lower()
        return [
            p for p in self.get_patterns(framework_id)
            if q in p.name.lower()
            or q in p.description.lower()
            or q in p.category.lower()
            or q in p.id.lower()
        ]

    def get_categories(self, framework_id: str) -> List[str]:
        return list(group_by_category(self.get_patterns(framework_id)))

    def get_framework_stats(self, framework_id: str) -> FrameworkStats:
        patterns = self.get_patterns(framework_id)
        safe = sum(1 for p in patterns if is_ssr_safe(p))
        return FrameworkStats(
            total_patterns=len(patterns),
            built_in_patterns=len(self._builtin_patterns(framework_id)),
            custom_patterns=len(self.get_custom_patterns_for_framework(framework_id)),
            categories=len({p.category for p in patterns}),
            ssr_safe_patterns=safe,
            client_only_patterns=len(patterns) - safe,
        )

    # CSS

    def generate_css(
        self,
        framework_id: str,
        categories: Optional[Sequence[str]] = None,
        include_states: bool = True,
        minified: bool = False,
    ) -> str:
        """
        Generate semantic CSS (one rule per pattern id) for a framework.

        Args:
            framework_id: Framework to render
            categories: Only include these categories (all when empty)
            include_states: Append state variant classes
            minified: Drop category headings and blank lines between groups

        Returns:
            CSS text

        Raises:
            UnknownFrameworkError: If the framework is not registered
        """
        config = self.get_framework_config(framework_id)
        if config is None:
            raise UnknownFrameworkError(framework_id)

        patterns = self.get_patterns(framework_id)
        if categories:
            patterns = [p for p in patterns if p.category in categories]

        lines = [
            f"/* Generated by classmcp - {config.display_name} */",
            "/* https://classmcp.com */",
            "",
        ]

        for category, group in group_by_category(patterns).items():
            if not minified:
                has_custom = category == "custom" or any(p.is_custom for p in group)
                suffix = " (includes custom)" if has_custom else ""
                lines.append(f"/* {category.upper()}{suffix} */")

            for pattern in group:
                classes = resolve_classes(pattern, include_states=include_states)
                if config.custom_class_syntax == "@apply":
                    lines.append(f".{pattern.id} {{ @apply {classes}; }}")
                else:
                    # Raw CSS would need the actual utility values
                    lines.append(f".{pattern.id} {{ /* {classes} */ }}")

            if not minified:
                lines.append("")

        return "\n".join(lines) + "\n"
