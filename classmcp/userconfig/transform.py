"""Convert simplified CustomPatternInput entries into full ComponentPatterns."""
import re
from typing import Dict, List, Sequence
from classmcp.catalog.types import ComponentPattern, SsrInfo, StateClasses
from classmcp.userconfig.schema import CustomPatternInput

CUSTOM_CATEGORY = "custom"
CUSTOM_USAGE = '<div class="{{class}}">...</div>'


def default_pattern_name(pattern_id: str) -> str:
    """Readable name from an id: "brand-btn_lg" -> "Brand Btn Lg"."""
    return " ".join(word[:1].upper() + word[1:] for word in re.split(r"[-_]", pattern_id))


def transform_pattern(pattern_input: CustomPatternInput) -> ComponentPattern:
    name = pattern_input.name if pattern_input.name is not None else default_pattern_name(pattern_input.id)

    if isinstance(pattern_input.classes, str):
        classes = pattern_input.classes
    else:
        classes = StateClasses.model_validate(pattern_input.classes.model_dump(exclude_none=True))

    if pattern_input.ssr is not None:
        ssr = SsrInfo.model_validate(pattern_input.ssr.model_dump(exclude_none=True))
    else:
        ssr = SsrInfo(safe=True)

    return ComponentPattern(
        id=pattern_input.id,
        name=name,
        description=pattern_input.description if pattern_input.description is not None else f"Custom pattern: {name}",
        category=pattern_input.category if pattern_input.category is not None else CUSTOM_CATEGORY,
        classes=classes,
        ssr=ssr,
        usage=CUSTOM_USAGE,
        frameworks=pattern_input.frameworks,
        is_custom=True,
    )


def transform_patterns(inputs: Sequence[CustomPatternInput]) -> List[ComponentPattern]:
    return [transform_pattern(pattern_input) for pattern_input in inputs]


def transform_patterns_with_meta(inputs: Sequence[CustomPatternInput]) -> List[ComponentPattern]:
    """
    Transform config patterns, keeping only the last definition of each id.

    Framework restrictions and the custom marker travel on the pattern itself.
    """
    by_id: Dict[str, ComponentPattern] = {}
    for pattern in transform_patterns(inputs):
        by_id.pop(pattern.id, None)
        by_id[pattern.id] = pattern
    return list(by_id.values())
