"""Pydantic models for framework configs and component patterns."""
from typing import Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

FrameworkId = Literal["tailwind", "bootstrap", "unocss", "tachyons"]

FRAMEWORK_IDS: List[str] = ["tailwind", "bootstrap", "unocss", "tachyons"]


class CatalogModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python, immutable."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class StateClasses(CatalogModel):
    """Utility classes split into a base string and per-state additions."""
    base: str

    # Interactive states
    hover: Optional[str] = None
    focus: Optional[str] = None
    active: Optional[str] = None
    disabled: Optional[str] = None

    # Group/peer states
    group_hover: Optional[str] = None
    group_focus: Optional[str] = None

    # Aria states
    aria_selected: Optional[str] = None
    aria_expanded: Optional[str] = None
    aria_disabled: Optional[str] = None

    # Data attribute states
    data_active: Optional[str] = None
    data_open: Optional[str] = None
    data_closed: Optional[str] = None

    def state(self, name: str) -> Optional[str]:
        """Look up a state by field name or camelCase alias."""
        field_name = _STATE_FIELD_NAMES.get(name)
        if field_name is None:
            return None
        return getattr(self, field_name)


_STATE_FIELD_NAMES: Dict[str, str] = {}
for _name, _info in StateClasses.model_fields.items():
    if _name == "base":
        continue
    _STATE_FIELD_NAMES[_name] = _name
    _STATE_FIELD_NAMES[_info.alias or _name] = _name


class SsrInfo(CatalogModel):
    safe: bool
    warning: Optional[str] = None
    client_only: Optional[str] = None


class ComponentPattern(CatalogModel):
    id: str
    name: str
    description: str
    category: str
    classes: Union[str, StateClasses]

    responsive: Optional[Dict[str, str]] = None
    variants: Optional[Dict[str, Dict[str, str]]] = None
    usage: Optional[str] = None
    ssr: Optional[SsrInfo] = None
    related_patterns: Optional[List[str]] = None
    framework_notes: Optional[Dict[str, str]] = None

    # Set only on user-defined patterns
    frameworks: Optional[List[FrameworkId]] = None
    is_custom: bool = False

    @property
    def base_classes(self) -> str:
        if isinstance(self.classes, str):
            return self.classes
        return self.classes.base


class FrameworkConfig(CatalogModel):
    name: str
    display_name: str
    version: str
    description: str
    website: str

    # How custom classes are defined
    custom_class_syntax: Literal["@apply", "composes", "raw"]

    # Config files that identify this framework in a project
    config_files: List[str] = []

    css_import: str
    state_prefix: Optional[Dict[str, str]] = None
    breakpoints: Optional[Dict[str, str]] = None
