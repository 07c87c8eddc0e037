"""Schema and validation for user config files (.classmcp.json)."""
import re
from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, List, Optional, Union
from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    StrictBool,
    StrictStr,
    Tag,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel
from classmcp.catalog.types import FRAMEWORK_IDS, FrameworkId

# Valid CSS class name: starts with a letter, then letters, digits, hyphens, underscores
VALID_ID_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9_-]*$")

_CLASSES_TAGS = ("text", "states")


class ConfigModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class CustomStateClasses(ConfigModel):
    base: StrictStr
    hover: Optional[StrictStr] = None
    focus: Optional[StrictStr] = None
    active: Optional[StrictStr] = None
    disabled: Optional[StrictStr] = None

    @field_validator("base")
    @classmethod
    def base_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("classes.base is required and must be a non-empty string")
        return v


class CustomSsrInput(ConfigModel):
    safe: StrictBool
    warning: Optional[StrictStr] = None
    client_only: Optional[StrictStr] = None


def _classes_tag(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return "text"
    if isinstance(value, (dict, CustomStateClasses)):
        return "states"
    return None


CustomClasses = Annotated[
    Union[
        Annotated[StrictStr, Tag("text")],
        Annotated[CustomStateClasses, Tag("states")],
    ],
    Discriminator(
        _classes_tag,
        custom_error_type="invalid_classes",
        custom_error_message="classes must be a string or an object with base, hover, focus, active, disabled fields",
    ),
]


class CustomPatternInput(ConfigModel):
    """Simplified pattern shape accepted in user config files."""
    id: StrictStr
    classes: CustomClasses
    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    category: Optional[StrictStr] = None
    frameworks: Optional[List[FrameworkId]] = None
    ssr: Optional[CustomSsrInput] = None

    @field_validator("id")
    @classmethod
    def id_is_class_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("id cannot be empty")
        if not VALID_ID_PATTERN.match(v):
            raise ValueError(
                f'id "{v}" is invalid - must start with letter and contain only '
                "letters, numbers, hyphens, underscores"
            )
        return v

    @field_validator("classes")
    @classmethod
    def classes_not_blank(cls, v: Union[str, CustomStateClasses]) -> Union[str, CustomStateClasses]:
        if isinstance(v, str) and not v.strip():
            raise ValueError("classes cannot be empty")
        return v


class UserConfig(ConfigModel):
    custom_patterns: List[CustomPatternInput] = Field(default_factory=list)
    override_builtins: StrictBool = False
    default_framework: Optional[FrameworkId] = None


@dataclass
class ConfigIssue:
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


@dataclass
class ConfigValidation:
    """Outcome of validating a config document: the parsed config, or the errors."""
    valid: bool
    errors: List[ConfigIssue] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    config: Optional[UserConfig] = None


def _format_path(loc) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif part in _CLASSES_TAGS:
            # Union member tags are not part of the document path
            continue
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def _format_message(error: Dict[str, Any]) -> str:
    if error["type"] == "value_error":
        return str(error["ctx"]["error"])
    if error["type"] == "literal_error":
        return f"invalid value {error['input']!r} - must be one of: {', '.join(FRAMEWORK_IDS)}"
    return error["msg"]


def _duplicate_id_warnings(data: Dict[str, Any]) -> List[str]:
    patterns = data.get("customPatterns")
    if not isinstance(patterns, list):
        return []

    warnings = []
    seen = set()
    for index, pattern in enumerate(patterns):
        pattern_id = pattern.get("id") if isinstance(pattern, dict) else None
        if not isinstance(pattern_id, str) or not pattern_id:
            continue
        if pattern_id in seen:
            warnings.append(f'Duplicate pattern id "{pattern_id}" at index {index} - later definition will be used')
        seen.add(pattern_id)
    return warnings


def validate_user_config(data: Any) -> ConfigValidation:
    """
    Validate a parsed config document.

    Args:
        data: Decoded JSON value

    Returns:
        ConfigValidation with the parsed UserConfig when valid, otherwise
        path/message errors such as ``customPatterns[0].classes.base``
    """
    if not isinstance(data, dict):
        return ConfigValidation(valid=False, errors=[ConfigIssue("", "config must be an object")])

    warnings = _duplicate_id_warnings(data)
    try:
        config = UserConfig.model_validate(data)
    except ValidationError as e:
        errors = [ConfigIssue(_format_path(err["loc"]), _format_message(err)) for err in e.errors()]
        return ConfigValidation(valid=False, errors=errors, warnings=warnings)

    return ConfigValidation(valid=True, warnings=warnings, config=config)


def is_valid_user_config(data: Any) -> bool:
    return validate_user_config(data).valid
