from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from classmcp.catalog.types import FRAMEWORK_IDS

COMPONENT_NAMES = [
    "button-group",
    "card-with-header",
    "form-field",
    "alert-with-icon",
    "avatar-stack",
    "modal",
    "table",
    "nav-bar",
    "pricing-card",
    "testimonial",
]


class ToolArgs(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class NoArgs(ToolArgs):
    pass


class SetFrameworkArgs(ToolArgs):
    framework: str = Field(..., description="The CSS framework to use", json_schema_extra={"enum": FRAMEWORK_IDS})


class GetClassArgs(ToolArgs):
    name: str = Field(..., description="The semantic class name (e.g., 'btn-primary', 'card', 'input')")
    minified: bool = Field(False, description="Return a minified single-character class name for maximum token savings")
    ssr_safe: bool = Field(False, description="Only return SSR-safe classes that won't cause hydration mismatches")
    include_states: bool = Field(True, description="Include hover/focus/active state variants in the output")


class ListClassesArgs(ToolArgs):
    category: Optional[str] = Field(None, description="Filter by category, e.g. buttons, cards, forms, badges, alerts")
    ssr_safe_only: bool = Field(False, description="Only show SSR-safe classes")


class SearchClassesArgs(ToolArgs):
    query: str = Field(..., description="Search query (matches against name, description, and category)")


class GenerateCssArgs(ToolArgs):
    categories: Optional[List[str]] = Field(None, description="Only generate CSS for specific categories")
    minified: bool = Field(False, description="Generate minified class names (a, b, c...) for maximum file size reduction")
    include_states: bool = Field(True, description="Include hover/focus/active state variants")


class GetComponentArgs(ToolArgs):
    component: str = Field(..., description="Component type to generate", json_schema_extra={"enum": COMPONENT_NAMES})
    minified: bool = Field(False, description="Use minified class names in the example")


class GetSsrInfoArgs(ToolArgs):
    name: str = Field(..., description="The class name to check")


class ListCustomPatternsArgs(ToolArgs):
    framework: Optional[str] = Field(
        None,
        description="Filter by framework (defaults to current framework)",
        json_schema_extra={"enum": FRAMEWORK_IDS},
    )
