import json
import re
from typing import Any, Dict, List

INFO_URI = "classmcp://info"
PATTERN_URI = re.compile(r"classmcp://patterns/(\w+)/([^/]+)")
CSS_URI = re.compile(r"classmcp://css/(\w+)/full")


class ResourceNotFoundError(LookupError):
    def __init__(self, uri: str, reason: str = ""):
        super().__init__(reason or f"Unknown resource: {uri}")
        self.uri = uri


def list_resources(session) -> List[Dict[str, str]]:
    framework = session.current_framework
    display = session.display_name
    resources = [
        {
            "uri": INFO_URI,
            "name": "classmcp Info",
            "description": "Information about classmcp and available frameworks",
            "mimeType": "text/markdown",
        },
        {
            "uri": f"classmcp://patterns/{framework}/all",
            "name": f"All {display} Patterns",
            "description": "Complete list of all available semantic class patterns",
            "mimeType": "application/json",
        },
        {
            "uri": f"classmcp://css/{framework}/full",
            "name": f"Full {display} CSS",
            "description": "Complete CSS file with all class definitions",
            "mimeType": "text/css",
        },
    ]
    for category in session.registry.get_categories(framework):
        resources.append({
            "uri": f"classmcp://patterns/{framework}/{category}",
            "name": f"{category[:1].upper()}{category[1:]} Patterns",
            "description": f"Class patterns for {category}",
            "mimeType": "application/json",
        })
    return resources


def _info_markdown(display_name: str) -> str:
    return f"""# classmcp - AI-Optimized CSS Classes

## What is classmcp?

classmcp provides semantic CSS class patterns optimized for AI code generation.
Instead of writing long utility class strings, use short semantic names.

## Why use classmcp?

1. **Token Savings**: "btn-primary" vs "inline-flex items-center justify-center px-4 py-2 bg-blue-600..."
2. **Consistency**: Pre-tested patterns that work across your app
3. **SSR-Safe**: Patterns marked for hydration safety
4. **Multi-Framework**: Works with Tailwind, Bootstrap, UnoCSS, Tachyons

## Quick Start

1. Use `list_classes` to see available patterns
2. Use `get_class` to get the utility classes for a pattern
3. Use `generate_css` to create the CSS file for your project

## Current Framework: {display_name}

Use `set_framework` to change frameworks.
"""


def read_resource(session, uri: str) -> Dict[str, Any]:
    """Return the `contents` payload for a resource URI or raise ResourceNotFoundError."""
    if uri == INFO_URI:
        return _contents(uri, "text/markdown", _info_markdown(session.display_name))

    registry = session.registry

    match = PATTERN_URI.fullmatch(uri)
    if match:
        framework, category = match.groups()
        if not registry.has_framework(framework):
            raise ResourceNotFoundError(uri, f"Unknown framework: {framework}")
        if category == "all":
            patterns = registry.get_patterns(framework)
        else:
            patterns = registry.get_patterns_by_category(framework, category)
        payload = [p.model_dump(mode="json", by_alias=True, exclude_none=True) for p in patterns]
        return _contents(uri, "application/json", json.dumps(payload, indent=2, ensure_ascii=False))

    match = CSS_URI.fullmatch(uri)
    if match:
        framework = match.group(1)
        if not registry.has_framework(framework):
            raise ResourceNotFoundError(uri, f"Unknown framework: {framework}")
        return _contents(uri, "text/css", registry.generate_css(framework, include_states=True))

    raise ResourceNotFoundError(uri)


def _contents(uri: str, mime_type: str, text: str) -> Dict[str, Any]:
    return {"contents": [{"uri": uri, "mimeType": mime_type, "text": text}]}
