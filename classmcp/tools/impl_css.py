import re

from classmcp.catalog.loader import load_component_examples
from classmcp.catalog.registry import resolve_classes
from classmcp.core.minifier import (
    MinificationMap,
    calculate_savings,
    create_minification_map,
    generate_minified_css,
    get_minified,
    minify_class,
)
from classmcp.schemas.tools import GenerateCssArgs, GetComponentArgs
from classmcp.tools.base import BaseTool, ToolResult

CLASS_ATTRIBUTE = re.compile(r'class="([^"]*)"')


def minify_markup(html: str, class_map: MinificationMap) -> str:
    """Replace every class token that names a mapped pattern with its minified name."""
    def _replace(match: "re.Match[str]") -> str:
        tokens = [get_minified(class_map, token) or token for token in match.group(1).split()]
        return f'class="{" ".join(tokens)}"'

    return CLASS_ATTRIBUTE.sub(_replace, html)


class GenerateCssTool(BaseTool):
    name = "generate_css"
    description = (
        "Generate a CSS file with all semantic class definitions for the current framework. "
        "Add this to your project to use the semantic class names."
    )
    args_model = GenerateCssArgs

    def run(self, session, args: GenerateCssArgs) -> ToolResult:
        framework = session.current_framework

        if args.minified:
            patterns = session.registry.get_patterns(framework)
            if args.categories:
                patterns = [p for p in patterns if p.category in args.categories]

            class_map = create_minification_map()
            for p in patterns:
                minify_class(class_map, p.id, resolve_classes(p, include_states=args.include_states))

            css = generate_minified_css(class_map, framework=framework, include_comments=False)
            savings = calculate_savings(class_map)
            return self.result(
                f"```css\n{css}```\n\n"
                "**Minification Stats:**\n"
                f"- Original tokens: ~{savings.total_original_tokens}\n"
                f"- Minified tokens: ~{savings.total_minified_tokens}\n"
                f"- Savings: {savings.savings_percent:.1f}%\n\n"
                "Add this CSS to your project. Use the minified class names (a, b, c...) in your HTML."
            )

        css = session.registry.generate_css(
            framework, categories=args.categories, include_states=args.include_states
        )
        config = session.registry.get_framework_config(framework)
        if config.custom_class_syntax == "@apply":
            note = f"Add this to your CSS file. The `@apply` directive requires {config.display_name} to be configured."
        else:
            note = "Add this CSS to your project. Note: You may need to add the actual utility definitions."
        return self.result(f"```css\n{css}```\n\n{note}")


class GetComponentTool(BaseTool):
    name = "get_component"
    description = "Get a complete component example using semantic classes. Great for common UI patterns."
    args_model = GetComponentArgs

    def run(self, session, args: GetComponentArgs) -> ToolResult:
        components = load_component_examples()
        html = components.get(args.component)
        if html is None:
            return self.result(
                f"Unknown component: {args.component}. Available: {', '.join(components)}"
            )

        if args.minified:
            class_map = create_minification_map()
            for p in session.registry.get_patterns(session.current_framework):
                minify_class(class_map, p.id, resolve_classes(p))
            html = minify_markup(html, class_map)

        return self.result(f"## {args.component} ({session.display_name})\n\n```html\n{html.rstrip()}\n```")
