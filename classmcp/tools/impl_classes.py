from classmcp.catalog.registry import (
    get_ssr_warning,
    get_client_only_classes,
    group_by_category,
    is_ssr_safe,
    resolve_classes,
)
from classmcp.core.minifier import create_minification_map, minify_class
from classmcp.schemas.tools import GetClassArgs, GetSsrInfoArgs, ListClassesArgs, SearchClassesArgs
from classmcp.tools.base import BaseTool, ToolResult

SSR_BADGE = " ⚠️"
MAX_SUGGESTIONS = 3
MAX_SEARCH_CLASSES_LENGTH = 100


class GetClassTool(BaseTool):
    name = "get_class"
    description = (
        "Get the full utility classes for a semantic class name. Returns the CSS classes you should "
        "use in your HTML. Supports SSR-safe filtering."
    )
    args_model = GetClassArgs

    def run(self, session, args: GetClassArgs) -> ToolResult:
        framework = session.current_framework
        pattern = session.registry.get_pattern(framework, args.name)

        if pattern is None:
            # Try fuzzy match
            query = args.name.lower()
            similar = [
                p for p in session.registry.get_patterns(framework)
                if p.id in args.name or args.name in p.id or query in p.name.lower()
            ][:MAX_SUGGESTIONS]

            if similar:
                hint = "Did you mean:\n" + "\n".join(f"  - {p.id}: {p.description}" for p in similar)
            else:
                hint = "Use list_classes to see available classes."
            return self.result(f'Class "{args.name}" not found in {session.display_name}.\n\n{hint}')

        if args.ssr_safe and not is_ssr_safe(pattern):
            warning = get_ssr_warning(pattern) or "This class may cause hydration mismatches."
            return self.result(
                f'**Warning:** "{args.name}" is not SSR-safe.\n\n{warning}\n\n'
                "Use `get_ssr_info` for more details or set `ssrSafe: false` to use anyway."
            )

        classes = resolve_classes(pattern, include_states=args.include_states, ssr_safe=args.ssr_safe)

        output_class = args.name
        minified_info = ""
        if args.minified:
            class_map = create_minification_map()
            entry = minify_class(class_map, args.name, classes)
            output_class = entry.minified
            minified_info = f"\nMinified: `{entry.minified}` (saves ~{len(classes) - len(entry.minified)} chars per usage)"

        text = (
            f"**{pattern.name}** ({pattern.category})\n\n"
            f"Class: `{output_class}`{minified_info}\n\n"
            f"Utilities:\n```\n{classes}\n```\n\n"
            f"Description: {pattern.description}\n"
        )
        if not is_ssr_safe(pattern):
            warning = get_ssr_warning(pattern) or "This class may cause hydration mismatches."
            text += f"\n**SSR Warning:** {warning}"
        text += f'\n\n**Usage:**\n```html\n<element class="{output_class}">...</element>\n```'
        return self.result(text)


class ListClassesTool(BaseTool):
    name = "list_classes"
    description = (
        "List all available semantic class names, optionally filtered by category. "
        "Use this to discover available patterns."
    )
    args_model = ListClassesArgs

    def run(self, session, args: ListClassesArgs) -> ToolResult:
        framework = session.current_framework
        if args.category:
            patterns = session.registry.get_patterns_by_category(framework, args.category)
        else:
            patterns = session.registry.get_patterns(framework)

        if args.ssr_safe_only:
            patterns = [p for p in patterns if is_ssr_safe(p)]

        output = f"# {session.display_name} Classes"
        output += f" ({args.category})" if args.category else ""
        output += " [SSR-safe only]" if args.ssr_safe_only else ""
        output += f"\n\nTotal: {len(patterns)} patterns\n\n"

        for category, group in group_by_category(patterns).items():
            output += f"## {category}\n"
            for p in group:
                badge = "" if is_ssr_safe(p) else SSR_BADGE
                output += f"- **{p.id}**{badge}: {p.description}\n"
            output += "\n"

        if args.ssr_safe_only:
            output += "\n_Note: ⚠️ indicates patterns that may cause hydration issues in SSR frameworks._"

        return self.result(output)


class SearchClassesTool(BaseTool):
    name = "search_classes"
    description = (
        "Search for classes by name, description, or category. "
        "Use when you're not sure of the exact class name."
    )
    args_model = SearchClassesArgs

    def run(self, session, args: SearchClassesArgs) -> ToolResult:
        results = session.registry.search_patterns(session.current_framework, args.query)

        if not results:
            return self.result(
                f'No classes found matching "{args.query}" in {session.display_name}. Try a broader search term.'
            )

        output = f'# Search Results for "{args.query}"\n\n'
        output += f"Found {len(results)} matches in {session.display_name}:\n\n"

        for p in results:
            classes = resolve_classes(p)
            truncated = classes[:MAX_SEARCH_CLASSES_LENGTH]
            if len(classes) > MAX_SEARCH_CLASSES_LENGTH:
                truncated += "..."
            badge = "" if is_ssr_safe(p) else " ⚠️ SSR"
            output += f"### {p.id}{badge}\n"
            output += f"- Description: {p.description}\n"
            output += f"- Category: {p.category}\n"
            output += f"- Classes: `{truncated}`\n\n"

        return self.result(output)


class GetSsrInfoTool(BaseTool):
    name = "get_ssr_info"
    description = (
        "Get SSR/hydration safety information for a class pattern. Use this when building "
        "SSR/Next.js/Nuxt/Remix applications to avoid hydration mismatches."
    )
    args_model = GetSsrInfoArgs

    def run(self, session, args: GetSsrInfoArgs) -> ToolResult:
        pattern = session.registry.get_pattern(session.current_framework, args.name)
        if pattern is None:
            return self.result(f'Class "{args.name}" not found.')

        output = f"# SSR Safety Report: {args.name}\n\n"

        if is_ssr_safe(pattern):
            output += "**Status:** ✅ SSR-Safe\n\n"
            output += "This class is safe for server-side rendering and will not cause hydration mismatches.\n\n"
            output += "**Why it's safe:**\n"
            output += "- Uses only CSS pseudo-classes (hover, focus, etc.)\n"
            output += "- No JavaScript-controlled state\n"
            output += "- Server and client render identically\n"
            return self.result(output)

        warning = get_ssr_warning(pattern) or "This class may cause hydration mismatches."
        client_only = get_client_only_classes(pattern)

        output += "**Status:** ⚠️ Requires Client JS\n\n"
        output += f"**Warning:** {warning}\n\n"
        output += "**Why it's not SSR-safe:**\n"
        output += "- Contains state that may differ between server and client\n"
        output += "- May require JavaScript to toggle classes\n"
        if client_only:
            output += f"\n**Client-only classes:** `{client_only}`\n"
            output += "Consider adding these classes only after hydration.\n"
        output += "\n**Recommendations:**\n"
        output += "1. Control visibility with server-side state when possible\n"
        output += "2. Use `useEffect` or `onMount` to add client-only classes\n"
        output += "3. Consider using CSS-only alternatives where available\n"
        return self.result(output)
