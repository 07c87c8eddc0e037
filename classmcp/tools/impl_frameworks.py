from classmcp.schemas.tools import NoArgs, SetFrameworkArgs
from classmcp.tools.base import BaseTool, ToolResult


class SetFrameworkTool(BaseTool):
    name = "set_framework"
    description = (
        "Set the CSS framework to use (tailwind, bootstrap, unocss, tachyons). "
        "Call this first if not using Tailwind."
    )
    args_model = SetFrameworkArgs

    def run(self, session, args: SetFrameworkArgs) -> ToolResult:
        if not session.set_framework(args.framework):
            available = ", ".join(session.registry.framework_ids())
            return self.result(f"Unknown framework: {args.framework}. Available: {available}")

        stats = session.registry.get_framework_stats(args.framework)
        return self.result(
            f"Framework set to **{session.display_name}**\n\n"
            f"- Total patterns: {stats.total_patterns}\n"
            f"- Categories: {stats.categories}\n"
            f"- SSR-safe patterns: {stats.ssr_safe_patterns}\n"
            f"- Patterns requiring client JS: {stats.client_only_patterns}"
        )


class ListFrameworksTool(BaseTool):
    name = "list_frameworks"
    description = "List all supported CSS frameworks and their pattern counts."
    args_model = NoArgs

    def run(self, session, args: NoArgs) -> ToolResult:
        output = "# Available CSS Frameworks\n\n"
        output += f"Current: **{session.display_name}**\n\n"

        for framework in session.registry.list_frameworks():
            stats = session.registry.get_framework_stats(framework["id"])
            current = " ← current" if framework["id"] == session.current_framework else ""
            output += f"## {framework['name']}{current}\n"
            output += f"- ID: `{framework['id']}`\n"
            output += f"- Description: {framework['description']}\n"
            output += f"- Patterns: {stats.total_patterns} ({stats.ssr_safe_patterns} SSR-safe)\n"
            output += f"- Categories: {stats.categories}\n\n"

        output += "Use `set_framework` to switch frameworks."
        return self.result(output)
