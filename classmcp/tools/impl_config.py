from classmcp.catalog.registry import group_by_category
from classmcp.schemas.tools import ListCustomPatternsArgs, NoArgs
from classmcp.tools.base import BaseTool, ToolResult
from classmcp.userconfig.loader import reload_config

EXAMPLE_CONFIG = (
    "```json\n"
    "{\n"
    '  "customPatterns": [\n'
    '    { "id": "brand-btn", "classes": "px-4 py-2 bg-brand-600 text-white rounded-lg" }\n'
    "  ]\n"
    "}\n"
    "```"
)
MAX_LISTED_PATTERNS = 10
MAX_CUSTOM_CLASSES_LENGTH = 60


class ReloadConfigTool(BaseTool):
    name = "reload_config"
    description = (
        "Reload the .classmcp.json config file to pick up new custom patterns. "
        "Use after modifying the config file."
    )
    args_model = NoArgs

    def run(self, session, args: NoArgs) -> ToolResult:
        result = reload_config(session.config_path, session.project_dir)
        session.config_path = result.config_path

        if not result.found:
            session.registry.clear_custom_patterns()
            return self.result(
                "No config file found. Create a `.classmcp.json` file to add custom patterns.\n\n"
                f"Example config:\n{EXAMPLE_CONFIG}"
            )

        if not result.validation.valid:
            errors = "\n".join(f"- {e.path}: {e.message}" for e in result.validation.errors)
            return self.result(
                f"**Config validation errors:**\n\n{errors}\n\n"
                f"Config file: {result.config_path}\n\nFix the errors and run `reload_config` again."
            )

        transformed = session.apply_config(result)

        output = "**Config reloaded successfully!**\n\n"
        output += f"- Config file: `{result.config_path}`\n"
        output += f"- Custom patterns loaded: {len(transformed)}\n"
        output += f"- Override built-ins: {str(result.config.override_builtins).lower()}\n"

        if result.validation.warnings:
            output += "\n**Warnings:**\n" + "\n".join(f"- {w}" for w in result.validation.warnings)

        if transformed:
            output += "\n\n**Custom patterns:**\n"
            for p in transformed[:MAX_LISTED_PATTERNS]:
                output += f"- `{p.id}`: {p.description}\n"
            if len(transformed) > MAX_LISTED_PATTERNS:
                output += f"- ... and {len(transformed) - MAX_LISTED_PATTERNS} more\n"

        return self.result(output)


class ListCustomPatternsTool(BaseTool):
    name = "list_custom_patterns"
    description = "List all custom patterns loaded from the project's .classmcp.json config file."
    args_model = ListCustomPatternsArgs

    def run(self, session, args: ListCustomPatternsArgs) -> ToolResult:
        framework = args.framework or session.current_framework
        custom_patterns = session.registry.get_custom_patterns()

        if not custom_patterns:
            return self.result(
                "No custom patterns loaded.\n\n"
                f"To add custom patterns, create a `.classmcp.json` file:\n\n{EXAMPLE_CONFIG}\n\n"
                "Then use `reload_config` to load them."
            )

        filtered = session.registry.get_custom_patterns_for_framework(framework)

        output = "# Custom Patterns\n\n"
        output += f"Total: {len(custom_patterns)} custom patterns ({len(filtered)} for {framework})\n\n"

        if not filtered:
            output += f"No custom patterns are configured for {framework}.\n"
        else:
            for category, group in group_by_category(filtered).items():
                output += f"## {category}\n"
                for p in group:
                    classes = p.base_classes
                    if len(classes) > MAX_CUSTOM_CLASSES_LENGTH:
                        classes = classes[:MAX_CUSTOM_CLASSES_LENGTH] + "..."
                    output += f"- **{p.id}**: `{classes}`\n"
                output += "\n"

        if session.config_path:
            output += f"\n_Config file: {session.config_path}_"

        return self.result(output)
