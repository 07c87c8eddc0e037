from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from classmcp.catalog.registry import DEFAULT_FRAMEWORK, CustomPatternSet, FrameworkRegistry
from classmcp.catalog.types import ComponentPattern
from classmcp.core.config import Settings
from classmcp.userconfig.loader import LoadConfigResult, load_config
from classmcp.userconfig.transform import transform_patterns_with_meta

log = logging.getLogger(__name__)


@dataclass
class ServerSession:
    """Mutable state of one running server: current framework, loaded config and registry."""
    project_dir: Path
    registry: FrameworkRegistry = field(default_factory=FrameworkRegistry)
    current_framework: str = DEFAULT_FRAMEWORK
    config_path: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.registry.display_name(self.current_framework)

    def set_framework(self, framework_id: str) -> bool:
        if not self.registry.has_framework(framework_id):
            return False
        self.current_framework = framework_id
        log.info("Framework set", extra={"framework": framework_id})
        return True

    def apply_config(self, result: LoadConfigResult) -> List[ComponentPattern]:
        """Replace custom patterns with the loaded config's and apply its default framework."""
        self.config_path = result.config_path
        transformed = transform_patterns_with_meta(result.config.custom_patterns)
        self.registry.replace_custom_patterns(
            CustomPatternSet(patterns=tuple(transformed), override_builtins=result.config.override_builtins)
        )
        if result.config.default_framework:
            self.set_framework(result.config.default_framework)
        return transformed

    @classmethod
    def start(cls, settings: Settings) -> "ServerSession":
        """
        Build the session for a project directory.

        The config file is fully loaded and applied before this returns.
        Startup framework precedence: settings override, config file
        defaultFramework, detected from project files, then tailwind.
        """
        session = cls(project_dir=Path(settings.project_dir))

        if settings.detect_framework:
            session.current_framework = session.registry.detect_framework(session.project_dir)

        result = load_config(session.project_dir)
        session.config_path = result.config_path

        if result.found and result.validation.valid:
            transformed = session.apply_config(result)
            if transformed:
                log.info("Loaded %d custom patterns from %s", len(transformed), result.config_path)
        elif result.found:
            log.error("Config validation failed - using defaults")

        if settings.default_framework:
            if not session.set_framework(settings.default_framework):
                log.warning("Ignoring unknown framework %r from settings", settings.default_framework)

        return session
