"""User config files: schema validation, discovery and pattern transform."""
from classmcp.userconfig.loader import DEFAULT_CONFIG, LoadConfigResult, load_config, reload_config
from classmcp.userconfig.schema import ConfigIssue, ConfigValidation, UserConfig, validate_user_config
from classmcp.userconfig.transform import transform_pattern, transform_patterns_with_meta

__all__ = [
    "DEFAULT_CONFIG",
    "LoadConfigResult",
    "load_config",
    "reload_config",
    "ConfigIssue",
    "ConfigValidation",
    "UserConfig",
    "validate_user_config",
    "transform_pattern",
    "transform_patterns_with_meta",
]
