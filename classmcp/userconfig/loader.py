"""Discover and load user config files."""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple
from classmcp.userconfig.schema import ConfigValidation, UserConfig, validate_user_config

log = logging.getLogger(__name__)

# Config file names to search for, in order of priority
CONFIG_FILE_NAMES = (".classmcp.json", "classmcp.config.json")

PACKAGE_JSON_KEY = "classmcp"
PACKAGE_JSON_SUFFIX = f"#{PACKAGE_JSON_KEY}"

# Used when no config file is found or the found one is invalid
DEFAULT_CONFIG = UserConfig(custom_patterns=[], override_builtins=False, default_framework="tailwind")


@dataclass
class LoadConfigResult:
    """The loaded config (or DEFAULT_CONFIG) and where it came from."""
    config: UserConfig
    config_path: Optional[str]
    validation: ConfigValidation
    found: bool


def _not_found() -> LoadConfigResult:
    return LoadConfigResult(
        config=DEFAULT_CONFIG,
        config_path=None,
        validation=ConfigValidation(valid=True),
        found=False,
    )


def _read_json(path: Path) -> Optional[Any]:
    """Parse a JSON file, or return None when it is missing or unreadable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        log.warning("Could not read config file %s: %s", path, e)
        return None


def _read_package_json(project_dir: Path) -> Optional[Tuple[Any, str]]:
    package_json_path = project_dir / "package.json"
    package = _read_json(package_json_path)
    if not isinstance(package, dict):
        return None

    section = package.get(PACKAGE_JSON_KEY)
    if isinstance(section, dict):
        return section, f"{package_json_path}{PACKAGE_JSON_SUFFIX}"
    return None


def _validated(data: Any, config_path: str) -> LoadConfigResult:
    validation = validate_user_config(data)

    if not validation.valid:
        log.error("Invalid config in %s:", config_path)
        for error in validation.errors:
            log.error("  - %s", error)
        return LoadConfigResult(config=DEFAULT_CONFIG, config_path=config_path, validation=validation, found=True)

    for warning in validation.warnings:
        log.warning("Warning in %s: %s", config_path, warning)

    return LoadConfigResult(config=validation.config, config_path=config_path, validation=validation, found=True)


def load_config(project_dir: Path) -> LoadConfigResult:
    """
    Load config from a project directory.

    Searches CONFIG_FILE_NAMES in order, then the "classmcp" section of
    package.json. Invalid configs fall back to DEFAULT_CONFIG but still report
    found=True with their validation errors.

    Args:
        project_dir: Directory to search

    Returns:
        LoadConfigResult
    """
    project_dir = Path(project_dir)

    for file_name in CONFIG_FILE_NAMES:
        file_path = project_dir / file_name
        data = _read_json(file_path)
        if data is not None:
            return _validated(data, str(file_path))

    package_section = _read_package_json(project_dir)
    if package_section is not None:
        data, config_path = package_section
        return _validated(data, config_path)

    return _not_found()


def reload_config(config_path: Optional[str], project_dir: Path) -> LoadConfigResult:
    """Re-read the previously loaded config source, or search again if there was none."""
    project_dir = Path(project_dir)

    if not config_path:
        return load_config(project_dir)

    if config_path.endswith(PACKAGE_JSON_SUFFIX):
        package_section = _read_package_json(project_dir)
        if package_section is None:
            return _not_found()
        data, path = package_section
        return _validated(data, path)

    if not Path(config_path).exists():
        log.error("Could not reload config from %s: file no longer exists", config_path)
        return _not_found()

    data = _read_json(Path(config_path))
    if data is None:
        return _not_found()
    return _validated(data, config_path)
