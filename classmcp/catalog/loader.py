"""Load the built-in pattern catalog from the packaged YAML data files."""
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Tuple
import yaml
from classmcp.catalog.types import FRAMEWORK_IDS, ComponentPattern, FrameworkConfig

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


@dataclass(frozen=True)
class FrameworkModule:
    """A framework's configuration together with its built-in patterns."""
    config: FrameworkConfig
    patterns: Tuple[ComponentPattern, ...]


def _read_yaml(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=None)
def load_framework(framework_id: str) -> FrameworkModule:
    """
    Parse one framework's data file.

    Args:
        framework_id: One of the built-in framework ids

    Returns:
        FrameworkModule with the parsed config and patterns

    Raises:
        KeyError: If the id is not a built-in framework
    """
    if framework_id not in FRAMEWORK_IDS:
        raise KeyError(framework_id)

    data = _read_yaml(DATA_DIR / f"{framework_id}.yaml")
    config = FrameworkConfig.model_validate(data["framework"])
    patterns = tuple(ComponentPattern.model_validate(p) for p in data.get("patterns", []))
    log.debug("Loaded %d built-in patterns", len(patterns), extra={"framework": framework_id})
    return FrameworkModule(config=config, patterns=patterns)


def builtin_frameworks() -> Dict[str, FrameworkModule]:
    """All built-in frameworks, in catalog order."""
    return {framework_id: load_framework(framework_id) for framework_id in FRAMEWORK_IDS}


def get_framework_config(framework_id: str) -> Optional[FrameworkConfig]:
    if framework_id not in FRAMEWORK_IDS:
        return None
    return load_framework(framework_id).config


@lru_cache(maxsize=None)
def load_component_examples() -> Dict[str, str]:
    """Example component markup keyed by component name."""
    data = _read_yaml(DATA_DIR / "components.yaml")
    return dict(data.get("components", {}))
