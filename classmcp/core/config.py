from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CLASSMCP_", env_file=".env", extra="ignore")

    app_name: str = "classmcp"
    app_version: str = "2.0.0"

    project_dir: Path = Field(default_factory=Path.cwd)

    # Overrides the config file's defaultFramework when set
    default_framework: Optional[str] = None
    detect_framework: bool = True

    log_level: str = "INFO"

settings = Settings()
