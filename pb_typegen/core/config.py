from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_FILE = ".pocketbase.config.yaml"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="PB_", extra="ignore")

    url: str = "http://127.0.0.1:8090"
    username: str
    password: str
    auth_collection: str = "_superusers"

    output: str = "pb.types.ts"
    page_size: int = 500
    request_timeout: Optional[float] = None

    log_level: str = "INFO"


def read_config_file(path: Path) -> Dict[str, Any]:
    """Read a YAML config file holding the same keys as Settings."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def load_settings(config_file: Optional[Path] = None, **overrides: Any) -> Settings:
    """
    Load settings from the environment, an optional YAML file and explicit overrides.

    Precedence (highest first): overrides, config file, environment/.env.
    When no config file is given, .pocketbase.config.yaml in the working
    directory is used if it exists.
    """
    if config_file is None:
        default_path = Path.cwd() / DEFAULT_CONFIG_FILE
        if default_path.exists():
            config_file = default_path

    values: Dict[str, Any] = {}
    if config_file is not None:
        values.update(read_config_file(Path(config_file)))
    values.update({k: v for k, v in overrides.items() if v is not None})

    return Settings(**values)
