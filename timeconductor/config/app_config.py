#!filepath: timeconductor/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .conductor_config import ConductorConfig
from .replay_config import ReplayConfig

MODE_ENV_VAR = "TIMECONDUCTOR_MODE"


def project_root() -> str:
    """
    Project root, derived from this file's location:
    timeconductor/config/app_config.py → timeconductor/config → timeconductor → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig
    conductor: ConductorConfig
    replay: ReplayConfig = Field(default_factory=ReplayConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to timeconductor/config/base.yml
        - independent of the current working directory
        - TIMECONDUCTOR_MODE overrides conductor.mode
        """
        root = project_root()

        # 1) .env at the project root
        load_dotenv(os.path.join(root, ".env"))

        # 2) config file
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        mode = os.getenv(MODE_ENV_VAR)
        if mode and isinstance(raw.get("conductor"), dict):
            raw["conductor"]["mode"] = mode

        return cls(**raw)
