from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from typing import List, Optional, Union

from .models import AppConfig
from ..exceptions import ConfigurationError


class ConfigManager:
    """Centralizes loading and validation of the dashboard configuration"""

    REQUIRED_KEYS = ['api', 'session', 'report']

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)

    def load_app_config(self, profile: str = "config", overrides: Optional[List[str]] = None) -> DictConfig:
        """Loads conf/<profile>.yaml on top of the structured defaults"""
        config_path = self.config_dir / f"{profile}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        file_cfg = OmegaConf.load(config_path)
        for key in self.REQUIRED_KEYS:
            if key not in file_cfg:
                raise ConfigurationError(f"Missing required config key: {key}")

        cli_cfg = OmegaConf.from_dotlist(overrides or [])
        return self.validate(OmegaConf.merge(file_cfg, cli_cfg))

    def validate(self, cfg: Union[DictConfig, dict]) -> DictConfig:
        """Merges an already loaded config (e.g. from hydra) into the schema"""
        schema = OmegaConf.structured(AppConfig)
        try:
            merged = OmegaConf.merge(schema, cfg)
            OmegaConf.resolve(merged)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        if not str(merged.api.base_url).startswith(("http://", "https://")):
            raise ConfigurationError(f"api.base_url must be an http(s) URL: {merged.api.base_url}")
        if merged.api.timeout_seconds <= 0:
            raise ConfigurationError("api.timeout_seconds must be positive")
        if merged.session.backend not in ("memory", "file"):
            raise ConfigurationError(f"Unknown session backend: {merged.session.backend}")

        return merged
