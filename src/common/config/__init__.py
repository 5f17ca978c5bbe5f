from .models import AppConfig, ApiConfig, SessionConfig, ReportConfig, ServerConfig, LoggingConfig
from .manager import ConfigManager

__all__ = [
    "AppConfig",
    "ApiConfig",
    "SessionConfig",
    "ReportConfig",
    "ServerConfig",
    "LoggingConfig",
    "ConfigManager",
]
