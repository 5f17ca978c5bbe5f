from dataclasses import dataclass, field
from typing import List


@dataclass
class ApiConfig:
    base_url: str = "http://localhost:8080/api"
    timeout_seconds: float = 10.0


@dataclass
class SessionConfig:
    backend: str = "memory"  # memory | file
    path: str = "data/session.json"


@dataclass
class ReportConfig:
    default_date: str = "2023-11-01"
    default_limit: int = 10
    dashboard_limit: int = 2000
    gerbang_lookup_limit: int = 1000


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    api: ApiConfig = field(default_factory=ApiConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
