"""
Explicit construction of the dashboard services from the loaded configuration.
"""
from dataclasses import dataclass
from typing import Optional

import requests
from omegaconf import DictConfig

from .auth.application import AuthUseCase
from .auth.domain import SessionStore, TOKEN_KEY
from .auth.infrastructure import UserApiRepository, create_session_store
from .common.http import ApiClient
from .common.logging import setup_logger
from .gerbang.application import GerbangUseCase
from .gerbang.infrastructure import GerbangApiRepository
from .lalin.application import DashboardUseCase, ReportUseCase
from .lalin.infrastructure import LalinApiRepository, ReportPdfExporter

logger = setup_logger(__name__)


@dataclass
class Services:
    config: DictConfig
    session_store: SessionStore
    api_client: ApiClient
    auth_use_case: AuthUseCase
    gerbang_use_case: GerbangUseCase
    report_use_case: ReportUseCase
    dashboard_use_case: DashboardUseCase


class ApplicationBuilder:
    """
    Builder pattern for the dashboard services.
    Each step can be replaced by assigning the attribute before build().
    """

    def __init__(self, config: DictConfig, http_session: Optional[requests.Session] = None):
        self.config = config
        self.http_session = http_session

        self.session_store: Optional[SessionStore] = None
        self.api_client: Optional[ApiClient] = None
        self.user_repository: Optional[UserApiRepository] = None
        self.gerbang_repository: Optional[GerbangApiRepository] = None
        self.lalin_repository: Optional[LalinApiRepository] = None
        self.pdf_exporter: Optional[ReportPdfExporter] = None

    def build_session_store(self) -> 'ApplicationBuilder':
        session_cfg = self.config.session
        logger.info(f"Session store: {session_cfg.backend}")
        self.session_store = create_session_store(session_cfg.backend, session_cfg.path)
        return self

    def build_api_client(self) -> 'ApplicationBuilder':
        if not self.session_store:
            self.build_session_store()

        api_cfg = self.config.api
        store = self.session_store
        logger.info(f"Lalin API at {api_cfg.base_url} (timeout {api_cfg.timeout_seconds}s)")
        self.api_client = ApiClient(
            base_url=api_cfg.base_url,
            timeout=api_cfg.timeout_seconds,
            token_provider=lambda: store.get(TOKEN_KEY),
            session=self.http_session,
        )
        return self

    def build_repositories(self) -> 'ApplicationBuilder':
        if not self.api_client:
            self.build_api_client()

        self.user_repository = UserApiRepository(self.api_client, self.session_store)
        self.gerbang_repository = GerbangApiRepository(self.api_client)
        self.lalin_repository = LalinApiRepository(
            self.api_client,
            gerbang_lookup_limit=self.config.report.gerbang_lookup_limit,
        )
        return self

    def build(self) -> Services:
        if not self.lalin_repository:
            self.build_repositories()
        if not self.pdf_exporter:
            self.pdf_exporter = ReportPdfExporter()

        return Services(
            config=self.config,
            session_store=self.session_store,
            api_client=self.api_client,
            auth_use_case=AuthUseCase(self.user_repository),
            gerbang_use_case=GerbangUseCase(self.gerbang_repository),
            report_use_case=ReportUseCase(self.lalin_repository, self.pdf_exporter),
            dashboard_use_case=DashboardUseCase(
                self.lalin_repository,
                limit=self.config.report.dashboard_limit,
            ),
        )
