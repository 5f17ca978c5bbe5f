from unittest.mock import MagicMock

import requests

from src.builder import ApplicationBuilder, Services
from src.common.config import ConfigManager
from src.gerbang.infrastructure import GerbangApiRepository
from src.lalin.application import DashboardUseCase, ReportUseCase


def _config():
    return ConfigManager().validate({
        "api": {"base_url": "http://api.local/api", "timeout_seconds": 2},
        "session": {"backend": "memory"},
        "report": {"dashboard_limit": 500, "gerbang_lookup_limit": 300},
    })


def test_builder_constructs_services():
    services = ApplicationBuilder(_config()).build()

    assert isinstance(services, Services)
    assert isinstance(services.report_use_case, ReportUseCase)
    assert isinstance(services.dashboard_use_case, DashboardUseCase)
    assert isinstance(services.gerbang_use_case.gerbang_repository, GerbangApiRepository)
    assert services.dashboard_use_case.limit == 500
    assert services.report_use_case.lalin_repository.gerbang_lookup_limit == 300
    assert services.api_client.timeout == 2.0
    assert services.api_client.get_base_url() == "http://api.local/api"


def test_api_client_reads_token_from_session_store():
    services = ApplicationBuilder(_config()).build()
    services.session_store.set("token", "abc")

    headers = services.api_client._build_headers(None)

    assert headers["Authorization"] == "Bearer abc"


def test_login_flow_through_builder():
    http = MagicMock(spec=requests.Session)
    response = MagicMock()
    response.ok = True
    response.status_code = 200
    response.headers = {}
    response.content = b"{...}"
    response.json.return_value = {"status": True, "is_logged_in": 1, "token": "tok", "message": "OK"}
    http.request.return_value = response

    services = ApplicationBuilder(_config(), http_session=http).build()
    result = services.auth_use_case.login("admin", "secret123")

    assert result.success
    assert services.auth_use_case.is_authenticated()
    assert services.session_store.get("token") == "tok"
