"""
Thin JSON client for the lalin REST API.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

import requests

from ..exceptions import ApiError, NetworkError
from ..logging import setup_logger

logger = setup_logger(__name__)

TokenProvider = Callable[[], Optional[str]]


@dataclass
class ApiResponse:
    data: Any
    status: int
    headers: Dict[str, str] = field(default_factory=dict)


class ApiClient:
    """
    Wraps a requests.Session with a base URL, a per-request timeout and
    bearer-token injection.

    The token comes from `set_auth_token` when set, otherwise from the
    optional token provider (usually the session store) at request time.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        token_provider: Optional[TokenProvider] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.default_headers: Dict[str, str] = {"Content-Type": "application/json"}
        self.default_headers.update(headers or {})
        self.token_provider = token_provider
        self.session = session or requests.Session()

    def set_auth_token(self, token: str) -> None:
        self.default_headers["Authorization"] = f"Bearer {token}"

    def remove_auth_token(self) -> None:
        self.default_headers.pop("Authorization", None)

    def set_base_url(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def get_base_url(self) -> str:
        return self.base_url

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None,
            headers: Optional[Dict[str, str]] = None) -> ApiResponse:
        return self._request("GET", endpoint, params=params, headers=headers)

    def post(self, endpoint: str, data: Any = None,
             headers: Optional[Dict[str, str]] = None) -> ApiResponse:
        return self._request("POST", endpoint, data=data, headers=headers)

    def put(self, endpoint: str, data: Any = None,
            headers: Optional[Dict[str, str]] = None) -> ApiResponse:
        return self._request("PUT", endpoint, data=data, headers=headers)

    def delete(self, endpoint: str, data: Any = None,
               headers: Optional[Dict[str, str]] = None) -> ApiResponse:
        return self._request("DELETE", endpoint, data=data, headers=headers)

    def _build_headers(self, extra: Optional[Dict[str, str]]) -> Dict[str, str]:
        headers = dict(self.default_headers)
        if "Authorization" not in headers and self.token_provider:
            token = self.token_provider()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        headers.update(extra or {})
        return headers

    def _request(self, method: str, endpoint: str, params: Optional[Dict[str, Any]] = None,
                 data: Any = None, headers: Optional[Dict[str, str]] = None) -> ApiResponse:
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"{method} {url} params={params}")

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=data,
                headers=self._build_headers(headers),
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            logger.warning(f"{method} {url} timed out after {self.timeout}s")
            raise NetworkError("Request timeout", timeout=True) from e
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise NetworkError(str(e)) from e

        body = self._parse_json(response)

        if not response.ok:
            message = body.get("message") if isinstance(body, dict) else None
            logger.warning(f"{method} {url} -> {response.status_code}")
            raise ApiError(
                message or response.reason or "API Error",
                status=response.status_code,
                payload=body,
            )

        return ApiResponse(data=body, status=response.status_code, headers=dict(response.headers))

    @staticmethod
    def _parse_json(response: requests.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {}
