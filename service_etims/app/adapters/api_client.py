"""
Token-cached HTTP client for the KRA eTIMS API.

Every call except the token request itself carries a bearer token. The token
is fetched lazily: when a call finds the cached token missing or inside the
refresh skew window it authenticates first, then dispatches. There is no
background refresh and no lock, so concurrent callers that all see a stale
token each authenticate on their own.
"""

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

import httpx

from shared.config import EtimsSettings
from shared.errors import ApiError, AuthenticationError
from shared.logging import get_logger
from shared.metrics import MetricsCollector

from .. import endpoints

SUCCESS_RESULT_CODE = "0000"
DEFAULT_TOKEN_TTL_SECONDS = 3600.0
DEFAULT_REFRESH_SKEW_SECONDS = 300.0
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class AccessToken:
    value: str
    expires_at: float

    def is_valid(self, now: float, skew_seconds: float = DEFAULT_REFRESH_SKEW_SECONDS) -> bool:
        return bool(self.value) and now < self.expires_at - skew_seconds

    @property
    def expires_at_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.expires_at, tz=timezone.utc)


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text or None


def normalize_response(response: Optional[httpx.Response]) -> Any:
    """Return the payload of a remote response or raise ``ApiError``.

    The remote service reports business failures through ``resultCd`` in the
    body, often with a 200 status, so the status code alone is not trusted.
    """
    body = _decode_body(response) if response is not None else None
    if body is None or (not body and not isinstance(body, (dict, list))):
        raise ApiError("Invalid API response", 500)

    if isinstance(body, dict):
        result_cd = body.get("resultCd")
        if result_cd and str(result_cd) != SUCCESS_RESULT_CODE:
            message = body.get("resultMsg") or "API Error"
            get_logger("etims.api_client").error("API Error", result_code=result_cd, message=message)
            raise ApiError(message, response.status_code or 400, str(result_cd))

    return body


class EtimsApiClient:
    """Client for the remote eTIMS API with an in-memory token cache."""

    def __init__(
        self,
        base_url: str,
        credentials: Optional[Credentials] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        refresh_skew_seconds: float = DEFAULT_REFRESH_SKEW_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.time,
        metrics: Optional[MetricsCollector] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.credentials = credentials
        self.timeout = timeout
        self.refresh_skew_seconds = refresh_skew_seconds
        self.token: Optional[AccessToken] = None
        self.metrics = metrics
        self._transport = transport
        self._clock = clock
        self.logger = get_logger("etims.api_client")

    @classmethod
    def from_settings(cls, settings: EtimsSettings, **kwargs) -> "EtimsApiClient":
        credentials = None
        if settings.api_username and settings.api_password:
            credentials = Credentials(settings.api_username, settings.api_password)
        return cls(
            settings.api_base_url,
            credentials,
            timeout=settings.request_timeout_seconds,
            refresh_skew_seconds=settings.token_refresh_skew_seconds,
            **kwargs,
        )

    @property
    def token_expires_at(self) -> Optional[datetime]:
        return self.token.expires_at_datetime if self.token else None

    def set_credentials(self, credentials: Credentials) -> None:
        self.credentials = credentials

    def is_token_valid(self) -> bool:
        """True when a token is held and is not inside the refresh skew window."""
        if self.token is None:
            return False
        return self.token.is_valid(self._clock(), self.refresh_skew_seconds)

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Content-Type": "application/json"},
            transport=self._transport,
        )

    async def authenticate(self, credentials: Optional[Credentials] = None) -> str:
        """Request a new access token with basic-auth credentials.

        Credentials passed in replace the stored ones only once a token has
        been issued with them. A failure leaves the previously cached token
        and credentials in place.
        """
        credentials = credentials or self.credentials

        self.logger.info("Authenticating with KRA eTims API")
        try:
            if credentials is None:
                raise AuthenticationError("API credentials are not configured")

            async with self._http_client() as client:
                response = await client.post(
                    endpoints.GENERATE_TOKEN,
                    params={"grant_type": "client_credentials"},
                    auth=(credentials.username, credentials.password),
                )
            response.raise_for_status()

            data = _decode_body(response)
            if not isinstance(data, dict) or not data.get("access_token"):
                raise AuthenticationError("Invalid authentication response")

            expires_in = float(data.get("expires_in") or DEFAULT_TOKEN_TTL_SECONDS)
        except Exception as e:
            self.logger.error("Authentication error", error=str(e))
            if self.metrics:
                self.metrics.record_token_refresh("failure")
            raise AuthenticationError("Failed to authenticate with KRA eTims API") from e

        self.set_credentials(credentials)
        self.token = AccessToken(value=str(data["access_token"]), expires_at=self._clock() + expires_in)
        if self.metrics:
            self.metrics.record_token_refresh("success")

        self.logger.info(
            "Successfully authenticated with KRA eTims API",
            expires_at=self.token.expires_at_datetime.isoformat(),
        )
        return self.token.value

    async def request(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        headers: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a request and return the normalized response payload."""
        self.logger.debug("Making request", method=method, endpoint=endpoint)

        outbound_headers = {k: str(v) for k, v in (headers or {}).items() if v is not None}
        if endpoint != endpoints.GENERATE_TOKEN:
            if not self.is_token_valid():
                await self.authenticate()
            outbound_headers["Authorization"] = f"Bearer {self.token.value}"

        try:
            async with self._http_client() as client:
                response = await client.request(
                    method,
                    endpoint,
                    json=body,
                    headers=outbound_headers,
                    params=params,
                )
        except httpx.HTTPError as e:
            self.logger.error("API request error", method=method, endpoint=endpoint, error=str(e))
            self._record_call(endpoint, "transport_error")
            raise

        if response.is_error:
            self.logger.error(
                "API response error",
                endpoint=endpoint,
                status_code=response.status_code,
                body=response.text,
            )

        try:
            payload = normalize_response(response)
        except ApiError:
            self._record_call(endpoint, "api_error")
            raise

        self._record_call(endpoint, "success")
        return payload

    async def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await self.request("GET", endpoint, headers=headers, params=params)

    async def post(
        self,
        endpoint: str,
        body: Any = None,
        headers: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await self.request("POST", endpoint, body={} if body is None else body, headers=headers)

    def _record_call(self, endpoint: str, outcome: str) -> None:
        if self.metrics:
            self.metrics.record_remote_call(endpoint, outcome)
