"""Base Archive API Client.

Provides the generic request/response path shared by every archive tenant:
token acquisition, per-request bearer authentication, JSON envelope posting
and structured error reporting.
"""

import json
import logging
from typing import Any, Optional, Tuple

import httpx
from pydantic import ValidationError

from ..config import ArchiveConfig
from .auth import AuthenticationService
from .models import ArchiveErrorMessage, ArchivePayload, to_json_value

logger = logging.getLogger(__name__)


class APIClientError(Exception):
    """Base exception for API client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthenticationError(APIClientError):
    """Exception raised when no usable bearer token could be obtained."""

    pass


class NetworkError(APIClientError):
    """Exception raised when network operations fail."""

    pass


class NetworkConnectionError(NetworkError):
    """Exception raised when the archive endpoint cannot be reached."""

    pass


class NetworkTimeoutError(NetworkError):
    """Exception raised when an archive request times out."""

    pass


class MalformedResponseError(APIClientError):
    """Exception raised when a response body cannot be deserialized."""

    def __init__(
        self, message: str, status_code: Optional[int] = None, body: str = ""
    ):
        super().__init__(message, status_code)
        self.body = body


class ArchiveRequestError(APIClientError):
    """Exception raised when the archive service rejects a request.

    The string form is the remote message; status code, error data, the
    submitted payload and route are kept as attributes.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        data: Any = None,
        payload: Any = None,
        route: str = "archive",
    ):
        super().__init__(message, status_code)
        self.data = data
        self.payload = payload
        self.route = route

    def to_dict(self) -> dict:
        """Structured view of the failure, suitable for logging or display."""
        return {
            "message": self.message,
            "status_code": self.status_code,
            "data": self.data,
            "payload": to_json_value(self.payload),
            "route": self.route,
        }


class UnexpectedResultError(APIClientError):
    """Exception raised when a successful response has the wrong shape."""

    def __init__(self, message: str, operation: str, parameter: Any = None):
        super().__init__(message)
        self.operation = operation
        self.parameter = parameter


def format_json(value: Any) -> str:
    """Indented JSON rendering used in error messages."""
    return json.dumps(to_json_value(value), indent=2, ensure_ascii=False)


class ArchiveAPIClient:
    """Base API client posting JSON bodies to the archive service."""

    def __init__(self, config: ArchiveConfig, auth_service: AuthenticationService):
        """Initialize base archive client.

        Args:
            config: Validated archive configuration
            auth_service: Provider issuing bearer tokens for the configured scopes
        """
        self.config = config
        self.auth_service = auth_service
        self.base_url = config.base_url.rstrip("/") + "/"
        self.scopes = list(config.scopes)
        self._session: Optional[httpx.AsyncClient] = None

    @property
    def session(self) -> httpx.AsyncClient:
        """Get or create the HTTP session bound to the archive base URL.

        The session carries no Authorization header; tokens are attached per
        request so concurrent calls never observe each other's credentials.
        """
        if self._session is None or self._session.is_closed:
            self._session = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.config.timeout),
                headers={"Content-Type": "application/json"},
            )
        return self._session

    async def _get_token(self) -> str:
        """Obtain a bearer token for the configured scopes.

        Raises:
            AuthenticationError: If the provider returned an empty token
        """
        access_token = await self.auth_service.get_access_token(self.scopes)
        token = getattr(access_token, "token", None)
        if not token or not isinstance(token, str):
            raise AuthenticationError(
                "No valid access token returned for archive scopes"
            )
        return token

    async def _call_archive(
        self, payload: Any, route: Optional[str] = None
    ) -> Tuple[httpx.Response, str]:
        """POST a JSON body with a fresh bearer token.

        Args:
            payload: Body to serialize as JSON
            route: Route relative to the base URL (default: archive route)

        Returns:
            Tuple of (response, response text)

        Raises:
            AuthenticationError: If no token could be obtained
            NetworkTimeoutError: If the request times out
            NetworkConnectionError: If the endpoint cannot be reached
        """
        route = route or self.config.archive_route
        token = await self._get_token()
        headers = {"Authorization": f"Bearer {token}"}

        try:
            response = await self.session.post(
                route, json=to_json_value(payload), headers=headers
            )
        except httpx.TimeoutException as e:
            raise NetworkTimeoutError(
                f"Archive request to {route} timed out after "
                f"{self.config.timeout} seconds: {e}"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkConnectionError(
                f"Archive request to {route} failed: {e}"
            ) from e

        logger.debug(f"POST {route} -> {response.status_code}")
        return response, response.text

    @staticmethod
    def _parse_result(response: httpx.Response, content: str) -> Any:
        """Parse a successful response body as a JSON value (None when empty)."""
        if not content.strip():
            return None
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(
                f"Archive returned invalid JSON: {e}", response.status_code, content
            ) from e

    @staticmethod
    def _parse_error(response: httpx.Response, content: str) -> ArchiveErrorMessage:
        """Deserialize an error body.

        Raises:
            MalformedResponseError: If the body is not a valid error message
        """
        try:
            return ArchiveErrorMessage.model_validate_json(content)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Failed to deserialize error message (HTTP {response.status_code})",
                response.status_code,
                content,
            ) from e

    async def archive(self, payload: ArchivePayload) -> Any:
        """Post a service/method envelope to the archive route.

        Args:
            payload: Envelope naming the remote service and method

        Returns:
            Parsed JSON result (dict, list, scalar or None)

        Raises:
            ArchiveRequestError: If the archive service returns a non-2xx status
            MalformedResponseError: If the response body cannot be deserialized
            AuthenticationError: If no token could be obtained
            NetworkError: If the request fails in transport
        """
        route = self.config.archive_route
        response, content = await self._call_archive(payload, route)

        if response.is_success:
            return self._parse_result(response, content)

        error_message = self._parse_error(response, content)
        logger.error(
            f"Archive error with Payload {format_json(payload)}: "
            f"{error_message.message} : StatusCode: {response.status_code}. "
            f"Data: {format_json(error_message.data)}"
        )
        raise ArchiveRequestError(
            error_message.message,
            response.status_code,
            data=error_message.data,
            payload=payload,
            route=route,
        )

    async def archive_custom(self, payload: Any, route: str) -> Any:
        """Post an arbitrary JSON body to a custom archive route.

        Args:
            payload: Body to serialize as JSON
            route: Route relative to the archive base URL

        Returns:
            Parsed JSON result (dict, list, scalar or None)

        Raises:
            ArchiveRequestError: If the archive service returns a non-2xx status
            MalformedResponseError: If the response body cannot be deserialized
            AuthenticationError: If no token could be obtained
            NetworkError: If the request fails in transport
        """
        if not route:
            raise ValueError("route cannot be empty")

        response, content = await self._call_archive(payload, route)

        if response.is_success:
            return self._parse_result(response, content)

        error_message = self._parse_error(response, content)
        logger.error(
            f"Archive {route} error with Payload {format_json(payload)}: "
            f"{error_message.message} : StatusCode: {response.status_code}. "
            f"Data: {format_json(error_message.data)}"
        )
        raise ArchiveRequestError(
            error_message.message,
            response.status_code,
            data=error_message.data,
            payload=payload,
            route=route,
        )

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and not self._session.is_closed:
            await self._session.aclose()
        self._session = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
