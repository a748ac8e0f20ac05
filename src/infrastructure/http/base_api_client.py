"""Base API client for remote resource HTTP communication.

This module provides a base class for resource API clients that handles:
- HTTP request execution with timeout/connection error handling
- Response status code classification
- JSON parsing with shape checks
- Structured logging with resource context

Subclasses only need to:
1. Validate their arguments
2. Build a RequestSpec
3. Call the base methods and map the parsed JSON to domain types

Architecture:
    - Infrastructure layer (adapter for external APIs)
    - Uses httpx for async HTTP, one AsyncClient per call (no shared state)
    - Returns Result types (no exceptions for expected failures)
    - Never retries; every Failure goes back to the caller unchanged
"""

from typing import Any

import httpx
import structlog

from src.core.constants import ALBUMS_API_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import (
    AlbumHttpError,
    AlbumInvalidResponseError,
    AlbumUnavailableError,
)
from src.infrastructure.http.request_spec import RequestSpec


class BaseResourceAPIClient:
    """Base class for resource API clients with shared HTTP handling.

    Provides common functionality for HTTP communication with the remote API:
    - Request execution with timeout/connection error handling
    - Status classification (any non-2xx becomes an HTTP failure)
    - JSON parsing with object/array shape checks
    - Structured logging with resource context

    The instance holds only immutable configuration, so one client can be
    shared by concurrent callers.

    Attributes:
        _base_url: API base URL (without trailing slash).
        _resource_name: Resource identifier for logging and error messages.
        _timeout: HTTP request timeout in seconds.
        _transport: Optional httpx transport (stub transports in tests).
        _logger: Structured logger with resource context.

    Example:
        >>> class AlbumsAPI(BaseResourceAPIClient):
        ...     async def list_albums(self):
        ...         return await self._execute_and_parse_list(
        ...             RequestSpec(method="GET", path_template="/albums"),
        ...             operation="list_albums",
        ...         )
    """

    def __init__(
        self,
        *,
        base_url: str,
        resource_name: str,
        timeout: float = ALBUMS_API_TIMEOUT_DEFAULT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize base resource API client.

        Args:
            base_url: API base URL (e.g., "https://jsonplaceholder.typicode.com").
            resource_name: Resource identifier (e.g., "albums").
            timeout: HTTP request timeout in seconds.
            transport: Optional httpx transport replacing the network.
        """
        self._base_url = base_url.rstrip("/")
        self._resource_name = resource_name
        self._timeout = timeout
        self._transport = transport
        self._logger = structlog.get_logger(f"{resource_name}_api")

    async def _execute_request(
        self,
        spec: RequestSpec,
        *,
        operation: str,
    ) -> Result[httpx.Response, DomainError]:
        """Execute HTTP request with error handling.

        Args:
            spec: Request to execute.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw 2xx HTTP response.
            Failure(AlbumUnavailableError): On timeout or connection error.
            Failure(AlbumHttpError): On a non-2xx response.
        """
        url = f"{self._base_url}{spec.path}"

        self._logger.debug(
            f"{self._resource_name}_api_request_started",
            operation=operation,
            method=spec.method,
            url=url,
            params=spec.params,
        )

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method=spec.method,
                    url=url,
                    headers={"Accept": "application/json"},
                    params=spec.params,
                    json=dict(spec.body) if spec.body is not None else None,
                )

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._resource_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=AlbumUnavailableError(
                    message=f"{self._resource_name.title()} API request timed out",
                    operation=operation,
                    is_timeout=True,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._resource_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=AlbumUnavailableError(
                    message=f"Failed to connect to {self._resource_name.title()} API: {e}",
                    operation=operation,
                )
            )

        except httpx.InvalidURL as e:
            self._logger.warning(
                f"{self._resource_name}_api_invalid_url",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=AlbumUnavailableError(
                    message=f"Invalid {self._resource_name.title()} API URL: {e}",
                    operation=operation,
                )
            )

        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        return Success(value=response, status_code=response.status_code)

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[DomainError] | None:
        """Check HTTP response for a non-2xx status.

        Every non-2xx status is an HTTP failure; the status only picks the
        log event and, for 429, the retry_after hint.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure(AlbumHttpError) if error detected, None if response is 2xx.
        """
        status = response.status_code

        # Success - no error
        if 200 <= status <= 299:
            return None

        body = response.text[:RESPONSE_BODY_MAX_LENGTH]
        retry_after: int | None = None

        if status == 429:
            retry_after = self._parse_retry_after(response.headers.get("Retry-After"))
            self._logger.warning(
                f"{self._resource_name}_api_rate_limited",
                operation=operation,
                retry_after=retry_after,
            )
            message = f"{self._resource_name.title()} API rate limit exceeded"
        elif status == 404:
            self._logger.warning(
                f"{self._resource_name}_api_not_found",
                operation=operation,
            )
            message = f"{self._resource_name.title()} resource not found"
        elif status >= 500:
            self._logger.warning(
                f"{self._resource_name}_api_server_error",
                operation=operation,
                status_code=status,
            )
            message = f"{self._resource_name.title()} API server error: {status}"
        else:
            self._logger.warning(
                f"{self._resource_name}_api_unexpected_status",
                operation=operation,
                status_code=status,
            )
            message = f"Unexpected response from {self._resource_name.title()} API: {status}"

        return Failure(
            error=AlbumHttpError(
                message=message,
                operation=operation,
                status_code=status,
                response_body=body,
                retry_after=retry_after,
            )
        )

    @staticmethod
    def _parse_retry_after(value: str | None) -> int | None:
        """Parse a Retry-After header given in seconds (HTTP dates are ignored)."""
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    def _decode_failure(
        self,
        response: httpx.Response,
        operation: str,
        message: str,
    ) -> Failure[DomainError]:
        """Build a decode Failure for a 2xx response with an unusable body."""
        return Failure(
            error=AlbumInvalidResponseError(
                message=message,
                operation=operation,
                status_code=response.status_code,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], DomainError]:
        """Parse a 2xx response as a JSON object.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(AlbumInvalidResponseError): On empty body, invalid JSON
                or a non-object payload.
        """
        if not response.content.strip():
            self._logger.warning(
                f"{self._resource_name}_api_empty_body",
                operation=operation,
                status_code=response.status_code,
            )
            return self._decode_failure(
                response,
                operation,
                f"Empty response body from {self._resource_name.title()} API",
            )

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"{self._resource_name}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return self._decode_failure(
                response,
                operation,
                f"Invalid JSON response from {self._resource_name.title()} API: {e}",
            )

        if not isinstance(data, dict):
            self._logger.warning(
                f"{self._resource_name}_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            return self._decode_failure(
                response,
                operation,
                f"Expected object response from {self._resource_name.title()} API, "
                f"got {type(data).__name__}",
            )

        self._logger.debug(
            f"{self._resource_name}_api_succeeded",
            operation=operation,
            status_code=response.status_code,
        )
        return Success(value=data, status_code=response.status_code)

    def _parse_json_list(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[list[Any], DomainError]:
        """Parse a 2xx response as a JSON array.

        An empty body is an empty list, not a decode failure.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.

        Returns:
            Success(list): Parsed JSON array.
            Failure(AlbumInvalidResponseError): On invalid JSON or a
                non-array payload.
        """
        if not response.content.strip():
            self._logger.debug(
                f"{self._resource_name}_api_succeeded",
                operation=operation,
                status_code=response.status_code,
                count=0,
            )
            return Success(value=[], status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"{self._resource_name}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return self._decode_failure(
                response,
                operation,
                f"Invalid JSON response from {self._resource_name.title()} API: {e}",
            )

        if not isinstance(data, list):
            self._logger.warning(
                f"{self._resource_name}_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            return self._decode_failure(
                response,
                operation,
                f"Expected array response from {self._resource_name.title()} API, "
                f"got {type(data).__name__}",
            )

        self._logger.debug(
            f"{self._resource_name}_api_succeeded",
            operation=operation,
            status_code=response.status_code,
            count=len(data),
        )
        return Success(value=data, status_code=response.status_code)

    async def _execute_and_parse_object(
        self,
        spec: RequestSpec,
        *,
        operation: str,
    ) -> Result[dict[str, Any], DomainError]:
        """Execute request and parse response as JSON object.

        Combines _execute_request and _parse_json_object for convenience.

        Args:
            spec: Request to execute.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(DomainError): On any error.
        """
        result = await self._execute_request(spec, operation=operation)

        if isinstance(result, Failure):
            return result

        return self._parse_json_object(result.value, operation)

    async def _execute_and_parse_list(
        self,
        spec: RequestSpec,
        *,
        operation: str,
    ) -> Result[list[Any], DomainError]:
        """Execute request and parse response as JSON array.

        Combines _execute_request and _parse_json_list for convenience.

        Args:
            spec: Request to execute.
            operation: Operation name for logging.

        Returns:
            Success(list): Parsed JSON array.
            Failure(DomainError): On any error.
        """
        result = await self._execute_request(spec, operation=operation)

        if isinstance(result, Failure):
            return result

        return self._parse_json_list(result.value, operation)
