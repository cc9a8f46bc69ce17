"""JSON-over-HTTP client for the drive endpoints of a single instance."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..errors import MigratorError
from .models import DriveConfig, DriveFile, Folder

# Console output is handled by the CLI; API calls only go to the log file
_api_logger = logging.getLogger("drive_api")

# Key under which the access token is merged into every request body
TOKEN_PARAM = "i"

ModelT = TypeVar("ModelT", bound=BaseModel)


class DriveAPIError(MigratorError):
    """Raised when the instance rejects a request or returns garbage."""

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        code: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint
        self.code = code
        self.status_code = status_code

    def __str__(self) -> str:
        parts = [self.message]
        if self.code:
            parts.append(f"code={self.code}")
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        if self.endpoint:
            parts.append(f"endpoint={self.endpoint}")
        return " | ".join(parts)


class DriveClient:
    """Drive API client bound to one instance and access token.

    Every request is a POST to ``{instance}/api/{endpoint}`` with a JSON
    body holding the parameters plus the token. One ``httpx.AsyncClient``
    is shared by all calls until :meth:`close` is called.

    Usage:
        async with DriveClient(config) as client:
            folders = await client.list_folders()
    """

    def __init__(
        self,
        config: DriveConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            config: Instance URL, token and HTTP settings.
            transport: Optional transport override (used by tests).
        """
        self.config = config
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None
        self._api_call_count = 0

    @property
    def api_call_count(self) -> int:
        """Number of requests issued so far."""
        return self._api_call_count

    async def __aenter__(self) -> "DriveClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.config.timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def call(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """POST to an API endpoint and return the decoded JSON response.

        Parameters set to ``None`` are left out of the body.

        Args:
            endpoint: Path relative to ``/api/``, e.g. ``"drive/folders"``.
            params: Request parameters.

        Returns:
            Decoded JSON, or None for an empty response body.

        Raises:
            DriveAPIError: On transport errors, error statuses, error
                payloads or non-JSON bodies.
        """
        self._api_call_count += 1
        call_no = self._api_call_count
        url = f"{self.config.api_base}/{endpoint}"

        body = {k: v for k, v in (params or {}).items() if v is not None}
        _api_logger.info(f"API CALL #{call_no} | POST {endpoint} | params: {body}")
        body[TOKEN_PARAM] = self.config.access_token

        client = await self._get_client()
        try:
            response = await client.post(url, content=json.dumps(body))
        except httpx.HTTPError as e:
            _api_logger.error(f"API CALL #{call_no} | TRANSPORT ERROR: {e!r}")
            raise DriveAPIError(f"Request failed: {e}", endpoint=endpoint) from e

        if not response.content:
            if response.is_error:
                _api_logger.error(f"API CALL #{call_no} | HTTP {response.status_code}")
                raise DriveAPIError(
                    f"HTTP {response.status_code}",
                    endpoint=endpoint,
                    status_code=response.status_code,
                )
            _api_logger.info(f"API CALL #{call_no} | SUCCESS: <empty>")
            return None

        try:
            result = response.json()
        except ValueError as e:
            _api_logger.error(f"API CALL #{call_no} | INVALID JSON (HTTP {response.status_code})")
            raise DriveAPIError(
                "Response was not valid JSON",
                endpoint=endpoint,
                status_code=response.status_code,
            ) from e

        if isinstance(result, dict) and isinstance(result.get("error"), dict):
            error = result["error"]
            _api_logger.error(f"API CALL #{call_no} | ERROR: {error}")
            raise DriveAPIError(
                error.get("message", "Unknown API error"),
                endpoint=endpoint,
                code=error.get("code"),
                status_code=response.status_code,
            )

        if response.is_error:
            _api_logger.error(f"API CALL #{call_no} | HTTP {response.status_code}")
            raise DriveAPIError(
                f"HTTP {response.status_code}",
                endpoint=endpoint,
                status_code=response.status_code,
            )

        if isinstance(result, list):
            _api_logger.info(f"API CALL #{call_no} | SUCCESS: {len(result)} item(s)")
        else:
            _api_logger.info(f"API CALL #{call_no} | SUCCESS")
        return result

    async def list_folders(self, folder_id: str | None = None) -> list[Folder]:
        """List folders directly under ``folder_id`` (root when None)."""
        result = await self.call("drive/folders", {"folderId": folder_id})
        return _parse_list(Folder, result, "drive/folders")

    async def find_files(self, name: str, folder_id: str | None) -> list[DriveFile]:
        """Find files named ``name`` inside ``folder_id``."""
        result = await self.call("drive/files/find", {"name": name, "folderId": folder_id})
        return _parse_list(DriveFile, result, "drive/files/find")

    async def update_file_comment(self, file_id: str, comment: str | None) -> None:
        """Set a file's comment (alt-text). A None comment is not sent."""
        await self.call("drive/files/update", {"fileId": file_id, "comment": comment})


def _parse_list(model: type[ModelT], result: Any, endpoint: str) -> list[ModelT]:
    if not isinstance(result, list):
        raise DriveAPIError(
            f"Expected a list, got {type(result).__name__}",
            endpoint=endpoint,
        )
    try:
        return [model.model_validate(item) for item in result]
    except ValidationError as e:
        _api_logger.error(f"MALFORMED RESPONSE | {endpoint} | {e}")
        raise DriveAPIError(
            f"Unexpected {model.__name__} in response: {e.error_count()} validation error(s)",
            endpoint=endpoint,
        ) from e
