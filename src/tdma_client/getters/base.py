"""Base getter with URL caching, lifecycle and transport.

A getter validates its inputs, stores them and recomputes its URL through
``rebuild()``. Every mutation goes through ``_assign``/``_update`` so the
cached URL can never be stale relative to the fields.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar

import httpx

from tdma_client.config import TDMAConfig
from tdma_client.exceptions import (
    TDMAAPIError,
    TDMAAuthError,
    TDMAHandleError,
)
from tdma_client.util import require_non_empty, url_encode

if TYPE_CHECKING:
    from types import TracebackType

    from tdma_client.models import Credentials
    from tdma_client.types import GetterKind

logger = logging.getLogger(__name__)

Validator = Callable[[Any, str], Any]

_MISSING = object()


class APIGetter(ABC):
    """One configured, URL-addressable read request.

    Subclasses set ``kind`` and implement ``rebuild()``, which must return
    the URL for the current field values without side effects.
    """

    kind: ClassVar[GetterKind]

    def __init__(
        self,
        credentials: Credentials,
        *,
        config: TDMAConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.credentials = credentials
        self.config = config or TDMAConfig()
        self._http_client = http_client
        self._url = ""
        self._closed = False

    @abstractmethod
    def rebuild(self) -> str:
        """Compute the URL from the current field values."""

    # Lifecycle

    @property
    def closed(self) -> bool:
        """True once ``close()`` has been called."""
        return self._closed

    def close(self) -> None:
        """Release the getter. Further use raises TDMAHandleError."""
        if not self._closed:
            logger.debug("Closed %s getter", self.kind)
        self._closed = True

    def __enter__(self) -> APIGetter:
        self._check_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else self._url
        return f"<{type(self).__name__} {state}>"

    def _check_open(self) -> None:
        if self._closed:
            raise TDMAHandleError(f"{self.kind} getter has been closed")

    # Field access

    @property
    def url(self) -> str:
        """URL for the current parameters."""
        self._check_open()
        return self._url

    def _read(self, name: str) -> Any:
        self._check_open()
        return getattr(self, name)

    def _assign(self, field: str, value: Any, validate: Validator | None = None) -> None:
        """Validate a single public field, then store it and rebuild."""
        self._check_open()
        if validate is not None:
            value = validate(value, field)
        self._update(**{f"_{field}": value})

    def _update(self, **fields: Any) -> None:
        """Store already-validated fields and rebuild the URL.

        If the rebuild fails the previous field values are restored.
        """
        previous = {name: vars(self).get(name, _MISSING) for name in fields}
        for name, value in fields.items():
            setattr(self, name, value)
        try:
            url = self.rebuild()
        except Exception:
            for name, value in previous.items():
                if value is _MISSING:
                    delattr(self, name)
                else:
                    setattr(self, name, value)
            raise
        self._url = url
        logger.debug("Rebuilt %s url: %s", self.kind, url)

    def _refresh(self) -> None:
        """Rebuild the URL without changing any field."""
        self._update()

    # Transport

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    async def get(self) -> str:
        """Issue the GET request and return the raw response body.

        Raises:
            TDMAHandleError: If the getter has been closed
            TDMAAuthError: If the access token is missing, expired or rejected
            TDMAAPIError: On any other error status
        """
        response = await self._request()
        return self._handle_response(response)

    async def get_json(self) -> dict[str, Any] | list[Any]:
        """Issue the GET request and parse the body (empty body -> {}).

        Raises:
            TDMAAPIError: If the body is not a JSON object or array
        """
        response = await self._request()
        body = self._handle_response(response)
        if not body:
            return {}

        try:
            result = json.loads(body)
        except ValueError as e:
            msg = f"Invalid JSON response: {e}"
            raise TDMAAPIError(msg, status_code=response.status_code) from e

        if not isinstance(result, dict | list):
            msg = f"Unexpected JSON response: {type(result).__name__}"
            raise TDMAAPIError(msg, status_code=response.status_code)
        return result

    async def _request(self) -> httpx.Response:
        self._check_open()
        if not self.credentials.access_token:
            raise TDMAAuthError("No access token available")
        if self.credentials.is_expired:
            raise TDMAAuthError("Access token has expired")

        url = self._url
        headers = self.credentials.auth_headers()
        headers["Accept"] = "application/json"

        logger.debug("Request: GET %s", url)

        if self._http_client is not None:
            return await self._http_client.request("GET", url, headers=headers)
        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            return await client.request("GET", url, headers=headers)

    def _handle_response(self, response: httpx.Response) -> str:
        """Handle API response, raising appropriate errors."""
        if response.status_code in (401, 403):
            raise TDMAAuthError(
                f"Not authorized: {response.status_code}",
                status_code=response.status_code,
            )

        if response.status_code >= 400:
            try:
                error_body = response.json()
            except ValueError:
                error_body = None

            error_msg = f"API error: {response.status_code}"
            if isinstance(error_body, dict) and error_body.get("error"):
                error_msg = str(error_body["error"])

            raise TDMAAPIError(
                error_msg,
                status_code=response.status_code,
                response_body=error_body if isinstance(error_body, dict) else None,
            )

        return response.text


class AccountGetterBase(APIGetter):
    """Getter rooted under a specific, non-empty account id."""

    def __init__(
        self,
        credentials: Credentials,
        account_id: str,
        *,
        config: TDMAConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(credentials, config=config, http_client=http_client)
        self._account_id = require_non_empty(account_id, "account_id")

    @property
    def account_id(self) -> str:
        """Account the request is scoped to."""
        return self._read("_account_id")

    @account_id.setter
    def account_id(self, value: str) -> None:
        self._assign("account_id", value, require_non_empty)

    def _account_url(self, suffix: str = "") -> str:
        """URL under ``accounts/{account_id}``."""
        return f"{self.config.accounts_url}{url_encode(self._account_id)}{suffix}"
