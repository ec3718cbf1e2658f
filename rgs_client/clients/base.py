"""Base RGS API client with request building, error mapping and logging."""

import logging
import os
from typing import Any

import httpx
from cuid2 import cuid_wrapper
from pydantic import BaseModel, Field

from rgs_client.exceptions import BadRequestRgsError, RgsError
from rgs_client.utils.logging import get_logger

cuid = cuid_wrapper()


class RgsApiConfig(BaseModel):
    """Connection settings issued to a partner by RGS."""

    host: str = Field(..., min_length=1, description="Base URL of the RGS API")
    partner_id: int = Field(..., description="Partner identifier sent with every request")
    timeout: float = Field(default=30.0, gt=0.0, description="Request timeout in seconds")

    @classmethod
    def from_env(cls) -> "RgsApiConfig":
        """Read settings from RGS_API_HOST, RGS_PARTNER_ID and RGS_API_TIMEOUT."""
        host = os.getenv("RGS_API_HOST")
        if not host:
            raise ValueError("RGS_API_HOST environment variable is required")

        partner_id = os.getenv("RGS_PARTNER_ID")
        if not partner_id:
            raise ValueError("RGS_PARTNER_ID environment variable is required")

        return cls(host=host, partner_id=partner_id, timeout=os.getenv("RGS_API_TIMEOUT", 30.0))


class BaseRgsClient:
    """Proxying client: every call returns the raw ``httpx.Response``.

    The ``httpx.Client`` is owned by the caller and is never closed here.
    """

    def __init__(self, http_client: httpx.Client, config: RgsApiConfig, logger: logging.Logger | None = None):
        """Initialize client.

        Args:
            http_client: Transport used to send requests
            config: Partner connection settings
            logger: Logger for request/response records (defaults to the module logger)
        """
        self.http_client = http_client
        self.config = config
        self.logger = logger if logger is not None else get_logger(__name__)

    def build_request(
        self, method: str, path: str, body: str = "", params: dict[str, Any] | None = None
    ) -> httpx.Request:
        """Build a request against the configured host.

        Args:
            method: HTTP method
            path: API path, e.g. ``/api/v1/patient``
            body: JSON text of the request body, empty for none
            params: Query string parameters

        Returns:
            Request ready to be passed to ``send``
        """
        url = self.config.host.rstrip("/") + "/" + path.lstrip("/")
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-Partner-Id": str(self.config.partner_id),
            "X-Request-Id": cuid(),
        }
        return self.http_client.build_request(
            method,
            url,
            content=body or None,
            params=params,
            headers=headers,
            timeout=self.config.timeout,
        )

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request and map error statuses to exceptions.

        Raises:
            BadRequestRgsError: On a 4xx response
            RgsError: On a 5xx response or a transport failure
        """
        request_id = request.headers.get("X-Request-Id")
        self.logger.info(f"RGS request {request_id}: {request.method} {request.url}")

        try:
            response = self.http_client.send(request)
        except httpx.HTTPError as e:
            self.logger.error(f"RGS request {request_id} failed: {e}", exc_info=True)
            raise RgsError(f"Failed to reach RGS API: {e}") from e

        self.logger.info(f"RGS response {request_id}: {response.status_code}")

        if response.is_client_error:
            self.logger.warning(f"RGS rejected request {request_id}: {response.status_code} {response.text}")
            raise BadRequestRgsError(
                f"RGS API rejected the request with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                response=response,
            )

        if response.is_server_error:
            self.logger.warning(f"RGS server error for request {request_id}: {response.status_code}")
            raise RgsError(
                f"RGS API failed with status {response.status_code}",
                status_code=response.status_code,
                response=response,
            )

        return response
