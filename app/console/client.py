"""
HTTP client the console uses to talk to the VPC REST API.

The console never touches the record store directly; everything goes
through `/vpcs` exactly like any other API consumer.  Non-2xx responses are
raised as `ApiRequestError` carrying the server's ``error`` message so the
view can show it verbatim.
"""

import logging
from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


class ApiRequestError(Exception):
    """A console request failed; ``message`` is safe to show to the user."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class VPCApiClient:
    """Thin wrapper around an `httpx.Client` pointed at the REST API."""

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    @classmethod
    def from_settings(cls) -> "VPCApiClient":
        return cls(
            httpx.Client(
                base_url=settings.console_api_base_url,
                timeout=settings.console_api_timeout_seconds,
            )
        )

    def close(self) -> None:
        self._http.close()

    # ── Internal helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("error"):
            return str(payload["error"])
        return response.reason_phrase or f"HTTP {response.status_code}"

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise ApiRequestError(str(exc) or exc.__class__.__name__) from exc

        if response.is_error:
            message = self._error_message(response)
            logger.warning("%s %s returned %d: %s", method, path, response.status_code, message)
            raise ApiRequestError(message, response.status_code)
        return response.json()

    # ── API operations ────────────────────────────────────────────────────────

    def list_vpcs(self) -> list[dict]:
        return self._request("GET", "/vpcs")

    def get_vpc(self, vpc_id: str) -> dict:
        return self._request("GET", f"/vpcs/{quote(vpc_id, safe='')}")

    def create_vpc(self, fields: Mapping[str, str]) -> dict:
        """POST the form fields; a blank description is left out."""
        payload = {k: v for k, v in fields.items() if not (k == "description" and not v)}
        return self._request("POST", "/vpcs", json=payload)

    def delete_vpc(self, vpc_id: str) -> str:
        body = self._request("DELETE", f"/vpcs/{quote(vpc_id, safe='')}")
        return body.get("message", "")
