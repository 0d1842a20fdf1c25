"""HTTP client for the user directory API.

Thin wrapper over ``requests``: every method returns parsed JSON (or raw
bytes for files) and raises :class:`ApiError` on transport failures and
non-2xx responses.  The error message is taken from the ``error`` field
of the response body when the service provides one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when a request to the API fails."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UsersApiClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            response.raise_for_status()
            return response
        except requests.HTTPError as exc:
            response = exc.response
            status = response.status_code if response is not None else None
            message = ""
            if response is not None:
                try:
                    body = response.json()
                    message = body.get("error") or body.get("detail") or str(body)
                except ValueError:
                    message = response.text
            raise ApiError(message or str(exc), status_code=status) from exc
        except requests.RequestException as exc:
            raise ApiError(str(exc)) from exc

    def hello(self) -> Dict[str, Any]:
        return self._request("GET", "/api/hello").json()

    def get_user(self, user_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/users/{user_id}").json()

    def list_users(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/all-users").json()

    def create_user(self, name: str, email: str, password: str) -> Dict[str, Any]:
        payload = {"name": name, "email": email, "password": password}
        return self._request("POST", "/api/users", json_body=payload).json()

    def get_file(self, filename: str) -> bytes:
        return self._request("GET", f"/api/file/{filename}").content
