"""User API client.

A thin wrapper around the HTTP surface of the User API, built on the
``requests`` library.  The client can read the service's OpenAPI
document (either a local ``openapi.json`` file or the live ``/doc``
route) to discover the paths of the user operations.  If no document is
available, or it does not describe an operation, the client falls back
to the default routes served from the service root:

* :meth:`list_users` – ``GET /``
* :meth:`create_user` – ``POST /``
* :meth:`update_user` – ``PUT /{id}``
* :meth:`delete_user` – ``DELETE /{id}``

Every operation returns a ``(data, error)`` tuple.  On success
``error`` is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

_PATH_PARAM = re.compile(r"\{[^}]+\}")


@dataclass
class ApiEndpoint:
    """Represents a discovered API endpoint.

    Attributes:
        path: The URI template, e.g. ``/`` or ``/{id}``.
        method: The HTTP method in upper case (``GET``, ``POST``, etc.).
        operation_id: Optional identifier for the operation.
    """

    path: str
    method: str
    operation_id: Optional[str] = None

    @property
    def has_id(self) -> bool:
        return bool(_PATH_PARAM.search(self.path))

    def format(self, user_id: Any) -> str:
        return _PATH_PARAM.sub(str(user_id), self.path, count=1)


class UserAPIClient:
    """Client for the User API."""

    # Tags that mark user operations in the OpenAPI document.  Matched
    # case-insensitively.
    _USER_TAGS = {"user", "users"}

    _DEFAULT_ENDPOINTS = [
        ("GET", "/"),
        ("POST", "/"),
        ("PUT", "/{id}"),
        ("DELETE", "/{id}"),
    ]

    def __init__(
        self,
        *,
        base_url: str,
        openapi_path: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            openapi_path: Optional path to an OpenAPI JSON file.  If
                provided and readable, endpoints are inferred from it.
            session: Optional requests session (or any object with a
                compatible ``request`` method).  A new session is
                created when omitted.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.spec: Dict[str, Any] = {}
        self.endpoints: List[ApiEndpoint] = []
        if openapi_path and os.path.exists(openapi_path):
            try:
                with open(openapi_path, "r", encoding="utf-8") as f:
                    self.load_spec(json.load(f))
            except (OSError, ValueError) as e:
                logger.warning(
                    "Failed to load OpenAPI specification %s: %s. Falling back to defaults.",
                    openapi_path,
                    e,
                )

    # ------------------------------------------------------------------
    # OpenAPI discovery
    # ------------------------------------------------------------------
    def load_spec(self, spec: Dict[str, Any]) -> None:
        """Record the user operations described by an OpenAPI document."""
        self.spec = spec
        self.endpoints = []
        for path, methods in spec.get("paths", {}).items():
            if not isinstance(methods, dict):
                continue
            for method_lower, op in methods.items():
                if not isinstance(op, dict):
                    continue
                tags = {t.lower() for t in op.get("tags", [])}
                if tags & self._USER_TAGS:
                    self.endpoints.append(
                        ApiEndpoint(
                            path=path,
                            method=method_lower.upper(),
                            operation_id=op.get("operationId"),
                        )
                    )
        logger.debug("Discovered %d user endpoints", len(self.endpoints))

    def discover(self, doc_path: str = "/doc") -> Optional[Error]:
        """Fetch the OpenAPI document from the running service.

        Returns ``None`` on success or an error dictionary when the
        document could not be retrieved.
        """
        data, error = self._request("GET", doc_path)
        if error:
            return error
        if not isinstance(data, dict):
            return {"status_code": None, "message": "OpenAPI document is not an object"}
        self.load_spec(data)
        return None

    def _pick_endpoint(self, method: str, *, has_id: bool) -> ApiEndpoint:
        """Select the endpoint for ``method``.

        Discovered endpoints are searched first, in document order; the
        default routes are used when none match.
        """
        method_upper = method.upper()
        for ep in self.endpoints:
            if ep.method == method_upper and ep.has_id == has_id:
                return ep
        for default_method, path in self._DEFAULT_ENDPOINTS:
            ep = ApiEndpoint(path=path, method=default_method)
            if ep.method == method_upper and ep.has_id == has_id:
                return ep
        raise ValueError(f"No default endpoint for {method_upper} (has_id={has_id})")

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, form: Dict[str, Any] | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/{id}``
                already formatted).
            form: Form fields to send as the request body.
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success.  On failure ``data`` is ``None`` and
            ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                data=form,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        try:
            data = response.json() if response.content else None
        except ValueError:
            data = None

        if response.status_code >= 400:
            message = ""
            if isinstance(data, dict):
                message = data.get("message") or data.get("detail") or ""
            if not message:
                message = response.text or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        return data, None

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``.  ``users`` is empty on failure.
        """
        ep = self._pick_endpoint("GET", has_id=False)
        data, error = self._request(ep.method, ep.path)
        if error:
            return [], error
        if isinstance(data, dict) and isinstance(data.get("users"), list):
            return data["users"], None
        return [], None

    def create_user(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user called ``name``.

        Returns:
            A tuple ``(user, error)``.
        """
        ep = self._pick_endpoint("POST", has_id=False)
        data, error = self._request(ep.method, ep.path, form={"name": name})
        if error:
            return None, error
        return (data or {}).get("user"), None

    def update_user(self, user_id: int, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Rename the user ``user_id``.

        Returns:
            A tuple ``(user, error)``.  The service echoes ``user_id`` and
            ``name`` back even when no such user exists.
        """
        ep = self._pick_endpoint("PUT", has_id=True)
        data, error = self._request(ep.method, ep.format(user_id), form={"name": name})
        if error:
            return None, error
        return (data or {}).get("user"), None

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete the user ``user_id``.

        Returns:
            A tuple ``(success, error)``.
        """
        ep = self._pick_endpoint("DELETE", has_id=True)
        _, error = self._request(ep.method, ep.format(user_id))
        if error:
            return False, error
        return True, None
