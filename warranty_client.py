"""Warranty Checker API client.

A small wrapper around the public lookup flow, for scripts and bots that
want to check a warranty without a browser.  The client uses the
``requests`` library internally.

* :meth:`WarrantyClient.fetch_nonce` loads the form page and extracts
  the anti-forgery nonce embedded in it.
* :meth:`WarrantyClient.check_warranty` posts the ``check_warranty``
  ajax call and returns the warranty fields.

Lookup outcomes reported by the server (missing input, no matching
warranty, rejected nonce) raise :class:`WarrantyLookupError` with the
server's message.  Network errors, server errors and responses that are
not a JSON envelope raise :class:`TransportFailure`; callers should show
a generic "try again later" message for those.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

import requests


logger = logging.getLogger(__name__)

_NONCE_RE = re.compile(r'name="wcf_nonce"\s+value="([^"]*)"')


class TransportFailure(Exception):
    """The server could not be reached or did not answer properly."""


class WarrantyLookupError(Exception):
    """The server answered with a failure envelope."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class WarrantyClient:
    """Client for the public warranty lookup."""

    form_path = "/api/v1/warranty/form"
    ajax_path = "/api/v1/ajax"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``https://example.com``.
            session: Optional requests session.  If not supplied a session
                will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_nonce(self) -> str:
        """Return the nonce embedded in the lookup form."""
        url = f"{self.base_url}{self.form_path}"
        try:
            logger.debug("Fetching lookup form from %s", url)
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Could not load lookup form: %s", exc)
            raise TransportFailure(str(exc)) from exc
        match = _NONCE_RE.search(response.text)
        if not match:
            raise TransportFailure("Lookup form does not contain a nonce")
        return match.group(1)

    def check_warranty(self, serial: str, contact: str, nonce: Optional[str] = None) -> Dict[str, Any]:
        """Look up a warranty and return its fields.

        Args:
            serial: Serial number of the product.
            contact: Email or phone used for the purchase.
            nonce: Anti-forgery nonce.  Fetched from the form page when
                omitted.
        Returns:
            The ``data`` object of the success envelope (``serial``,
            ``status``, ``purchaseDate``, ``expirationDate``, ``notes``).
        """
        if nonce is None:
            nonce = self.fetch_nonce()
        url = f"{self.base_url}{self.ajax_path}"
        body = {"action": "check_warranty", "nonce": nonce, "serial": serial, "contact": contact}
        try:
            logger.debug("Sending warranty lookup to %s", url)
            response = self.session.post(url, data=body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Warranty lookup failed: %s", exc)
            raise TransportFailure(str(exc)) from exc

        if response.status_code >= 500:
            logger.error("Warranty lookup failed with status %s", response.status_code)
            raise TransportFailure(f"Server error {response.status_code}")
        try:
            envelope = response.json()
        except ValueError as exc:
            raise TransportFailure("Response is not JSON") from exc
        if not isinstance(envelope, dict) or "success" not in envelope:
            raise TransportFailure("Response is not a lookup envelope")

        data = envelope.get("data") or {}
        if envelope["success"]:
            return data
        message = data.get("message", "") if isinstance(data, dict) else ""
        raise WarrantyLookupError(message, status_code=response.status_code)
