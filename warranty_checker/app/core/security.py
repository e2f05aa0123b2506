"""
Security helpers for anti-forgery nonces and admin authentication.

Nonces are small signed tokens embedded in the public lookup form.  A
token is ``payload.signature`` where the payload is a base64url encoded
JSON object carrying the action name and an expiration timestamp
(``exp``), and the signature is an HMAC-SHA256 of the payload using the
application's secret key.  Verification checks the signature in
constant time, then the action and the expiry.

The record management API is protected by a single static bearer token
(``ADMIN_TOKEN``).  Requests without credentials get 401, requests with
a wrong token get 403.
"""

import base64
import hmac
import hashlib
import json
import logging
import time
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings


logger = logging.getLogger(__name__)


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC-SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_nonce(action: str, lifetime: Optional[int] = None) -> str:
    """Issue a signed nonce bound to ``action``.

    Parameters
    ----------
    action : str
        Name of the protected action (e.g. ``"wcf_check_warranty"``).  A
        nonce issued for one action is rejected for any other.
    lifetime : Optional[int]
        Validity in seconds.  Defaults to ``settings.nonce_lifetime``.

    Returns
    -------
    str
        The token, safe to embed in HTML attributes and form bodies.
    """
    exp_seconds = lifetime if lifetime is not None else settings.nonce_lifetime
    payload = {"act": action, "exp": int(time.time()) + exp_seconds}
    payload_b64 = _b64_url_encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
    signature_b64 = _b64_url_encode(_sign(payload_b64.encode("utf-8"), settings.secret_key))
    return f"{payload_b64}.{signature_b64}"


def verify_nonce(token: Optional[str], action: str) -> bool:
    """Return ``True`` when ``token`` is a valid, unexpired nonce for ``action``."""
    if not token:
        return False
    parts = token.split(".")
    if len(parts) != 2:
        return False
    payload_b64, signature_b64 = parts
    try:
        actual_sig = _b64_url_decode(signature_b64)
        payload = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return False
    expected_sig = _sign(payload_b64.encode("utf-8"), settings.secret_key)
    if not hmac.compare_digest(expected_sig, actual_sig):
        return False
    if not isinstance(payload, dict) or payload.get("act") != action:
        return False
    try:
        return int(payload.get("exp", 0)) >= int(time.time())
    except (TypeError, ValueError):
        return False


security = HTTPBearer(auto_error=False)


def require_admin(credentials: HTTPAuthorizationCredentials = Depends(security)) -> str:
    """Dependency that only lets requests bearing ``ADMIN_TOKEN`` through.

    Returns the presented token on success.
    """
    if credentials is None or not settings.admin_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not hmac.compare_digest(
        credentials.credentials.encode("utf-8"), settings.admin_token.encode("utf-8")
    ):
        logger.warning("Rejected admin request with an invalid token")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin token",
        )
    return credentials.credentials
