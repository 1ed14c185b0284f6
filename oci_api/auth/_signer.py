"""
OCI request signer.

Implements the HTTP Signature scheme used by Oracle Cloud Infrastructure:
the date, request target and host (plus the content headers for requests with
a body) are joined into a canonical signing string, signed with RSA PKCS#1v15
+ SHA-256, and described in an ``Authorization: Signature ...`` header.

The server rebuilds the signing string from the headers it receives, so the
caller must send exactly the headers named in the Authorization header, with
exactly the values that were signed.
"""

from __future__ import annotations

import base64
import hashlib
from email.utils import formatdate
from typing import TYPE_CHECKING

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from ..entities import CredentialIdentity, SignedHeaders
from ..entities.exceptions import AuthError
from ..utils.logging_utils import get_logger
from ._signing_key import SigningKeyHandle, SigningKeyProvider

if TYPE_CHECKING:
    from ..configuration import OciConfig

logger = get_logger()

DEFAULT_CONTENT_TYPE = "application/json"
SIGNATURE_VERSION = "1"
SIGNATURE_ALGORITHM = "rsa-sha256"

BASE_SIGNED_HEADERS = ("date", "(request-target)", "host")
BODY_SIGNED_HEADERS = BASE_SIGNED_HEADERS + ("content-length", "content-type", "x-content-sha256")


def format_http_date(timestamp: float | None = None) -> str:
    """Format a timestamp (default: now) as an HTTP-date, e.g. ``Thu, 05 Jan 2023 00:00:00 GMT``."""
    return formatdate(timestamp, usegmt=True)


def _body_bytes(body: str | bytes) -> bytes:
    return body.encode("utf-8") if isinstance(body, str) else bytes(body)


def body_sha256(body: str | bytes) -> str:
    """Base64-encoded SHA-256 digest of the body, as sent in ``x-content-sha256``."""
    return base64.b64encode(hashlib.sha256(_body_bytes(body)).digest()).decode("ascii")


def signed_header_names(has_body: bool) -> str:
    return " ".join(BODY_SIGNED_HEADERS if has_body else BASE_SIGNED_HEADERS)


def build_signing_string(
    method: str,
    path: str,
    host: str,
    date: str,
    body: str | bytes | None = None,
    content_type: str | None = None,
) -> str:
    """
    Build the canonical signing string.

    The field order is fixed and matches ``signed_header_names``:

        date: <date>
        (request-target): <method lowercased> <path>
        host: <host>

    followed, when a body is present (an empty body counts), by:

        content-length: <body length in bytes>
        content-type: <content type, default application/json>
        x-content-sha256: <base64 SHA-256 of the body>

    Example:
        >>> build_signing_string("GET", "/foo", "example.com", "Thu, 05 Jan 2023 00:00:00 GMT")
        'date: Thu, 05 Jan 2023 00:00:00 GMT\\n(request-target): get /foo\\nhost: example.com'
    """
    lines = [
        f"date: {date}",
        f"(request-target): {method.lower()} {path}",
        f"host: {host}",
    ]

    if body is not None:
        lines += [
            f"content-length: {len(_body_bytes(body))}",
            f"content-type: {content_type or DEFAULT_CONTENT_TYPE}",
            f"x-content-sha256: {body_sha256(body)}",
        ]

    return "\n".join(lines)


def build_authorization_header(headers: str, key_id: str, signature: str) -> str:
    return (
        f'Signature version="{SIGNATURE_VERSION}",headers="{headers}",keyId="{key_id}",'
        f'algorithm="{SIGNATURE_ALGORITHM}",signature="{signature}"'
    )


class RequestSigner:
    """
    Signs OCI API requests with an identity and a shared RSA key handle.

    Signing is stateless: one signer may be used concurrently from any number
    of threads. The signer owns its key handle; ``share()`` gives another
    signer over the same parsed key, and ``close()`` releases the handle.
    """

    def __init__(self, identity: CredentialIdentity, key: SigningKeyHandle):
        self.identity = identity
        self.key = key

    @classmethod
    def from_config(cls, config: OciConfig) -> RequestSigner:
        """
        Build a signer from an ``OciConfig``.

        ``config.private_key`` holds PEM text (staged through a temporary file)
        or a key path (parsed in place).

        Raises:
            ConfigError: If the private key cannot be parsed.
        """
        return cls(config.identity, SigningKeyProvider.from_key_input(config.private_key))

    def share(self) -> RequestSigner:
        return RequestSigner(self.identity, self.key.share())

    def close(self) -> None:
        self.key.close()

    def __enter__(self) -> RequestSigner:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def sign(
        self,
        method: str,
        path: str,
        host: str,
        body: str | bytes | None = None,
        date: str | None = None,
        content_type: str | None = None,
    ) -> SignedHeaders:
        """
        Sign a request.

        Args:
            method: HTTP method, e.g. "GET" or "POST".
            path: Request path including the query string, e.g. "/20170907/configuration?compartmentId=...".
            host: Value of the Host header.
            body: Request body for POST/PUT requests; ``None`` when there is no body.
            date: Date header value; defaults to the current time. Fixing it makes signing deterministic.
            content_type: Content type of the body; defaults to "application/json".

        Returns:
            SignedHeaders(date, authorization) to send as the ``date`` and ``authorization`` headers.

        Raises:
            AuthError: If the key handle is closed or the key is rejected while signing.
        """
        if date is None:
            date = format_http_date()
        signing_string = build_signing_string(method, path, host, date, body, content_type)

        private_key = self.key.private_key
        try:
            signature = private_key.sign(signing_string.encode("utf-8"), padding.PKCS1v15(), hashes.SHA256())
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise AuthError(f"Failed to sign request: {e}") from e

        headers = signed_header_names(body is not None)
        logger.trace("Signed %s %s for %s with headers [%s]", method.upper(), path, host, headers)

        authorization = build_authorization_header(
            headers,
            self.identity.key_id,
            base64.b64encode(signature).decode("ascii"),
        )

        return SignedHeaders(date, authorization)
