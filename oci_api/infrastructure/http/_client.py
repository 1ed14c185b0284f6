"""
HTTP client for OCI REST APIs.

Every request is signed with the configured RequestSigner. The headers covered
by the signature (date, host and, for requests with a body, content-length,
content-type and x-content-sha256) are attached with exactly the values that
were signed, since the server recomputes the signing string from them.

No retries happen here: a failed call raises and the caller decides.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from urllib.parse import urlencode

import requests

from ...auth import DEFAULT_CONTENT_TYPE, RequestSigner, body_sha256
from ...entities.exceptions import ApiError, HttpError
from ...utils.logging_utils import get_logger

if TYPE_CHECKING:
    from ...configuration import OciConfig

logger = get_logger()

DEFAULT_TIMEOUT = 30  # seconds
OCI_DOMAIN = "oci.oraclecloud.com"


def service_host(service: str, region: str) -> str:
    """Host of a regional OCI service endpoint, e.g. ``ctrl.email.us-ashburn-1.oci.oraclecloud.com``."""
    return f"{service}.{region}.{OCI_DOMAIN}"


class OciClient:
    """
    Thin signed wrapper around a ``requests.Session``.

    The client owns its signer (and through it the signing key handle);
    closing the client closes both the session and the signer.
    """

    def __init__(
        self,
        config: OciConfig,
        *,
        signer: RequestSigner | None = None,
        timeout: int = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        """
        Args:
            config: OCI credentials and region.
            signer: Signer to use; built from ``config`` when omitted.
            timeout: HTTP request timeout in seconds.
            session: Session to send requests with, a new one when omitted.

        Raises:
            ConfigError: If no signer is given and the private key cannot be parsed.
        """
        self.config = config
        self.signer = signer or RequestSigner.from_config(config)
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def region(self) -> str:
        return self.config.region

    @property
    def compartment_id(self) -> str:
        """Configured compartment, the tenancy when none is set."""
        return self.config.compartment

    def close(self) -> None:
        self._session.close()
        self.signer.close()

    def __enter__(self) -> OciClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def build_headers(
        self,
        method: str,
        host: str,
        path: str,
        body: str | bytes | None = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> dict[str, str]:
        """Sign a request and return every header the signature covers. ``str`` bodies count as UTF-8 bytes."""
        body = _encode_body(None, body)
        content_type = content_type or DEFAULT_CONTENT_TYPE
        date, authorization = self.signer.sign(method, path, host, body, content_type=content_type)

        headers = {
            "host": host,
            "date": date,
            "authorization": authorization,
        }
        if body is not None:
            headers["content-type"] = content_type
            headers["content-length"] = str(len(body))
            headers["x-content-sha256"] = body_sha256(body)

        return headers

    def request(
        self,
        method: str,
        host: str,
        path: str,
        *,
        params: dict | None = None,
        json: object = None,
        body: str | bytes | None = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """
        Send a signed request to ``https://{host}{path}``.

        Args:
            params: Query parameters, appended to the path before signing.
            json: Payload serialized as compact JSON; takes precedence over ``body``.
            body: Raw body, ``str`` bodies are sent UTF-8 encoded.
            headers: Extra headers. They are not signed, and cannot replace signed ones.

        Raises:
            AuthError: If the request cannot be signed.
            HttpError: On connection errors and timeouts.
            ApiError: On non-2xx responses.
        """
        if params:
            separator = "&" if "?" in path else "?"
            path = f"{path}{separator}{urlencode(params)}"

        payload = _encode_body(json, body)
        signed_headers = self.build_headers(method, host, path, payload, content_type)

        request_headers = dict(headers or {})
        request_headers.update(signed_headers)

        url = f"https://{host}{path}"
        logger.debug("%s %s", method.upper(), url)

        try:
            response = self._session.request(
                method.upper(),
                url,
                data=payload,
                headers=request_headers,
                timeout=self._timeout,
            )
        except requests.Timeout as e:
            raise HttpError(f"Request to {host} timed out: {e}") from e
        except requests.RequestException as e:
            raise HttpError(f"Request to {host} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning("⚠️ %s %s returned %d", method.upper(), path, response.status_code)
            raise ApiError(str(response.status_code), response.text)

        return response

    def get(self, host: str, path: str, **kwargs) -> requests.Response:
        return self.request("GET", host, path, **kwargs)

    def post(self, host: str, path: str, **kwargs) -> requests.Response:
        return self.request("POST", host, path, **kwargs)

    def put(self, host: str, path: str, **kwargs) -> requests.Response:
        return self.request("PUT", host, path, **kwargs)

    def delete(self, host: str, path: str, **kwargs) -> requests.Response:
        return self.request("DELETE", host, path, **kwargs)


def _encode_body(payload: object, body: str | bytes | None) -> bytes | None:
    if payload is not None:
        return json.dumps(payload, separators=(",", ":")).encode("utf-8")

    if isinstance(body, str):
        return body.encode("utf-8")

    return body
