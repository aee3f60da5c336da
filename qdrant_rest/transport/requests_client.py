import json
import logging
from typing import Any, Dict, Optional

import requests

from .exceptions import HttpError, NetworkError, SerializationError
from .http_client import HttpClient

logger = logging.getLogger("qdrant_rest.transport")

BODY_METHODS = ("POST", "PUT", "PATCH")


class RequestsHttpClient(HttpClient):
    """
    HttpClient over requests. One call per request, no retries.

    timeout is handed to requests as is, so it bounds the connect phase and each
    socket read separately rather than the whole call. A slow server that keeps
    sending data can take longer than timeout in total.
    """

    def __init__(self, base_url: str, api_key: Optional[str] = None, timeout: int = 30):
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.api_key is not None:
            headers["api-key"] = self.api_key
        return headers

    def _encode_body(self, method: str, data: Optional[Dict[str, Any]]) -> Optional[str]:
        if method not in BODY_METHODS:
            return None
        # Body-bearing methods always carry a body; None goes out as {}
        body = data if data is not None else {}
        try:
            return json.dumps(body, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to encode request data as JSON: {e}") from e

    def request(self, method: str, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        body = self._encode_body(method, data)

        logger.debug(f"{method} {url}")
        try:
            response = requests.request(
                method,
                url,
                headers=self._headers(),
                data=body,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise NetworkError(f"Request error: {e}") from e

        decoded = self._decode_response(response)
        self._check_status(response.status_code, decoded)
        return decoded

    def _decode_response(self, response) -> Dict[str, Any]:
        try:
            decoded = json.loads(response.text)
        except ValueError as e:
            raise SerializationError(f"Failed to decode JSON response: {e}") from e
        if not isinstance(decoded, dict):
            raise SerializationError(
                f"Failed to decode JSON response: expected an object, got {type(decoded).__name__}"
            )
        return decoded

    def _check_status(self, status_code: int, decoded: Dict[str, Any]) -> None:
        if status_code < 400:
            return
        status = decoded.get("status")
        error_message = None
        if isinstance(status, dict):
            error_message = status.get("error")
        error_message = error_message or "Unknown error"
        logger.debug(f"Qdrant responded {status_code}: {error_message}")
        raise HttpError(
            f"Qdrant API error (HTTP {status_code}): {error_message}",
            status_code,
            decoded
        )
