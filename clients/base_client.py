"""
Shared HTTP plumbing for the Google Maps web service clients: session handling, request timeout,
a single retry on transient network failures and classification of failures into ApiError kinds.
"""

import logging
import threading
import time
from enum import Enum
from typing import Any, Dict, Iterable, Optional

import requests

logger = logging.getLogger(__name__)


class ApiErrorKind(Enum):
    NETWORK = "network"
    AUTH = "auth"
    QUOTA = "quota"
    MALFORMED_RESPONSE = "malformed_response"
    TIMEOUT = "timeout"
    NO_ROUTE = "no_route"


class ApiError(Exception):

    def __init__(self, kind: ApiErrorKind, message: str = "", status_code: Optional[int] = None,
                 retryable: Optional[bool] = None):
        super().__init__(message or kind.value)
        self.kind = kind
        self.message = message or kind.value
        self.status_code = status_code
        # by default only transport failures without an HTTP answer are retried
        if retryable is None:
            retryable = kind in (ApiErrorKind.NETWORK, ApiErrorKind.TIMEOUT) and status_code is None
        self.retryable = retryable

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind.value!r}, message={self.message!r}, status_code={self.status_code})"


# Provider "status" values and the error kind each maps to.
_STATUS_KINDS = {
    "REQUEST_DENIED": ApiErrorKind.AUTH,
    "OVER_QUERY_LIMIT": ApiErrorKind.QUOTA,
    "OVER_DAILY_LIMIT": ApiErrorKind.QUOTA,
    "INVALID_REQUEST": ApiErrorKind.MALFORMED_RESPONSE,
    "MAX_WAYPOINTS_EXCEEDED": ApiErrorKind.MALFORMED_RESPONSE,
    "MAX_ROUTE_LENGTH_EXCEEDED": ApiErrorKind.NO_ROUTE,
    "NOT_FOUND": ApiErrorKind.NO_ROUTE,
    "UNKNOWN_ERROR": ApiErrorKind.NETWORK,
}


class BaseApiClient:

    def __init__(self, api_key: str, timeout: float = 8.0, max_retries: int = 1,
                 retry_delay: float = 0.3, session: Optional[requests.Session] = None):
        self.api_key = api_key
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay

        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

        self.metrics = {
            "total_calls": 0,
            "failed_calls": 0,
            "retry_count": 0,
        }
        self._metrics_lock = threading.Lock()

    def _get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        self._count("total_calls")
        request_params = dict(params)
        request_params["key"] = self.api_key

        attempt = 0
        while True:
            try:
                response = self.session.get(url, params=request_params, timeout=self.timeout)
            except requests.exceptions.Timeout as e:
                error = ApiError(ApiErrorKind.TIMEOUT, f"Request timed out after {self.timeout}s: {e}")
            except requests.exceptions.ConnectionError as e:
                error = ApiError(ApiErrorKind.NETWORK, f"Connection failed: {e}")
            except requests.exceptions.RequestException as e:
                error = ApiError(ApiErrorKind.NETWORK, f"Request failed: {e}", retryable=False)
            else:
                return self._parse_response(response)

            if not error.retryable or attempt >= self.max_retries:
                self._count("failed_calls")
                raise error

            attempt += 1
            logger.warning("Attempt %d to %s failed: %s", attempt, url, error.message)
            self._count("retry_count")
            logger.info("Retry attempt %d/%d for %s", attempt, self.max_retries, url)
            time.sleep(self.retry_delay)

    def _parse_response(self, response) -> Dict[str, Any]:
        status = response.status_code
        if status != 200:
            self._count("failed_calls")
            if status in (401, 403):
                raise ApiError(ApiErrorKind.AUTH, f"API rejected credentials: {status}", status)
            if status == 429:
                raise ApiError(ApiErrorKind.QUOTA, "API rate limit exceeded", status)
            raise ApiError(ApiErrorKind.NETWORK, f"API error: {status}", status)

        try:
            data = response.json()
        except ValueError as e:
            self._count("failed_calls")
            raise ApiError(ApiErrorKind.MALFORMED_RESPONSE, f"Response is not valid JSON: {e}", status)

        if not isinstance(data, dict):
            self._count("failed_calls")
            raise ApiError(ApiErrorKind.MALFORMED_RESPONSE, "Response body is not a JSON object", status)
        return data

    def _check_status(self, data: Dict[str, Any], ok_statuses: Iterable[str],
                      default_kind: ApiErrorKind = ApiErrorKind.MALFORMED_RESPONSE) -> str:
        status = data.get("status")
        if status in ok_statuses:
            return status
        self._count("failed_calls")
        kind = _STATUS_KINDS.get(status, default_kind)
        message = f"Provider status {status or 'missing'}"
        if data.get("error_message"):
            message += f": {data['error_message']}"
        raise ApiError(kind, message, retryable=False)

    def _count(self, name: str) -> None:
        with self._metrics_lock:
            self.metrics[name] += 1

    def get_metrics(self) -> Dict[str, Any]:
        with self._metrics_lock:
            return {"client": self.__class__.__name__, **self.metrics}

    def close(self):
        self.session.close()
