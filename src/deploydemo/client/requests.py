"""
# API HTTP Client

Thin wrapper around the demo backend's routes:

- GET  /api/health
- GET  /api/data
- POST /api/message

## Usage
from deploydemo.client.requests import ApiClient

client = ApiClient("http://localhost:3001")
print(client.health())
print(client.data().items)
print(client.send_message("hello").echo)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union, cast

import requests

JsonDict = Dict[str, Any]
Json = Union[JsonDict, List[Any], str, int, float, bool, None]


class ApiError(RuntimeError):
    """
    Exception raised when the API returns a non-2xx response.
    """

    def __init__(
        self, status_code: int, message: str, url: str, details: Optional[Any] = None
    ) -> None:
        super().__init__(f"[ApiError] {status_code} {message} | url={url} | details={details}")
        self.status_code = status_code
        self.message = message
        self.url = url
        self.details = details


# -----------------------------------------------------------------------------
# Typed response models (client-side)
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Health:
    status: str
    message: str
    timestamp: str

    @staticmethod
    def from_payload(payload: JsonDict) -> "Health":
        return Health(
            status=str(payload["status"]),
            message=str(payload["message"]),
            timestamp=str(payload["timestamp"]),
        )


@dataclass(frozen=True)
class Item:
    id: int
    name: str
    description: str

    @staticmethod
    def from_row(row: JsonDict) -> "Item":
        return Item(id=int(row["id"]), name=str(row["name"]), description=str(row["description"]))


@dataclass(frozen=True)
class Dataset:
    message: str
    items: Tuple[Item, ...]

    @staticmethod
    def from_payload(payload: JsonDict) -> "Dataset":
        rows = payload.get("data", [])
        if not isinstance(rows, list):
            raise ValueError("Expected payload['data'] to be a list")
        return Dataset(
            message=str(payload["message"]),
            items=tuple(Item.from_row(cast(JsonDict, r)) for r in rows),
        )


@dataclass(frozen=True)
class MessageResult:
    """
    Outcome of a message submission.

    Success carries echo and timestamp; a failure carries only error.
    """

    success: bool
    echo: Optional[str] = None
    timestamp: Optional[str] = None
    error: Optional[str] = None

    @staticmethod
    def from_payload(payload: JsonDict) -> "MessageResult":
        return MessageResult(
            success=bool(payload.get("success", False)),
            echo=payload.get("echo"),
            timestamp=payload.get("timestamp"),
            error=payload.get("error"),
        )

    @staticmethod
    def failed(error: str) -> "MessageResult":
        return MessageResult(success=False, error=error)


# -----------------------------------------------------------------------------
# Client
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ApiClient:
    """
    A small client for the backend's /api endpoints.

    Attributes:
        base_url: Base URL of the server, e.g. "http://localhost:3001"
        timeout_s: Request timeout in seconds.
        session: Optional requests.Session for connection reuse.
    """

    base_url: str
    timeout_s: float = 10.0
    session: Optional[requests.Session] = None

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}{path}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Optional[Json] = None,
    ) -> JsonDict:
        """
        Perform an HTTP request and return the JSON object response.

        Raises:
            ApiError: If server returns non-2xx response.
            requests.RequestException: For network errors/timeouts.
            ValueError: If response is not JSON or not a JSON object.
        """
        url = self._url(path)
        sess = self.session or requests

        resp = sess.request(
            method=method,
            url=url,
            json=json_body,
            timeout=self.timeout_s,
        )

        # Error bodies are JSON too ({"success": false, "error": ...} or {"detail": ...})
        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if not (200 <= resp.status_code < 300):
            details = payload
            if isinstance(payload, dict):
                details = payload.get("error", payload.get("detail"))
            raise ApiError(resp.status_code, resp.reason, url, details)

        if not isinstance(payload, dict):
            raise ValueError(f"Expected JSON object response, got: {type(payload)} from {url}")

        return cast(JsonDict, payload)

    def health(self) -> Health:
        """GET /api/health"""
        return Health.from_payload(self._request("GET", "/api/health"))

    def data(self) -> Dataset:
        """GET /api/data"""
        return Dataset.from_payload(self._request("GET", "/api/data"))

    def send_message(self, message: str) -> MessageResult:
        """POST /api/message with {"message": message}"""
        payload = self._request("POST", "/api/message", json_body={"message": message})
        return MessageResult.from_payload(payload)


def quick_smoke_test(base_url: str = "http://localhost:3001") -> None:
    """
    Simple smoke test you can run manually against a running server.

    Example:
        python -m deploydemo.client.requests
    """
    client = ApiClient(base_url)

    print("HEALTH:", client.health())
    print("DATA:", client.data())
    print("MESSAGE:", client.send_message("hello"))


if __name__ == "__main__":
    quick_smoke_test()
