"""
Tests for the requests-based ApiClient, with a mocked session.
"""

from unittest.mock import MagicMock

import pytest
import requests

from deploydemo.client.requests import ApiClient, ApiError, Item, MessageResult


def _response(status_code=200, payload=None, reason="OK"):
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


def test_health(session):
    session.request.return_value = _response(
        payload={"status": "ok", "message": "Backend is running", "timestamp": "2026-10-19T12:00:00.000Z"}
    )
    client = ApiClient("http://api.local/", timeout_s=3.0, session=session)

    health = client.health()

    assert health.status == "ok"
    session.request.assert_called_once_with(
        method="GET", url="http://api.local/api/health", json=None, timeout=3.0
    )


def test_data_parses_items(session):
    session.request.return_value = _response(
        payload={
            "message": "Hello from the backend!",
            "data": [
                {"id": 1, "name": "Item 1", "description": "First item"},
                {"id": 2, "name": "Item 2", "description": "Second item"},
            ],
        }
    )

    dataset = ApiClient("http://api.local", session=session).data()

    assert dataset.message == "Hello from the backend!"
    assert dataset.items[1] == Item(id=2, name="Item 2", description="Second item")


def test_send_message(session):
    session.request.return_value = _response(
        payload={"success": True, "echo": "You said: hi", "timestamp": "2026-10-19T12:00:00.000Z"}
    )

    result = ApiClient("http://api.local", session=session).send_message("hi")

    assert result == MessageResult(success=True, echo="You said: hi", timestamp="2026-10-19T12:00:00.000Z")
    assert session.request.call_args.kwargs["json"] == {"message": "hi"}
    assert session.request.call_args.kwargs["method"] == "POST"


def test_non_2xx_raises_api_error(session):
    session.request.return_value = _response(
        status_code=422,
        reason="Unprocessable Entity",
        payload={"success": False, "error": "message: Field required"},
    )

    with pytest.raises(ApiError) as excinfo:
        ApiClient("http://api.local", session=session).send_message("hi")

    assert excinfo.value.status_code == 422
    assert excinfo.value.details == "message: Field required"
    assert excinfo.value.url == "http://api.local/api/message"


def test_non_json_error_body(session):
    session.request.return_value = _response(
        status_code=502, reason="Bad Gateway", payload=ValueError("no json")
    )

    with pytest.raises(ApiError) as excinfo:
        ApiClient("http://api.local", session=session).health()

    assert excinfo.value.details is None


def test_non_object_payload_raises_value_error(session):
    session.request.return_value = _response(payload=[1, 2, 3])

    with pytest.raises(ValueError):
        ApiClient("http://api.local", session=session).data()


def test_network_error_propagates(session):
    session.request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(requests.RequestException):
        ApiClient("http://api.local", session=session).health()
