from unittest.mock import Mock, patch

import pytest
import requests

from calendar_integration.services.calendar_clients.ms_outlook_calendar_api_client import (
    MSGraphAPIError,
    MSOutlookCalendarAPIClient,
)


MODULE = "calendar_integration.services.calendar_clients.ms_outlook_calendar_api_client"


@pytest.fixture
def client():
    return MSOutlookCalendarAPIClient(access_token="test_access_token")


def make_response(status_code, json_data=None, content=b"{}"):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.content = content
    response.json.return_value = json_data or {}
    return response


def test_init_sets_bearer_headers(client):
    assert client.user_id == "me"
    assert client.headers["Authorization"] == "Bearer test_access_token"
    assert client.headers["Accept"] == "application/json"


@patch(f"{MODULE}.requests.request")
def test_delete_event(mock_request, client):
    mock_request.return_value = make_response(204)

    client.delete_event("event-123")

    mock_request.assert_called_once_with(
        method="DELETE",
        url="https://graph.microsoft.com/v1.0/users/me/events/event-123",
        headers=client.headers,
        params=None,
        json=None,
        timeout=30,
    )


@patch(f"{MODULE}.requests.request")
def test_client_keeps_no_open_session(mock_request, client):
    mock_request.return_value = make_response(204)

    client.delete_event("event-123")

    assert not hasattr(client, "session")


@patch(f"{MODULE}.requests.request")
def test_delete_event_on_specific_calendar(mock_request):
    mock_request.return_value = make_response(204)
    client = MSOutlookCalendarAPIClient(access_token="token", user_id="user-1")

    client.delete_event("event-123", calendar_id="calendar-1")

    assert (
        mock_request.call_args.kwargs["url"]
        == "https://graph.microsoft.com/v1.0/users/user-1/calendars/calendar-1/events/event-123"
    )


@patch(f"{MODULE}.requests.request")
def test_error_status_raises_graph_error(mock_request, client):
    mock_request.return_value = make_response(
        404, json_data={"error": {"code": "ErrorItemNotFound", "message": "Not found"}}
    )

    with pytest.raises(MSGraphAPIError) as exc_info:
        client.delete_event("event-123")

    assert exc_info.value.status_code == 404
    assert "Not found" in str(exc_info.value)
    assert exc_info.value.response_data["error"]["code"] == "ErrorItemNotFound"


@patch(f"{MODULE}.requests.request")
def test_request_exception_raises_graph_error_without_retrying(mock_request, client):
    mock_request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(MSGraphAPIError) as exc_info:
        client.delete_event("event-123")

    assert exc_info.value.status_code is None
    mock_request.assert_called_once()
