"""
Microsoft Outlook Calendar Integration - Microsoft Graph API client

Thin `requests` client over the Microsoft Graph v1.0 calendar endpoints used when a booking
is cancelled. Each call is attempted once; callers decide what a failure means for them.

Usage:
```python
client = MSOutlookCalendarAPIClient(access_token="...")
client.delete_event("AAMkAGI2T...")
```
"""

import logging
from typing import Any

import requests


logger = logging.getLogger(__name__)


REQUEST_TIMEOUT_SECONDS = 30


class MSGraphAPIError(Exception):
    """Exception raised for Microsoft Graph API errors"""

    def __init__(
        self, message: str, status_code: int | None = None, response_data: dict | None = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class MSOutlookCalendarAPIClient:
    """
    Microsoft Graph Calendar API Client for Microsoft Outlook integration.
    """

    BASE_URL = "https://graph.microsoft.com/v1.0"

    def __init__(self, access_token: str, user_id: str | None = None):
        """
        Initialize the MS Outlook Calendar API client.

        Args:
            access_token: OAuth2 access token for Microsoft Graph API
            user_id: Optional user ID. If not provided, 'me' will be used
        """
        self.access_token = access_token
        self.user_id = user_id or "me"
        self.headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _make_request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make a single HTTP request to Microsoft Graph API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, PATCH)
            endpoint: API endpoint (without base URL)
            params: Query parameters
            data: Request body data

        Returns:
            Response data as dictionary

        Raises:
            MSGraphAPIError: If the request fails or Graph answers with an error status
        """
        url = f"{self.BASE_URL}/{endpoint.lstrip('/')}"

        try:
            response = requests.request(
                method=method,
                url=url,
                headers=self.headers,
                params=params,
                json=data,
                timeout=REQUEST_TIMEOUT_SECONDS,
            )
        except requests.RequestException as e:
            logger.error("MS Graph request error: %s", e)
            raise MSGraphAPIError(f"Request failed: {e!s}") from e

        if response.status_code == 204:  # No Content
            return {}

        try:
            response_data = response.json() if response.content else {}
        except ValueError:
            response_data = {"body": response.text}

        if not response.ok:
            error_msg = f"MS Graph API error: {response.status_code}"
            if isinstance(response_data.get("error"), dict):
                error_msg += f" - {response_data['error'].get('message', 'Unknown error')}"

            logger.error("%s. Response: %s", error_msg, response_data)
            raise MSGraphAPIError(error_msg, response.status_code, response_data)

        return response_data

    def delete_event(self, event_id: str, calendar_id: str | None = None) -> None:
        """
        Delete an event.

        Args:
            event_id: Event ID to delete
            calendar_id: Calendar ID. If None, uses default calendar
        """
        if calendar_id:
            endpoint = f"/users/{self.user_id}/calendars/{calendar_id}/events/{event_id}"
        else:
            endpoint = f"/users/{self.user_id}/events/{event_id}"

        self._make_request("DELETE", endpoint)
