"""
Pure functions for building requests and mapping API failures.
"""

import json
from typing import Dict, Optional

from ..exceptions import APIError
from ..models import ErrorResponse


def build_auth_headers(api_key: str, user_agent: Optional[str] = None) -> Dict[str, str]:
    """Build authentication headers."""
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
    }
    if user_agent:
        headers["User-Agent"] = user_agent
    return headers


def parse_error_body(text: str) -> ErrorResponse:
    """Decode an error payload.

    The API answers failures with ``{"message": ..., "code": ...}``. Bodies
    that are not a JSON object become the message verbatim.
    """
    try:
        data = json.loads(text)
    except ValueError:
        return ErrorResponse(message=text)

    if not isinstance(data, dict):
        return ErrorResponse(message=text)

    message = data.get("message")
    code = data.get("code")
    return ErrorResponse(
        message=message if isinstance(message, str) else "",
        code=code if isinstance(code, str) and code else None,
    )


def build_api_error(status_code: int, text: str) -> APIError:
    """Map an HTTP failure status and body to an :class:`APIError`."""
    error = parse_error_body(text)
    return APIError(
        status_code=status_code,
        message=error.message,
        code=error.code,
        response=error,
    )
