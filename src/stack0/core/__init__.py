"""
Pure helpers shared by the resource clients.

Nothing in this package performs I/O: query strings, error mapping and the
completion poller take their collaborators as arguments.
"""

from .errors import build_api_error, build_auth_headers, parse_error_body
from .polling import poll_until
from .query import format_query_value, with_query

__all__ = [
    "build_api_error",
    "build_auth_headers",
    "parse_error_body",
    "poll_until",
    "format_query_value",
    "with_query",
]
