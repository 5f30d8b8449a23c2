"""
parse-rest: Parse REST API client for Python.

Signed, retried, normalized requests against a Parse-compatible backend.
"""

__version__ = "0.1.0"

from parse_rest.client import Parse, AsyncParse
from parse_rest.config import ParseConfig
from parse_rest.controller import RESTController, normalize_error
from parse_rest.errors import ParseSDKError, ParseError, ConfigurationError, TransportError, AjaxError
from parse_rest.models.options import RequestOptions
from parse_rest.models.user import ParseUser

__all__ = [
    "Parse",
    "AsyncParse",
    "ParseConfig",
    "RESTController",
    "normalize_error",
    "ParseSDKError",
    "ParseError",
    "ConfigurationError",
    "TransportError",
    "AjaxError",
    "RequestOptions",
    "ParseUser",
]
