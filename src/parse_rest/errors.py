"""
Parse REST error types.

``ParseError`` is the only error a caller of ``RESTController.request`` ever
sees from the async chain. ``ConfigurationError`` is raised synchronously,
before anything goes over the wire.
"""

from typing import Any, Optional


class ParseSDKError(Exception):
    """Base class for everything raised by this package."""


class ParseError(ParseSDKError):
    OTHER_CAUSE = -1
    INTERNAL_SERVER_ERROR = 1
    CONNECTION_FAILED = 100
    OBJECT_NOT_FOUND = 101
    INVALID_QUERY = 102
    INVALID_CLASS_NAME = 103
    MISSING_OBJECT_ID = 104
    INVALID_KEY_NAME = 105
    INVALID_POINTER = 106
    INVALID_JSON = 107
    COMMAND_UNAVAILABLE = 108
    NOT_INITIALIZED = 109
    INCORRECT_TYPE = 111
    INVALID_CHANNEL_NAME = 112
    PUSH_MISCONFIGURED = 115
    OBJECT_TOO_LARGE = 116
    OPERATION_FORBIDDEN = 119
    CACHE_MISS = 120
    INVALID_NESTED_KEY = 121
    INVALID_FILE_NAME = 122
    INVALID_ACL = 123
    TIMEOUT = 124
    INVALID_EMAIL_ADDRESS = 125
    DUPLICATE_VALUE = 137
    INVALID_ROLE_NAME = 139
    EXCEEDED_QUOTA = 140
    SCRIPT_FAILED = 141
    VALIDATION_ERROR = 142
    INVALID_SESSION_TOKEN = 209
    USERNAME_MISSING = 200
    PASSWORD_MISSING = 201
    USERNAME_TAKEN = 202
    EMAIL_TAKEN = 203
    EMAIL_MISSING = 204
    EMAIL_NOT_FOUND = 205
    SESSION_MISSING = 206
    MUST_CREATE_USER_THROUGH_SIGNUP = 207
    ACCOUNT_ALREADY_LINKED = 208
    LINKED_ID_MISSING = 250
    INVALID_LINKED_SESSION = 251
    UNSUPPORTED_SERVICE = 252
    AGGREGATE_ERROR = 600

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"ParseError(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    __hash__ = ParseSDKError.__hash__


class ConfigurationError(ParseSDKError):
    """The client is asked to do something its configuration does not allow."""


class TransportError(ParseSDKError):
    """The transport call itself failed (as opposed to returning a bad status)."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.details = details


class AjaxError(ParseSDKError):
    """Raw failure raised by the dispatcher.

    Carries either the server's response text (bad status) or a reason
    describing why no usable response was received.
    """

    def __init__(
        self, response_text: Optional[str] = None, reason: Any = None, status: Optional[int] = None,
    ):
        super().__init__(response_text if response_text is not None else reason)
        self.response_text = response_text
        self.reason = reason
        self.status = status
