from enum import Enum


class FieldSelector(str, Enum):
    """Payload field surfaced for server-supplied error bodies."""

    ERROR_MESSAGE = "error_message"
    ERROR_DETAILS = "error_details"


class ErrorCategory(str, Enum):
    """Closed set of classification outcomes, in precedence order."""

    SERVER_PAYLOAD = "server_payload"
    NO_RESPONSE = "no_response"
    CLIENT = "client"
