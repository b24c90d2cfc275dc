"""Classification and message extraction for failed HTTP client calls."""

from collections.abc import Mapping
from typing import Any, NoReturn

from error_normalizer.normalization.base import BaseErrorNormalizer
from error_normalizer.normalization.exceptions import NormalizedError
from error_normalizer.normalization.models import ErrorCategory, FieldSelector

DEFAULT_PAYLOAD_FALLBACK_MESSAGE = "An error occurred."
DEFAULT_UNKNOWN_REQUEST_DETAIL = "unknown request error"
DEFAULT_UNKNOWN_CLIENT_DETAIL = "unknown error"

_NO_RESPONSE_PREFIX = "No response received"
_CLIENT_PREFIX = "Unexpected client error"

_PRIMITIVES = (str, bytes, bytearray, int, float, bool)
_MISSING = object()


def _read_field(value: Any, name: str) -> Any:
    """Read a field by key for mappings and by attribute otherwise.

    Returns ``_MISSING`` when the value has no such field.
    """
    if value is None or isinstance(value, _PRIMITIVES):
        return _MISSING
    if isinstance(value, Mapping):
        return value.get(name, _MISSING)
    try:
        return getattr(value, name)
    except Exception:
        # Property getters on client error types raise when the field is unset.
        return _MISSING


def _non_empty_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


class ErrorNormalizer(BaseErrorNormalizer):
    """Normalizes a failed call's error value into a single NormalizedError."""

    def __init__(
        self,
        *,
        field: FieldSelector = FieldSelector.ERROR_MESSAGE,
        payload_fallback_message: str = DEFAULT_PAYLOAD_FALLBACK_MESSAGE,
        unknown_request_detail: str = DEFAULT_UNKNOWN_REQUEST_DETAIL,
        unknown_client_detail: str = DEFAULT_UNKNOWN_CLIENT_DETAIL,
    ) -> None:
        for name, text in (
            ("payload_fallback_message", payload_fallback_message),
            ("unknown_request_detail", unknown_request_detail),
            ("unknown_client_detail", unknown_client_detail),
        ):
            if not _non_empty_text(text):
                raise ValueError(f"{name} must be a non-empty string")
        self._field = FieldSelector(field)
        self._payload_fallback_message = payload_fallback_message
        self._unknown_request_detail = unknown_request_detail
        self._unknown_client_detail = unknown_client_detail

    @property
    def field(self) -> FieldSelector:
        return self._field

    def classify(self, raw_error: Any) -> ErrorCategory:
        """Classify the raw error value. First match wins."""
        response = _read_field(raw_error, "response")
        if (
            response is not _MISSING
            and response is not None
            and _read_field(response, "data") is not _MISSING
        ):
            return ErrorCategory.SERVER_PAYLOAD
        request = _read_field(raw_error, "request")
        if request is not _MISSING and request is not None:
            return ErrorCategory.NO_RESPONSE
        return ErrorCategory.CLIENT

    def build_message(self, raw_error: Any) -> str:
        category = self.classify(raw_error)
        if category is ErrorCategory.SERVER_PAYLOAD:
            return self._payload_message(raw_error)
        if category is ErrorCategory.NO_RESPONSE:
            detail = self._detail(raw_error, self._unknown_request_detail)
            return f"{_NO_RESPONSE_PREFIX}: {detail}"
        detail = self._detail(raw_error, self._unknown_client_detail)
        return f"{_CLIENT_PREFIX}: {detail}"

    def normalize(
        self, raw_error: Any, *, cause: BaseException | None = None
    ) -> NoReturn:
        """Raise the NormalizedError for the raw error value."""
        message = self.build_message(raw_error)
        if cause is None and isinstance(raw_error, BaseException):
            cause = raw_error
        raise NormalizedError(message) from cause

    def _payload_message(self, raw_error: Any) -> str:
        data = _read_field(_read_field(raw_error, "response"), "data")
        payload = data if isinstance(data, Mapping) else {}
        text = _non_empty_text(payload.get(self._field.value))
        return text if text is not None else self._payload_fallback_message

    @staticmethod
    def _detail(raw_error: Any, fallback: str) -> str:
        text = _non_empty_text(_read_field(raw_error, "message"))
        if text is None and isinstance(raw_error, BaseException):
            text = _non_empty_text(str(raw_error))
        return text if text is not None else fallback
