import json

import httpx

from error_normalizer.normalization.adapter_base import BaseErrorAdapter


def describe_request(request: httpx.Request) -> dict[str, object]:
    return {"method": request.method, "url": str(request.url)}


def decode_body(response: httpx.Response) -> object:
    """Decoded JSON body, falling back to the raw text.

    Returns None when the body is empty or was never read.
    """
    try:
        content = response.content
    except httpx.ResponseNotRead:
        # Streamed responses that were never read have no body to decode.
        return None
    if not content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


class HttpxErrorAdapter(BaseErrorAdapter):
    """Raw error adapter for exceptions raised by httpx."""

    def supports(self, exc: BaseException) -> bool:
        return isinstance(exc, httpx.HTTPError)

    def to_raw_error(self, exc: BaseException) -> dict[str, object]:
        raw: dict[str, object] = {"message": str(exc)}
        if isinstance(exc, httpx.HTTPStatusError):
            raw["response"] = {
                "status_code": exc.response.status_code,
                "data": decode_body(exc.response),
            }
            raw["request"] = describe_request(exc.request)
        elif isinstance(exc, httpx.RequestError):
            try:
                raw["request"] = describe_request(exc.request)
            except RuntimeError:
                # Raised by httpx when the exception was built without a request.
                raw["request"] = {}
        return raw
