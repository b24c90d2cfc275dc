import openai

from error_normalizer.normalization.adapter_base import BaseErrorAdapter
from error_normalizer.normalization.httpx_error_adapter import describe_request


class OpenAIErrorAdapter(BaseErrorAdapter):
    """Raw error adapter for exceptions raised by the OpenAI SDK."""

    def supports(self, exc: BaseException) -> bool:
        return isinstance(exc, openai.APIError)

    def to_raw_error(self, exc: BaseException) -> dict[str, object]:
        if not isinstance(exc, openai.APIError):
            raise TypeError(f"Unsupported exception type: {type(exc).__name__}")
        raw: dict[str, object] = {"message": exc.message}
        if isinstance(exc, openai.APIStatusError):
            raw["response"] = {"status_code": exc.status_code, "data": exc.body}
            raw["request"] = describe_request(exc.request)
        elif isinstance(exc, openai.APIConnectionError):
            raw["request"] = describe_request(exc.request)
        return raw
