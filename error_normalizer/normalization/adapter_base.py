from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class BaseErrorAdapter(ABC):
    """Contract for client-specific raw error adapters."""

    @abstractmethod
    def supports(self, exc: BaseException) -> bool:
        """Return True when this adapter understands the exception type."""

    @abstractmethod
    def to_raw_error(self, exc: BaseException) -> dict[str, object]:
        """Describe the exception with the response/request/message fields."""


def to_raw_error(exc: BaseException, adapters: Sequence[BaseErrorAdapter]) -> Any:
    """Adapt the exception with the first supporting adapter.

    Exceptions no adapter supports are returned unchanged.
    """
    for adapter in adapters:
        if adapter.supports(exc):
            return adapter.to_raw_error(exc)
    return exc
