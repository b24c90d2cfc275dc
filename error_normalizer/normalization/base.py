from abc import ABC, abstractmethod
from typing import Any, NoReturn

from error_normalizer.normalization.models import ErrorCategory


class BaseErrorNormalizer(ABC):
    """Contract for all error normalizers."""

    @abstractmethod
    def classify(self, raw_error: Any) -> ErrorCategory:
        """Return the category the raw error value falls into."""

    @abstractmethod
    def build_message(self, raw_error: Any) -> str:
        """Return the normalized message for the raw error value."""

    @abstractmethod
    def normalize(
        self, raw_error: Any, *, cause: BaseException | None = None
    ) -> NoReturn:
        """Signal the normalized failure for a failed remote call.

        Args:
            raw_error: Error value of unknown shape produced by an HTTP client.
            cause: Original exception to chain the signal to, when known.

        Raises:
            NormalizedError: always, exactly once.
        """
