"""Caller-side guard turning remote call failures into NormalizedError."""

import functools
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import ParamSpec, TypeVar

from error_normalizer.logging.logger import Log
from error_normalizer.normalization.adapter_base import BaseErrorAdapter, to_raw_error
from error_normalizer.normalization.base import BaseErrorNormalizer
from error_normalizer.normalization.exceptions import NormalizedError
from error_normalizer.normalization.httpx_error_adapter import HttpxErrorAdapter
from error_normalizer.normalization.openai_error_adapter import OpenAIErrorAdapter

P = ParamSpec("P")
R = TypeVar("R")


def default_adapters() -> list[BaseErrorAdapter]:
    return [OpenAIErrorAdapter(), HttpxErrorAdapter()]


class ErrorGuard:
    """Re-raises failures from a guarded block as a single NormalizedError."""

    def __init__(
        self,
        normalizer: BaseErrorNormalizer,
        adapters: Sequence[BaseErrorAdapter] | None = None,
    ) -> None:
        self._normalizer = normalizer
        self._adapters = list(adapters) if adapters is not None else default_adapters()

    @contextmanager
    def guard(self) -> Iterator[None]:
        """Normalize any exception raised inside the block.

        A NormalizedError raised inside the block propagates untouched.
        """
        try:
            yield
        except NormalizedError:
            raise
        except Exception as exc:
            raw_error = self._adapt(exc)
            try:
                self._normalizer.normalize(raw_error, cause=exc)
            except NormalizedError as normalized:
                Log.warning(
                    f"Normalized {type(exc).__name__}: {normalized.message}"
                )
                raise

    def _adapt(self, exc: Exception) -> object:
        try:
            return to_raw_error(exc, self._adapters)
        except Exception as adapter_exc:
            Log.warning(
                f"Error adapter failed on {type(exc).__name__}: {adapter_exc}"
            )
            return exc

    def wrap(self, func: Callable[P, R]) -> Callable[P, R]:
        """Decorate a callable so its failures are normalized."""

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with self.guard():
                return func(*args, **kwargs)

        return wrapper
