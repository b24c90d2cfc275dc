from error_normalizer.normalization.base import BaseErrorNormalizer
from error_normalizer.normalization.exceptions import NormalizedError
from error_normalizer.normalization.models import ErrorCategory, FieldSelector
from error_normalizer.normalization.normalizer import ErrorNormalizer

__all__ = [
    "BaseErrorNormalizer",
    "ErrorCategory",
    "ErrorNormalizer",
    "FieldSelector",
    "NormalizedError",
]
