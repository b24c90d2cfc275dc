from error_normalizer.config.settings import Settings
from error_normalizer.logging.logger import Log
from error_normalizer.normalization.models import FieldSelector
from error_normalizer.normalization.normalizer import ErrorNormalizer


class NormalizerFactory:
    """Creates the configured error normalizer."""

    @classmethod
    def create(cls, settings: Settings) -> ErrorNormalizer:
        """Create a configured normalizer from application settings."""
        field = cls._resolve_field(settings.error_field)
        Log.debug(f"Error normalizer surfaces payload field '{field.value}'")
        return ErrorNormalizer(
            field=field,
            payload_fallback_message=settings.payload_fallback_message,
            unknown_request_detail=settings.unknown_request_detail,
            unknown_client_detail=settings.unknown_client_detail,
        )

    @staticmethod
    def _resolve_field(value: str) -> FieldSelector:
        selector = value.strip().lower()
        try:
            return FieldSelector(selector)
        except ValueError:
            supported = [member.value for member in FieldSelector]
            raise ValueError(
                f"Unknown error field '{value}'. Choose from: {supported}"
            ) from None
