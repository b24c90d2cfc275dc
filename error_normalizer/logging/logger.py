import logging
import sys
from typing import TextIO

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Log:
    """Centralized logging for the normalizer's callers and CLI.

    Records go to stderr by default so they never mix with the normalized
    message the CLI prints on stdout.
    """

    _logger: logging.Logger = logging.getLogger("error_normalizer")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a stream handler once."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(logging.Formatter(_FORMAT))
            cls._logger.addHandler(handler)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
