import json
import sys

from error_normalizer.config.settings import Settings
from error_normalizer.logging.logger import Log
from error_normalizer.normalization.exceptions import NormalizedError
from error_normalizer.normalization.factory import NormalizerFactory


def _read_raw_error(argv: list[str]) -> object:
    text = argv[0] if argv else sys.stdin.read()
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> read raw error -> print normalized message."""
    settings = Settings()
    Log.configure(settings.log_level)
    normalizer = NormalizerFactory.create(settings)

    raw_error = _read_raw_error(sys.argv[1:] if argv is None else argv)
    try:
        normalizer.normalize(raw_error)
    except NormalizedError as exc:
        Log.debug(f"Classified as {normalizer.classify(raw_error).value}")
        print(exc.message)
    return 1


if __name__ == "__main__":
    sys.exit(main())
