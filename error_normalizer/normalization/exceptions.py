class NormalizedError(Exception):
    """Single failure signal carrying a display-ready message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
