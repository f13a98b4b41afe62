class ConversionError(Exception):
    """Base class for failures raised while converting an image to glyphs."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class DecodeError(ConversionError):
    """The source could not be read or is not a decodable image."""


class WriteError(ConversionError):
    """The rendered output could not be written to its destination."""
