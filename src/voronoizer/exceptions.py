"""Exception hierarchy for Voronoizer."""


class VoronoizerError(Exception):
    """Base exception for all Voronoizer errors."""

    pass


class ImageError(VoronoizerError):
    """Errors related to reading or writing image files."""

    pass


class ImageWriteError(ImageError):
    """Error writing an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write into file '{path}': {reason}")


class ImageReadError(ImageError):
    """Error reading an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read image '{path}': {reason}")


class SeedError(VoronoizerError):
    """Invalid seed set."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid seed set: {reason}")


class ConfigurationError(VoronoizerError):
    """Invalid configuration value."""

    def __init__(self, option: str, value: str, reason: str) -> None:
        self.option = option
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value '{value}' for {option}: {reason}")
