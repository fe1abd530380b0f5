"""Exceptions raised by the conversion pipeline."""


class AsciiArtError(Exception):
    """Base class for all converter errors."""


class InvalidInputError(AsciiArtError, ValueError):
    """Pixel buffer dimensions disagree with its data."""


class ConfigError(AsciiArtError, ValueError):
    """A configuration value is out of range or unknown."""


class ImageDecodeError(AsciiArtError):
    """The uploaded data is not an image or could not be decoded."""
