"""Exceptions raised by palette extraction and theme selection.

Every failure in the package is a ColorThemeError. The command-line entry point
maps these to a usage message and a non-zero exit status. Nothing below main
exits the process.

:created: 2026-10-17
"""


class ColorThemeError(ValueError):
    """Base class for all color_theme failures."""

    def __init__(self, message: str = "Cannot extract a theme color.") -> None:
        self.message = message
        super().__init__(self.message)


class InvalidPaletteSizeError(ColorThemeError):
    """Palette size is below one or would produce empty buckets."""

    def __init__(self, message: str = "Palette size must be at least 1.") -> None:
        super().__init__(message)


class EmptyInputError(ColorThemeError):
    """A pixel buffer has no pixels."""

    def __init__(self, message: str = "Pixel buffer is empty.") -> None:
        super().__init__(message)


class DegenerateColorError(ColorThemeError):
    """Brightness cannot be rescaled for a color with every channel at zero."""

    def __init__(
        self, message: str = "Cannot rescale the brightness of pure black."
    ) -> None:
        super().__init__(message)


class ImageLoadError(ColorThemeError):
    """An image file could not be opened or decoded."""

    def __init__(self, message: str = "Cannot load image.") -> None:
        super().__init__(message)


class InvalidPixelBufferError(ColorThemeError):
    """A pixel buffer does not hold three channels per pixel."""

    def __init__(self, message: str = "Pixels must have 3 channels.") -> None:
        super().__init__(message)


class ImageWriteError(ColorThemeError):
    """An image file could not be written."""

    def __init__(self, message: str = "Cannot write image.") -> None:
        super().__init__(message)
