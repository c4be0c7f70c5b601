"""Import functions into the package namespace.

:created: 2026-10-17
"""

from color_theme.color_attributes import format_rgb, get_saturation, rescale_brightness
from color_theme.errors import (
    ColorThemeError,
    DegenerateColorError,
    EmptyInputError,
    ImageLoadError,
    ImageWriteError,
    InvalidPaletteSizeError,
    InvalidPixelBufferError,
)
from color_theme.image_arrays import get_image_pixels
from color_theme.main import ThemeResult, extract_theme
from color_theme.median_cut import median_cut_palette
from color_theme.theme import select_theme_color

__all__ = [
    "ColorThemeError",
    "DegenerateColorError",
    "EmptyInputError",
    "ImageLoadError",
    "ImageWriteError",
    "InvalidPaletteSizeError",
    "InvalidPixelBufferError",
    "ThemeResult",
    "extract_theme",
    "format_rgb",
    "get_image_pixels",
    "get_saturation",
    "median_cut_palette",
    "rescale_brightness",
    "select_theme_color",
]
