"""Extract a palette and a theme color from an image.

The pipeline is two steps. Median cut reduces every pixel in the image to a small
palette. The most saturated palette color is then scaled to a target brightness and
returned as the theme color.

Usage:

    color-theme <image> [palette_size] [brightness]

:created: 2026-10-17
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
from pathlib import Path
from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt

from color_theme import defaults
from color_theme.color_attributes import format_rgb
from color_theme.errors import ColorThemeError, EmptyInputError
from color_theme.image_arrays import get_image_pixels, write_palette_swatch
from color_theme.median_cut import median_cut_palette
from color_theme.theme import select_theme_color

_RGB: TypeAlias = Annotated[npt.NDArray[np.uint8], (3,)]
_Palette: TypeAlias = Annotated[npt.NDArray[np.uint8], "(m,3)"]


@dataclasses.dataclass(frozen=True)
class ThemeResult:
    """A palette and the theme color selected from it.

    palette: (m, 3) array of uint8 colors in median-cut bucket order
    theme: (3,) uint8 color, the most saturated palette color after any brightness
        rescale
    """

    palette: _Palette
    theme: _RGB

    def format_palette(self) -> list[str]:
        """Return each palette color as an rgb string."""
        return [format_rgb(c) for c in self.palette]

    def format_theme(self) -> str:
        """Return the theme color as an rgb string."""
        return format_rgb(self.theme)


def extract_theme(
    source: str | os.PathLike[str] | npt.ArrayLike,
    palette_size: int = defaults.PALETTE_SIZE,
    target_brightness: int | None = defaults.TARGET_BRIGHTNESS,
    *,
    max_dim: int | None = defaults.MAX_DIM,
) -> ThemeResult:
    """Extract a palette and a theme color.

    :param source: path to an image or an (n, 3) / (r, c, 3) array of uint8 pixels.
        A pixel array is copied, not sorted in place.
    :param palette_size: number of palette colors, at least 1
    :param target_brightness: peak channel value for the theme color or None to
        return the most saturated palette color as is
    :param max_dim: optionally shrink an image source so neither side exceeds
        max_dim. Ignored for pixel array sources.
    :return: palette and theme color
    :raise ColorThemeError: if the image cannot be loaded, has no pixels, or has
        too few pixels for palette_size
    """
    if isinstance(source, (str, os.PathLike)):
        pixels = get_image_pixels(source, max_dim)
    else:
        pixels = np.array(source, dtype=np.uint8)
    palette = median_cut_palette(pixels, palette_size)
    theme = select_theme_color(palette, target_brightness)
    if theme is None:
        raise EmptyInputError("Palette is empty.")
    logging.info(f"theme color {format_rgb(theme)}")
    return ThemeResult(palette, theme)


def _brightness(value: str) -> int:
    """Parse a brightness argument in [0, 255]."""
    brightness = int(value)
    if not 0 <= brightness <= 255:
        msg = f"brightness must be between 0 and 255, got {brightness}"
        raise argparse.ArgumentTypeError(msg)
    return brightness


def _positive_int(value: str) -> int:
    """Parse an integer argument >= 1."""
    number = int(value)
    if number < 1:
        msg = f"must be at least 1, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _new_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="color-theme",
        description="Extract a median-cut palette and a theme color from an image.",
    )
    parser.add_argument("image", type=Path, help="Input image")
    parser.add_argument(
        "palette_size",
        nargs="?",
        type=int,
        default=defaults.PALETTE_SIZE,
        help=f"Number of palette colors (default {defaults.PALETTE_SIZE})",
    )
    parser.add_argument(
        "brightness",
        nargs="?",
        type=_brightness,
        default=defaults.TARGET_BRIGHTNESS,
        help=f"Theme color brightness 0-255 (default {defaults.TARGET_BRIGHTNESS})",
    )
    parser.add_argument(
        "--no-rescale",
        action="store_true",
        help="Keep the brightness of the most saturated palette color",
    )
    parser.add_argument(
        "--max-dim",
        type=_positive_int,
        default=defaults.MAX_DIM,
        help="Shrink the image so neither side exceeds this before extracting",
    )
    parser.add_argument(
        "--swatch", type=Path, default=None, help="Write the palette as an image here"
    )
    parser.add_argument("--verbose", action="store_true", help="Log progress")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command-line interface.

    :param argv: arguments excluding the program name. Defaults to sys.argv[1:].
    :return: 0 on success. Bad input exits through argparse with status 2.
    """
    parser = _new_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    brightness = None if args.no_rescale else args.brightness
    try:
        result = extract_theme(
            args.image, args.palette_size, brightness, max_dim=args.max_dim
        )
        if args.swatch is not None:
            swatch = write_palette_swatch(args.swatch, result.palette)
            logging.info(f"wrote palette swatch to {swatch}")
    except ColorThemeError as e:
        parser.error(e.message)

    print("Palette: " + " ".join(result.format_palette()))
    print(f"Theme color: {result.format_theme()}")
    return 0
