"""Pick one theme color from a palette.

:created: 2026-10-17
"""

import logging
from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt

from color_theme.color_attributes import format_rgb, get_saturation, rescale_brightness
from color_theme.errors import DegenerateColorError

_RGB: TypeAlias = Annotated[npt.NDArray[np.uint8], (3,)]
_Palette: TypeAlias = Annotated[npt.NDArray[np.uint8], "(m,3)"]


def get_most_saturated(palette: _Palette | npt.ArrayLike) -> _RGB | None:
    """Return the first color in palette with the highest saturation.

    :param palette: (m, 3) array of uint8 colors
    :return: a copy of the most saturated color or None if palette is empty
    """
    colors = np.asarray(palette, dtype=np.uint8).reshape(-1, 3)
    if len(colors) == 0:
        return None
    saturations = [get_saturation(c) for c in colors]
    return colors[int(np.argmax(saturations))].copy()


def select_theme_color(
    palette: _Palette | npt.ArrayLike, target_brightness: int | None = None
) -> _RGB | None:
    """Select the most saturated palette color and optionally set its brightness.

    :param palette: (m, 3) array of uint8 colors. Not modified.
    :param target_brightness: optional peak channel value [0, 255] for the result
    :return: (3,) uint8 color or None if palette is empty

    Black cannot be brightened by scaling. If the most saturated color is black
    (every palette color is black), it is returned unchanged.
    """
    theme = get_most_saturated(palette)
    if theme is None or target_brightness is None:
        return theme
    try:
        return rescale_brightness(theme, target_brightness)
    except DegenerateColorError:
        logging.warning(f"theme color {format_rgb(theme)} cannot be rescaled")
        return theme
