"""Default values for palette extraction and theme selection.

:created: 2026-10-17
"""

# Number of colors in the extracted palette. Powers of two use every bucket of the
# final median-cut pass. Other values use the first PALETTE_SIZE buckets of the next
# power of two.
PALETTE_SIZE = 16


# Peak channel value for the theme color. The most saturated palette color is scaled
# so its brightest channel lands here. Pass None to keep the palette color as is.
TARGET_BRIGHTNESS = 200


# Shrink images larger than this in either dimension before extracting a palette.
# None keeps every pixel. A smaller value is much faster on large photographs, but
# resampling blends neighboring pixels, so the palette will shift slightly.
MAX_DIM: int | None = None
