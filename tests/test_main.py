"""Test the extraction pipeline and the command-line interface.

:created: 2026-10-17
"""

import logging
from pathlib import Path

import numpy as np
import pytest

from color_theme.errors import ImageLoadError, InvalidPaletteSizeError
from color_theme.image_arrays import write_rgb_image
from color_theme.main import ThemeResult, extract_theme, main

# median cut sorts these into one gray per bucket with dark red last
PIXELS = [[(100, 0, 0), (10, 10, 10)], [(20, 20, 20), (30, 30, 30)]]
PALETTE = [[10, 10, 10], [20, 20, 20], [30, 30, 30], [100, 0, 0]]


@pytest.fixture
def image_path(tmp_path: Path) -> Path:
    """Write a 2x2 png of one dark red and three grays."""
    return write_rgb_image(tmp_path / "image.png", np.array(PIXELS, dtype=np.uint8))


class TestExtractTheme:
    def test_from_path(self, image_path: Path) -> None:
        """Extract a palette and a brightened theme color from an image file."""
        result = extract_theme(image_path, 4, 200)
        assert result.palette.tolist() == PALETTE
        assert result.theme.tolist() == [200, 0, 0]

    def test_from_str_path(self, image_path: Path) -> None:
        """Accept a path as a string."""
        result = extract_theme(str(image_path), 4, 200)
        assert result.theme.tolist() == [200, 0, 0]

    def test_no_rescale(self, image_path: Path) -> None:
        """Return the palette color as is without a target brightness."""
        result = extract_theme(image_path, 4, None)
        assert result.theme.tolist() == [100, 0, 0]

    def test_from_pixels(self) -> None:
        """Extract from a pixel array without reordering it."""
        pixels = np.array(PIXELS, dtype=np.uint8).reshape(-1, 3)
        before = pixels.copy()
        result = extract_theme(pixels, 4, 200)
        assert result.palette.tolist() == PALETTE
        assert np.array_equal(pixels, before)

    def test_format(self, image_path: Path) -> None:
        """Format palette and theme as rgb strings."""
        result = extract_theme(image_path, 2, None)
        assert result.format_palette() == ["rgb(15, 15, 15)", "rgb(65, 15, 15)"]
        assert result.format_theme() == "rgb(65, 15, 15)"

    def test_result_is_frozen(self, image_path: Path) -> None:
        """Do not allow reassigning result fields."""
        result = extract_theme(image_path, 4)
        assert isinstance(result, ThemeResult)
        with pytest.raises(AttributeError):
            result.theme = np.zeros(3, dtype=np.uint8)  # type: ignore[misc]

    def test_too_few_pixels(self, image_path: Path) -> None:
        """Raise InvalidPaletteSizeError for the default palette of 16."""
        with pytest.raises(InvalidPaletteSizeError):
            _ = extract_theme(image_path)

    def test_missing_image(self, tmp_path: Path) -> None:
        """Raise ImageLoadError for a missing file."""
        with pytest.raises(ImageLoadError):
            _ = extract_theme(tmp_path / "missing.png", 4)


class TestMain:
    def test_prints_palette_and_theme(
        self, image_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Print the palette and the theme color."""
        assert main([str(image_path), "4", "200"]) == 0
        out = capsys.readouterr().out
        assert out == (
            "Palette: rgb(10, 10, 10) rgb(20, 20, 20) rgb(30, 30, 30) rgb(100, 0, 0)\n"
            + "Theme color: rgb(200, 0, 0)\n"
        )

    def test_default_brightness(
        self, image_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Use brightness 200 when only the palette size is given."""
        assert main([str(image_path), "4"]) == 0
        assert "Theme color: rgb(200, 0, 0)" in capsys.readouterr().out

    def test_no_rescale(
        self, image_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Print the palette color as is with --no-rescale."""
        assert main([str(image_path), "4", "--no-rescale"]) == 0
        assert "Theme color: rgb(100, 0, 0)" in capsys.readouterr().out

    def test_swatch(self, image_path: Path, tmp_path: Path) -> None:
        """Write a palette swatch with --swatch."""
        swatch = tmp_path / "swatch.png"
        assert main([str(image_path), "4", "--swatch", str(swatch)]) == 0
        assert swatch.exists()

    @pytest.mark.parametrize("args", [["0"], ["4", "256"], ["4", "-1"], ["five"]])
    def test_bad_arguments(self, image_path: Path, args: list[str]) -> None:
        """Exit with status 2 for bad palette sizes and brightness values."""
        with pytest.raises(SystemExit) as excinfo:
            _ = main([str(image_path), *args])
        assert excinfo.value.code == 2

    def test_missing_image(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Exit with status 2 and a message for a missing image."""
        with pytest.raises(SystemExit) as excinfo:
            _ = main([str(tmp_path / "missing.png"), "4"])
        assert excinfo.value.code == 2
        assert "Cannot load image" in capsys.readouterr().err

    @pytest.mark.parametrize("swatch", ["swatch.notaformat", "nodir/swatch.png"])
    def test_bad_swatch_path(
        self,
        image_path: Path,
        tmp_path: Path,
        swatch: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Exit with status 2 and print nothing to stdout for an unwritable swatch."""
        with pytest.raises(SystemExit) as excinfo:
            _ = main([str(image_path), "4", "--swatch", str(tmp_path / swatch)])
        assert excinfo.value.code == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Cannot write image" in captured.err

    def test_max_dim_and_verbose(
        self,
        image_path: Path,
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Shrink the image to one pixel with --max-dim and log progress."""
        caplog.set_level(logging.INFO)
        assert main([str(image_path), "1", "--max-dim", "1", "--verbose"]) == 0
        palette_line = capsys.readouterr().out.splitlines()[0]
        assert palette_line.startswith("Palette: rgb(")
        assert palette_line.count("rgb(") == 1
        assert "median cut: 1 pixels, 1 passes" in caplog.text
        assert "theme color" in caplog.text

    def test_max_dim_too_small_for_palette(self, image_path: Path) -> None:
        """Exit with status 2 when --max-dim leaves too few pixels."""
        with pytest.raises(SystemExit) as excinfo:
            _ = main([str(image_path), "2", "--max-dim", "1"])
        assert excinfo.value.code == 2
